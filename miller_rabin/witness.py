from .modular import mul_mod, pow_mod


# n - 1 = d * 2^s, d is odd
def decompose(n: int) -> tuple[int, int]:
    if n < 3 or n % 2 == 0:  # noqa: PLR2004
        msg = f'Expected an odd number greater than 2, but got: {n}'
        raise ValueError(msg)

    s, d = 0, n - 1
    while d & 1 == 0:
        d >>= 1
        s += 1
    return s, d


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test#Miller%E2%80%93Rabin_test
def is_witness_composite(a: int, d: int, n: int, s: int) -> bool:
    """
    Returns True if the base a proves that n is composite.
    False only means that n is a strong probable prime to the base a.
    """
    x = pow_mod(a, d, n)
    if x in (1, n - 1):
        return False

    for _ in range(s - 1):
        x = mul_mod(x, x, n)

        if x == n - 1:
            return False
        # nontrivial square root of 1
        if x == 1:
            return True

    return True
