def mul_mod(a: int, b: int, m: int) -> int:
    if m < 1:
        msg = f'Modulus should be positive, but got: {m}'
        raise ValueError(msg)

    # no overflow, ints are unbounded
    return a * b % m


# https://en.wikipedia.org/wiki/Modular_exponentiation#Right-to-left_binary_method
def pow_mod(a: int, e: int, m: int) -> int:
    if m < 1:
        msg = f'Modulus should be positive, but got: {m}'
        raise ValueError(msg)
    if e < 0:
        msg = f'Exponent should be non-negative, but got: {e}'
        raise ValueError(msg)

    res = 1 % m
    a %= m
    while e:
        if e & 1:
            res = mul_mod(res, a, m)

        a = mul_mod(a, a, m)
        e >>= 1
    return res
