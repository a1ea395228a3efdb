import logging
import secrets
from collections.abc import Iterable

from .witness import decompose, is_witness_composite

logger = logging.getLogger(__name__)

INT64_MAX = (1 << 63) - 1
INT64_MIN = -INT64_MAX - 1

DETERMINISTIC_BASES = (2, 3, 5, 7, 11, 13, 17)

# https://oeis.org/A014233
# The smallest strong pseudoprime to all of DETERMINISTIC_BASES
PSW_BOUND = 341_550_071_728_321

# The first 12 primes are enough for every n < 3.18 * 10^23
EXTRA_BASES = (19, 23, 29, 31, 37)


def _default_bases(n: int) -> tuple[int, ...]:
    if n < PSW_BOUND:
        return DETERMINISTIC_BASES

    logger.debug('%d is not below %d, extending bases with %s', n, PSW_BOUND, EXTRA_BASES)
    return DETERMINISTIC_BASES + EXTRA_BASES


def is_prime(n: int, bases: Iterable[int] | None = None) -> bool:
    """
    Deterministic for every signed 64-bit n when bases are not given.
    Custom bases are used as is, bases not less than n are skipped.
    """
    if not isinstance(n, int):
        msg = f'Expected int, but got: {type(n)}'
        raise TypeError(msg)
    if not INT64_MIN <= n <= INT64_MAX:
        msg = f'{n} does not fit into 64 bits'
        raise ValueError(msg)

    if bases is not None:
        bases = tuple(bases)
        for a in bases:
            if a < 2:  # noqa: PLR2004
                msg = f'Base should be at least 2, but got: {a}'
                raise ValueError(msg)

    # small cases
    if n < 2:  # noqa: PLR2004
        return False
    if n % 2 == 0:
        return n == 2  # noqa: PLR2004

    s, d = decompose(n)

    for a in _default_bases(n) if bases is None else bases:
        if a >= n:
            continue

        if is_witness_composite(a, d, n, s):
            logger.debug('%d is a witness for compositeness of %d', a, n)
            return False

    return True


# Returns a random prime from range [2, n)
def random_prime(n: int) -> int:
    if not 2 < n <= INT64_MAX + 1:  # noqa: PLR2004
        msg = f'No 64-bit primes below {n}'
        raise ValueError(msg)

    while True:
        x = secrets.randbelow(n)
        if is_prime(x):
            return x
