from .modular import mul_mod, pow_mod
from .primes import DETERMINISTIC_BASES, is_prime, random_prime
from .witness import decompose, is_witness_composite

__all__ = [
    'DETERMINISTIC_BASES',
    'decompose',
    'is_prime',
    'is_witness_composite',
    'mul_mod',
    'pow_mod',
    'random_prime',
]
