"""Primality tests, prime search and Euclid's algorithms."""

from __future__ import annotations

from itertools import count as _count
from itertools import islice
from math import isqrt

SIX_DIGIT_START = 100_000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def is_prime(n: int) -> bool:
    """Return True if n is prime, by trial division over odd numbers up to sqrt(n)."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def is_prime_by_divisors(n: int) -> bool:
    """Return True if n is prime, by counting every divisor from 1 to n."""
    if n <= 1:
        return False
    divisors = sum(1 for d in range(1, n + 1) if n % d == 0)
    return divisors <= 2


def six_digit_primes(count: int = 100) -> list[int]:
    """Return the first `count` primes starting from 100000."""
    if count < 0:
        raise ValueError("count must not be negative")
    return list(islice(filter(is_prime, _count(SIX_DIGIT_START)), count))


def find_gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while a != 0:
        a, b = _trunc_mod(b, a), a
    return b


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, the greatest common divisor."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = extended_gcd(b, _trunc_mod(a, b))
    return g, y1, x1 - _trunc_div(a, b) * y1