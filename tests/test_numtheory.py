import math

import pytest

from cryptolab.numtheory import (
    extended_gcd,
    find_gcd,
    is_prime,
    is_prime_by_divisors,
    six_digit_primes,
)


def test_is_prime_small_values():
    assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]


def test_is_prime_29():
    assert is_prime(29) is True
    assert is_prime_by_divisors(29) is True


@pytest.mark.parametrize("n", [-5, 0, 1, 4, 9, 25, 49, 100])
def test_non_primes(n):
    assert is_prime(n) is False
    assert is_prime_by_divisors(n) is False


def test_both_primality_tests_agree():
    for n in range(-3, 500):
        assert is_prime(n) == is_prime_by_divisors(n)


def test_six_digit_primes_default():
    primes = six_digit_primes()
    assert len(primes) == 100
    assert primes == sorted(set(primes))
    assert all(100_000 <= p <= 999_999 for p in primes)
    assert all(is_prime(p) for p in primes)


def test_six_digit_primes_first():
    assert six_digit_primes(1) == [100003]


def test_six_digit_primes_no_gaps():
    primes = six_digit_primes(10)
    skipped = [n for n in range(100_000, primes[-1]) if is_prime(n) and n not in primes]
    assert skipped == []


def test_six_digit_primes_negative_count():
    with pytest.raises(ValueError):
        six_digit_primes(-1)


def test_find_gcd_source_example():
    assert find_gcd(35, 15) == 5


def test_find_gcd_with_zero():
    assert find_gcd(0, 7) == 7


def test_find_gcd_matches_math_gcd():
    for a in range(1, 60):
        for b in range(0, 60):
            assert find_gcd(a, b) == math.gcd(a, b)


def test_extended_gcd_bezout_identity():
    for a in range(0, 50):
        for b in range(0, 50):
            g, x, y = extended_gcd(a, b)
            assert a * x + b * y == g
            assert g == math.gcd(a, b)


def test_extended_gcd_b_zero():
    assert extended_gcd(12, 0) == (12, 1, 0)