"""Arbitrary-precision helpers shared by the basic operators.

Python ints have no fixed width, so everything here is exact at any magnitude.
"""
from __future__ import annotations


def prime_factors(n: int) -> list[int]:
    """Prime factorization of |n| in ascending order; [] when |n| < 2."""
    work = abs(n)
    factors: list[int] = []
    if work < 2:
        return factors
    divisor = 2
    while divisor * divisor <= work:
        if work % divisor == 0:
            work //= divisor
            factors.append(divisor)
        else:
            divisor += 1 if divisor == 2 else 2
    if work > 1:
        factors.append(work)
    return factors


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def trunc_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the remainder with the numerator's sign."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient, numerator - quotient * denominator


def binary_digits(n: int) -> list[int]:
    """Binary digits of |n|, most significant first; [0] for zero."""
    return [int(bit) for bit in format(abs(n), "b")]


def from_digits(digits, base: int = 2) -> int:
    total = 0
    for digit in digits:
        total = total * base + digit
    return total


def power_of_two(exponent: int) -> int:
    if exponent < 0:
        raise ValueError("negative exponent")
    return 1 << exponent
