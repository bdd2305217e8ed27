"""Modular inverse and exponentiation helpers that accept plain ints or Integers."""

from __future__ import annotations

from limbint.integer import Integer, IntegerLike


def mod_inverse(a: IntegerLike, m: IntegerLike) -> Integer:
    """Multiplicative inverse of ``|a|`` modulo a positive ``m``.

    The result lies in ``[0, m)``.  Any value modulo 1 has inverse 0.
    Raises ``ValueError`` for a zero or negative modulus, a zero ``a``, or
    when ``a`` and ``m`` are not coprime.
    """
    a, m = Integer(a), Integer(m)
    if not m:
        raise ValueError("Modulus must be non-zero")
    if m == 1:
        return Integer(0)
    if not a:
        raise ValueError("Inverse does not exist for zero")
    if m < 0:
        raise ValueError("Modulus must be greater than zero")
    if Integer.gcd(a, m) != 1:
        raise ValueError("Inverse does not exist for these values")

    dividend, divisor = abs(a), m
    x, y = Integer(1), Integer(0)
    while dividend > 1:
        quotient = dividend // divisor
        dividend, divisor = divisor, dividend % divisor
        x, y = y, (x - quotient * y) % m
    x %= m
    if x < 0:
        x += m
    return x


def power(base: IntegerLike, exponent: IntegerLike) -> Integer:
    """``base`` raised to a non-negative ``exponent``."""
    return Integer(base).power(Integer(exponent))


def power_mod(base: IntegerLike, exponent: IntegerLike, modulus: IntegerLike) -> Integer:
    """``base`` raised to a non-negative ``exponent``, reduced by ``modulus``."""
    return Integer(base).power_mod(Integer(exponent), Integer(modulus))