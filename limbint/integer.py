"""Arbitrary-precision signed integers stored as sign and 32-bit limbs."""

from __future__ import annotations

import operator
from typing import Union

from limbint.limbs import (
    LIMB_BASE,
    LIMB_BITS,
    ZERO,
    Limbs,
    add_magnitudes,
    and_limbs,
    compare_magnitude,
    divmod_magnitudes,
    from_decimal,
    from_int,
    get_bit,
    invert_limbs,
    mul_magnitudes,
    normalize,
    or_limbs,
    set_bit,
    shift_left,
    shift_right,
    sub_magnitudes,
    to_decimal,
    xor_limbs,
)

IntegerLike = Union["Integer", int, str]


class Integer:
    """Immutable signed integer of unbounded size.

    Division and remainder truncate toward zero, so the remainder takes the
    sign of the dividend.  Bitwise AND, OR and XOR act on magnitudes and give
    non-negative results; shifts move the magnitude and keep the sign.
    """

    __slots__ = ("_limbs", "_negative")

    def __init__(self, value: IntegerLike = 0) -> None:
        if isinstance(value, Integer):
            limbs, negative = value._limbs, value._negative
        elif isinstance(value, str):
            limbs, negative = from_decimal(value)
        elif isinstance(value, int):
            limbs, negative = from_int(value)
        else:
            raise TypeError(f"Cannot build an Integer from {type(value).__name__}")
        self._limbs: Limbs = limbs
        self._negative: bool = negative and limbs != ZERO

    @classmethod
    def _make(cls, limbs: Limbs, negative: bool) -> Integer:
        obj = object.__new__(cls)
        obj._limbs = limbs
        obj._negative = negative and limbs != ZERO
        return obj

    @classmethod
    def from_limbs(cls, limbs, is_negative=False) -> Integer:
        """Build from little-endian 32-bit limbs and a sign flag."""
        limbs = tuple(limbs)
        for limb in limbs:
            if not 0 <= limb < LIMB_BASE:
                raise ValueError(f"Limb out of range: {limb}")
        return cls._make(normalize(limbs), bool(is_negative))

    @property
    def limbs(self) -> Limbs:
        """Magnitude limbs, least significant first."""
        return self._limbs

    @property
    def is_negative(self) -> bool:
        """Whether the value is below zero."""
        return self._negative

    def __str__(self) -> str:
        return to_decimal(self._limbs, self._negative)

    def __repr__(self) -> str:
        return f"Integer('{self}')"

    def __int__(self) -> int:
        magnitude = 0
        for limb in reversed(self._limbs):
            magnitude = (magnitude << LIMB_BITS) | limb
        return -magnitude if self._negative else magnitude

    def __index__(self) -> int:
        return int(self)

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return self._limbs != ZERO

    def __abs__(self) -> Integer:
        return self._make(self._limbs, False)

    @staticmethod
    def gcd(a: IntegerLike, b: IntegerLike) -> Integer:
        """Greatest common divisor by the Euclidean algorithm."""
        x, y = abs(Integer(a)), abs(Integer(b))
        while y:
            x, y = y, x % y
        return x

    @staticmethod
    def lcm(a: IntegerLike, b: IntegerLike) -> Integer:
        """Least common multiple; zero if either argument is zero."""
        a, b = Integer(a), Integer(b)
        if not a or not b:
            return Integer(0)
        return abs(a // Integer.gcd(a, b)) * abs(b)

    def get_bit(self, i: int) -> bool:
        """Whether bit ``i`` of the magnitude is set."""
        return get_bit(self._limbs, i)

    def with_bit(self, i: int) -> Integer:
        """Copy with bit ``i`` of the magnitude set; the sign is kept."""
        return self._make(set_bit(self._limbs, i), self._negative)

    @staticmethod
    def _coerce(value) -> Integer | None:
        if isinstance(value, Integer):
            return value
        if isinstance(value, int):
            return Integer(value)
        return None

    def _add(self, other: Integer) -> Integer:
        if self._negative == other._negative:
            return self._make(add_magnitudes(self._limbs, other._limbs), self._negative)
        if compare_magnitude(self._limbs, other._limbs) >= 0:
            return self._make(sub_magnitudes(self._limbs, other._limbs), self._negative)
        return self._make(sub_magnitudes(other._limbs, self._limbs), other._negative)

    def _mul(self, other: Integer) -> Integer:
        return self._make(
            mul_magnitudes(self._limbs, other._limbs),
            self._negative != other._negative,
        )

    def _divmod(self, other: Integer) -> tuple[Integer, Integer]:
        quotient, remainder = divmod_magnitudes(self._limbs, other._limbs)
        return (
            self._make(quotient, self._negative != other._negative),
            self._make(remainder, self._negative),
        )

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other._add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._add(-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other._add(-self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._mul(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other._mul(self)

    def __floordiv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._divmod(other)[0]

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other._divmod(self)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._divmod(other)[1]

    def __rmod__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other._divmod(self)[1]

    def __neg__(self) -> Integer:
        return self._make(self._limbs, not self._negative)

    def __pos__(self) -> Integer:
        return self

    def __and__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._make(and_limbs(self._limbs, other._limbs), False)

    def __rand__(self, other):
        return self.__and__(other)

    def __or__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._make(or_limbs(self._limbs, other._limbs), False)

    def __ror__(self, other):
        return self.__or__(other)

    def __xor__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._make(xor_limbs(self._limbs, other._limbs), False)

    def __rxor__(self, other):
        return self.__xor__(other)

    def __invert__(self) -> Integer:
        if self._negative:
            raise ValueError("Bitwise NOT only defined for non-negative values")
        return self._make(invert_limbs(self._limbs), False)

    def __lshift__(self, shift) -> Integer:
        return self._make(shift_left(self._limbs, operator.index(shift)), self._negative)

    def __rshift__(self, shift) -> Integer:
        return self._make(shift_right(self._limbs, operator.index(shift)), self._negative)

    def _compare(self, other: Integer) -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = compare_magnitude(self._limbs, other._limbs)
        return -order if self._negative else order

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

    def __lt__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._compare(other) < 0

    def __le__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._compare(other) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._compare(other) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self._compare(other) >= 0

    def _exponent_limbs(self, exponent) -> Limbs:
        exponent = self._coerce(exponent)
        if exponent is None:
            raise TypeError("Exponent must be an integer")
        if exponent._negative:
            raise ValueError("Negative exponent not supported")
        return exponent._limbs

    def power(self, exponent: IntegerLike) -> Integer:
        """``self`` raised to a non-negative exponent by repeated squaring."""
        remaining = self._exponent_limbs(exponent)
        result = Integer(1)
        base = self
        while remaining != ZERO:
            if get_bit(remaining, 0):
                result = result._mul(base)
            remaining = shift_right(remaining, 1)
            if remaining != ZERO:
                base = base._mul(base)
        return result

    def power_mod(self, exponent: IntegerLike, modulus: IntegerLike) -> Integer:
        """``self`` to a non-negative exponent, reduced by ``modulus`` at each step."""
        remaining = self._exponent_limbs(exponent)
        modulus = self._coerce(modulus)
        if modulus is None:
            raise TypeError("Modulus must be an integer")
        if not modulus:
            raise ValueError("Modulus must be non-zero")
        result = Integer(1)
        base = self % modulus
        while remaining != ZERO:
            if get_bit(remaining, 0):
                result = (result * base) % modulus
            base = (base * base) % modulus
            remaining = shift_right(remaining, 1)
        return result