"""Magnitude arithmetic on little-endian sequences of 32-bit limbs.

Every function takes magnitudes as sequences of non-negative ints, each
below ``LIMB_BASE``, least significant first.  Results are normalized
tuples: no high zero limbs, and zero is ``(0,)``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest

LIMB_BITS = 32
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1

Limbs = tuple[int, ...]
ZERO: Limbs = (0,)

_DIGITS = frozenset("0123456789")
_DECIMAL_CHUNK = 9
_DECIMAL_CHUNK_BASE = 10**_DECIMAL_CHUNK


def normalize(limbs: Iterable[int]) -> Limbs:
    """Drop high zero limbs; an empty or all-zero input becomes ``(0,)``."""
    trimmed = list(limbs)
    while len(trimmed) > 1 and trimmed[-1] == 0:
        trimmed.pop()
    return tuple(trimmed) or ZERO


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> int:
    """Return -1, 0 or 1 as magnitude ``a`` is less than, equal to or greater than ``b``."""
    a, b = normalize(a), normalize(b)
    key_a = (len(a), a[::-1])
    key_b = (len(b), b[::-1])
    return (key_a > key_b) - (key_a < key_b)


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Sum of two magnitudes."""
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        total = x + y + carry
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS
    if carry:
        result.append(carry)
    return normalize(result)


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Difference ``a - b`` of two magnitudes; ``a`` must not be smaller than ``b``."""
    if compare_magnitude(a, b) < 0:
        raise ValueError("Subtrahend is larger than minuend")
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        diff = x - y - borrow
        borrow = 1 if diff < 0 else 0
        result.append(diff & LIMB_MASK)
    return normalize(result)


def _mul_small(limbs: Sequence[int], factor: int) -> Limbs:
    """Product of a magnitude and a single non-negative limb value."""
    if factor == 0:
        return ZERO
    result = []
    carry = 0
    for limb in limbs:
        cur = limb * factor + carry
        result.append(cur & LIMB_MASK)
        carry = cur >> LIMB_BITS
    while carry:
        result.append(carry & LIMB_MASK)
        carry >>= LIMB_BITS
    return normalize(result)


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Schoolbook product of two magnitudes."""
    a, b = normalize(a), normalize(b)
    if a == ZERO or b == ZERO:
        return ZERO
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b, start=i):
            cur = x * y + result[j] + carry
            result[j] = cur & LIMB_MASK
            carry = cur >> LIMB_BITS
        k = i + len(b)
        while carry:
            cur = result[k] + carry
            result[k] = cur & LIMB_MASK
            carry = cur >> LIMB_BITS
            k += 1
    return normalize(result)


def _divmod_small(limbs: Sequence[int], divisor: int) -> tuple[Limbs, int]:
    """Quotient and remainder of a magnitude divided by a single limb value."""
    quotient = []
    remainder = 0
    for limb in reversed(limbs):
        digit, remainder = divmod((remainder << LIMB_BITS) | limb, divisor)
        quotient.append(digit)
    return normalize(reversed(quotient)), remainder


def _value(limbs: Sequence[int]) -> int:
    return sum(limb << (LIMB_BITS * i) for i, limb in enumerate(limbs))


def divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[Limbs, Limbs]:
    """Long division of magnitudes, returning ``(quotient, remainder)``."""
    a, b = normalize(a), normalize(b)
    if b == ZERO:
        raise ZeroDivisionError("Division by zero")
    if compare_magnitude(a, b) < 0:
        return ZERO, a
    if len(b) == 1:
        quotient, remainder = _divmod_small(a, b[0])
        return quotient, (remainder,)

    # The top two divisor limbs bound each quotient digit to within a
    # couple of units, so only a few corrections are ever needed.
    top_divisor = (b[-1] << LIMB_BITS) | b[-2]
    offset = len(b) - 2
    quotient = []
    remainder = ZERO
    for limb in reversed(a):
        remainder = normalize((limb,) + remainder)
        digit = min(_value(remainder[offset:]) // top_divisor, LIMB_MASK)
        product = _mul_small(b, digit)
        while compare_magnitude(product, remainder) > 0:
            digit -= 1
            product = sub_magnitudes(product, b)
        if digit:
            remainder = sub_magnitudes(remainder, product)
        quotient.append(digit)
    return normalize(reversed(quotient)), remainder


def shift_left(limbs: Sequence[int], shift: int) -> Limbs:
    """Magnitude shifted left by ``shift`` bits; a negative shift goes right."""
    if shift < 0:
        return shift_right(limbs, -shift)
    limbs = normalize(limbs)
    if limbs == ZERO:
        return ZERO
    limb_shift, bit_shift = divmod(shift, LIMB_BITS)
    shifted = [0] * limb_shift
    carry = 0
    for limb in limbs:
        val = (limb << bit_shift) | carry
        shifted.append(val & LIMB_MASK)
        carry = val >> LIMB_BITS
    if carry:
        shifted.append(carry)
    return normalize(shifted)


def shift_right(limbs: Sequence[int], shift: int) -> Limbs:
    """Magnitude shifted right by ``shift`` bits; a negative shift goes left."""
    if shift < 0:
        return shift_left(limbs, -shift)
    limbs = normalize(limbs)
    limb_shift, bit_shift = divmod(shift, LIMB_BITS)
    if limb_shift >= len(limbs):
        return ZERO
    kept = limbs[limb_shift:]
    if bit_shift == 0:
        return normalize(kept)
    higher = kept[1:] + (0,)
    return normalize(
        ((low >> bit_shift) | (high << (LIMB_BITS - bit_shift))) & LIMB_MASK
        for low, high in zip(kept, higher)
    )


def and_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Limb-wise AND of two magnitudes."""
    return normalize(x & y for x, y in zip(a, b))


def or_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Limb-wise OR of two magnitudes."""
    return normalize(x | y for x, y in zip_longest(a, b, fillvalue=0))


def xor_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """Limb-wise XOR of two magnitudes."""
    return normalize(x ^ y for x, y in zip_longest(a, b, fillvalue=0))


def invert_limbs(limbs: Sequence[int]) -> Limbs:
    """Complement every bit within the width of the given limbs."""
    return normalize(~limb & LIMB_MASK for limb in limbs)


def set_bit(limbs: Sequence[int], i: int) -> Limbs:
    """Copy of the magnitude with bit ``i`` set."""
    if i < 0:
        raise ValueError("Bit index must be non-negative")
    limb_index, bit_index = divmod(i, LIMB_BITS)
    result = list(limbs)
    result.extend([0] * (limb_index + 1 - len(result)))
    result[limb_index] |= 1 << bit_index
    return normalize(result)


def get_bit(limbs: Sequence[int], i: int) -> bool:
    """Whether bit ``i`` of the magnitude is set."""
    if i < 0:
        raise ValueError("Bit index must be non-negative")
    limb_index, bit_index = divmod(i, LIMB_BITS)
    if limb_index >= len(limbs):
        return False
    return bool((limbs[limb_index] >> bit_index) & 1)


def from_int(n: int) -> tuple[Limbs, bool]:
    """Split a Python int into ``(magnitude limbs, is_negative)``."""
    negative = n < 0
    remaining = -n if negative else n
    limbs = []
    while True:
        limbs.append(remaining & LIMB_MASK)
        remaining >>= LIMB_BITS
        if not remaining:
            break
    return tuple(limbs), negative


def from_decimal(text: str) -> tuple[Limbs, bool]:
    """Parse an optionally signed decimal string into ``(limbs, is_negative)``."""
    if not text:
        raise ValueError("Empty string")
    negative = text[0] == "-"
    body = text[1:] if text[0] in "+-" else text
    digits = body.lstrip("0")
    if not digits:
        return ZERO, False
    if not set(digits) <= _DIGITS:
        raise ValueError("Invalid digit in string")

    head = len(digits) % _DECIMAL_CHUNK or _DECIMAL_CHUNK
    chunks = [digits[:head]]
    chunks.extend(
        digits[start:start + _DECIMAL_CHUNK]
        for start in range(head, len(digits), _DECIMAL_CHUNK)
    )
    limbs = ZERO
    for chunk in chunks:
        limbs = add_magnitudes(_mul_small(limbs, 10 ** len(chunk)), (int(chunk),))
    return limbs, negative


def to_decimal(limbs: Sequence[int], negative: bool = False) -> str:
    """Render a magnitude and sign as a base-10 string."""
    limbs = normalize(limbs)
    if limbs == ZERO:
        return "0"
    chunks = []
    while limbs != ZERO:
        limbs, chunk = _divmod_small(limbs, _DECIMAL_CHUNK_BASE)
        chunks.append(chunk)
    text = str(chunks[-1]) + "".join(
        f"{chunk:0{_DECIMAL_CHUNK}d}" for chunk in reversed(chunks[:-1])
    )
    return "-" + text if negative else text