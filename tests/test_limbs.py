import pytest

from limbint.limbs import (
    LIMB_BASE,
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

A = "1234567890123456789012345678901234567890"
B = "9876543210987654321098765432109876543210"
D = "98798292837429834928283835357650098098098"


def dec(text):
    limbs, negative = from_decimal(text)
    assert not negative
    return limbs


def text(limbs):
    return to_decimal(limbs, False)


def test_normalize_strips_high_zeros():
    assert normalize([5, 0, 0]) == (5,)
    assert normalize([0, 0, 0]) == (0,)
    assert normalize([]) == (0,)


def test_from_int_limb_layout():
    assert from_int(0) == ((0,), False)
    assert from_int(LIMB_BASE) == ((0, 1), False)
    assert from_int(-(LIMB_BASE - 1)) == ((LIMB_BASE - 1,), True)


@pytest.mark.parametrize("n", [0, 42, -123456789, 987654321, 1 << 100, -(1 << 64) + 7])
def test_from_int_to_decimal_round_trip(n):
    limbs, negative = from_int(n)
    assert to_decimal(limbs, negative) == str(n)


def test_from_decimal_constructor_cases():
    assert to_decimal(*from_decimal("-0")) == "0"
    assert from_decimal("-0") == ((0,), False)
    assert to_decimal(*from_decimal("000")) == "0"
    assert to_decimal(*from_decimal("987654321")) == "987654321"
    assert to_decimal(*from_decimal("-123456789")) == "-123456789"
    assert to_decimal(*from_decimal("+42")) == "42"


def test_from_decimal_large_round_trip_with_leading_zeros():
    large = "".join(str(i % 67) for i in range(1, 150))
    assert text(dec(large)) == large
    assert text(dec("00000" + large)) == large


def test_from_decimal_errors():
    with pytest.raises(ValueError):
        from_decimal("")
    with pytest.raises(ValueError):
        from_decimal("12a3")
    with pytest.raises(ValueError):
        from_decimal("1 2")


def test_compare_magnitude():
    assert compare_magnitude(dec(A), dec(B)) == -1
    assert compare_magnitude(dec(B), dec(A)) == 1
    assert compare_magnitude(dec(A), dec(A)) == 0
    assert compare_magnitude((7, 0), (7,)) == 0


def test_large_add_sub_mul():
    a, b = dec(A), dec(B)
    assert text(add_magnitudes(a, b)) == "11111111101111111110111111111011111111100"
    assert text(sub_magnitudes(b, a)) == "8641975320864197532086419753208641975320"
    assert text(mul_magnitudes(a, b)) == (
        "12193263113702179522618503273386678859448712086533622923332237463801111263526900"
    )


def test_sub_requires_larger_minuend():
    with pytest.raises(ValueError):
        sub_magnitudes(dec(A), dec(B))


def test_small_arithmetic():
    a, b = from_int(1234)[0], from_int(5678)[0]
    assert text(add_magnitudes(a, b)) == "6912"
    assert text(sub_magnitudes(b, a)) == "4444"
    assert text(mul_magnitudes(a, b)) == str(1234 * 5678)
    q, r = divmod_magnitudes(b, a)
    assert (text(q), text(r)) == (str(5678 // 1234), str(5678 % 1234))


def test_carry_propagates_across_limbs():
    top = (LIMB_BASE - 1, LIMB_BASE - 1)
    assert add_magnitudes(top, (1,)) == (0, 0, 1)
    assert sub_magnitudes((0, 0, 1), (1,)) == top


def test_large_division():
    a, b = dec(A), dec(B)
    q, r = divmod_magnitudes(b, a)
    assert text(q) == "8"
    assert text(r) == "90000000009000000000900000000090"
    q, r = divmod_magnitudes(a, b)
    assert q == (0,)
    assert r == a


def test_division_of_power_recovers_factor():
    d = dec(D)
    dd = d
    for _ in range(5):
        dd = mul_magnitudes(dd, d)
    ddd = mul_magnitudes(dd, d)
    q, r = divmod_magnitudes(ddd, d)
    assert q == dd
    assert r == (0,)


@pytest.mark.parametrize(
    "dividend, divisor",
    [(A, "3"), (B, A), (B + B, "4294967297"), (A * 3, B), ("1000", "3"), ("1001", "3")],
)
def test_divmod_invariant(dividend, divisor):
    a, b = dec(dividend), dec(divisor)
    q, r = divmod_magnitudes(a, b)
    assert add_magnitudes(mul_magnitudes(q, b), r) == a
    assert compare_magnitude(r, b) < 0


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        divmod_magnitudes((1000,), (0,))


def test_bitwise_small():
    a, b = (0b101010,), (0b1100,)
    assert text(and_limbs(a, b)) == "8"
    assert text(or_limbs(a, b)) == "46"
    assert text(xor_limbs(a, b)) == "38"


def test_bitwise_large():
    d, e = dec("1234098712347612376"), dec("8384745747363263655555555")
    assert text(and_limbs(d, e)) == "1153029499447742656"
    assert text(or_limbs(d, e)) == "8384745828432476555425275"
    assert text(xor_limbs(d, e)) == "8384744675402977107682619"


def test_invert_twice_within_width():
    value = (LIMB_BASE - 2, 5)
    assert invert_limbs(invert_limbs(value)) == value
    assert invert_limbs((0,)) == (LIMB_BASE - 1,)


@pytest.mark.parametrize("shift", range(1, 21))
def test_shift_small(shift):
    shifted = shift_left((1,), shift)
    assert text(shifted) == str(1 << shift)
    assert shift_right(shifted, shift) == (1,)


@pytest.mark.parametrize("shift", [0, 31, 32, 33, 64, 95])
def test_shift_round_trip(shift):
    a = dec(A)
    assert shift_right(shift_left(a, shift), shift) == a
    assert shift_left(a, -shift) == shift_right(a, shift)


def test_shift_right_past_end_is_zero():
    assert shift_right(dec(A), 1000) == (0,)
    assert shift_left((0,), 40) == (0,)


def test_set_and_get_bit():
    limbs = set_bit((0,), 70)
    assert limbs == shift_left((1,), 70)
    assert get_bit(limbs, 70)
    assert not get_bit(limbs, 69)
    assert not get_bit(limbs, 500)


def test_bit_index_must_be_non_negative():
    with pytest.raises(ValueError):
        set_bit((1,), -1)
    with pytest.raises(ValueError):
        get_bit((1,), -1)


def test_to_decimal_sign():
    assert to_decimal(dec(A), True) == "-" + A
    assert to_decimal((0,), True) == "0"