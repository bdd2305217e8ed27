# limbint

`limbint` provides signed integers of any size. Each value is stored as a
sign flag and a little-endian tuple of 32-bit limbs. The package does all
limb arithmetic itself and does not use Python's built-in big integers to
do it. It supports addition, subtraction, multiplication, division,
bitwise operations and shifts, and comparison. It also has a few modular
helpers.

## Installation

```
pip install .
```

To include the test tools:

```
pip install .[test]
```

## Usage

```python
from limbint.integer import Integer
from limbint.modular import mod_inverse, power, power_mod

a = Integer("1234567890123456789012345678901234567890")
b = Integer("9876543210987654321098765432109876543210")

print(a + b)    # 11111111101111111110111111111011111111100
print(b // a)   # 8
print(b % a)    # 90000000009000000000900000000090
print(a * 2 > b)

print(Integer.gcd(12, 18))   # 6
print(Integer.lcm(4, 6))     # 12

print(mod_inverse(17, 3120))                   # 2753
print(power(2, 100))
print(power_mod(56, 39998, Integer("4995958382272737434858969690760695493838")))
```

You can build an `Integer` from an `int`, from a decimal string with an
optional sign and leading zeros, or from another `Integer`. Any other type
raises `TypeError`. An empty string, or a string containing a non-digit,
raises `ValueError`.

`Integer.from_limbs(limbs, is_negative)` builds a value directly from limbs,
least significant limb first. It raises `ValueError` if a limb falls outside
`0 .. 2**32 - 1`.

The read-only properties `limbs` and `is_negative` expose the stored form.
`int()`, `hash()`, `bool()`, `abs()`, `str()` and `repr()` all work on an
`Integer`. An `Integer` can also be used wherever Python expects an index.

You can put a plain `int` on either side of the arithmetic, bitwise and
comparison operators. The result is always an `Integer`.

### Semantics worth knowing

- **Division:** `//` truncates toward zero, and `%` gives a remainder with
  the sign of the dividend. For example, `Integer(-7) // 2` is `-3` and
  `Integer(-7) % 2` is `-1`. Python's built-in `int` floors instead.
- **Division by zero:** dividing or taking a remainder by zero raises
  `ZeroDivisionError`.
- **Bitwise operators:**
  - `&`, `|` and `^` work on magnitudes and always give a non-negative
    result.
  - `~` is defined only for non-negative values. It flips the bits inside
    the limbs already in use. On a negative value it raises `ValueError`.
- **Shifts:** `<<` and `>>` move the magnitude and keep the sign. A negative
  shift goes the other way.
- **Powers:**
  - `Integer.power(exponent)` raises `ValueError` for a negative exponent.
  - `Integer.power_mod(exponent, modulus)` raises `ValueError` for a
    negative exponent or a zero modulus.
- **Modular inverse:** `mod_inverse(a, m)` inverts `|a|` modulo a positive
  `m` and gives a result in `[0, m)`.
  - Modulo 1, the inverse is 0.
  - It raises `ValueError` when `m` is zero or negative, when `a` is zero,
    or when `a` and `m` are not coprime.
- **Immutability:** `Integer` values never change. `with_bit(i)` returns a
  copy with bit `i` of the magnitude set. `get_bit(i)` reads bit `i`. Both
  raise `ValueError` for a negative index.
- **Gcd and lcm:** `Integer.gcd(a, b)` and `Integer.lcm(a, b)` accept
  `Integer`, `int` or decimal strings. `lcm` is zero if either argument is
  zero.

### What it does not do

- There is no `**` operator and no true division `/`. Use `power`,
  `power_mod` and `//`.
- Bitwise operators do not use two's-complement semantics for negative
  values.

### Low-level limb routines

`limbint.limbs` holds the magnitude routines that `Integer` is built on:

- `add_magnitudes`, `sub_magnitudes`, `mul_magnitudes` and
  `divmod_magnitudes`
- `compare_magnitude`
- `shift_left` and `shift_right`
- `and_limbs`, `or_limbs`, `xor_limbs` and `invert_limbs`
- `set_bit` and `get_bit`
- `from_int`, `from_decimal` and `to_decimal`
- `normalize`

Each routine takes sequences of 32-bit limbs, least significant limb first.
Each one returns normalized tuples: high zero limbs are dropped, and zero
is `(0,)`.

`sub_magnitudes` raises `ValueError` if the second magnitude is the larger.
`divmod_magnitudes` raises `ZeroDivisionError` for a zero divisor.

## Demo

This command prints a run through the arithmetic:

```
limbint-demo
```

The output includes:

- large sums, products and quotients
- gcd and lcm
- modular inverses
- consistency checks between `power` and `power_mod`

The same steps are available from Python:

- `limbint.demo.run_demo()` returns the printed lines as a list.
- `limbint.demo.extended_gcd(a, b)` returns `(g, x, y)` such that
  `a*x + b*y == g`.