"""Demonstration run exercising the Integer type on large values."""

from __future__ import annotations

import argparse

from limbint.integer import Integer, IntegerLike
from limbint.modular import mod_inverse


def extended_gcd(a: IntegerLike, b: IntegerLike) -> tuple[Integer, Integer, Integer]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``, ``g`` the gcd of ``a`` and ``b``."""
    old_r, r = Integer(a), Integer(b)
    old_s, s = Integer(1), Integer(0)
    old_t, t = Integer(0), Integer(1)
    while r:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def run_demo() -> list[str]:
    """Run the demonstration and return the lines it reports."""
    lines = []
    a = Integer(1234567890)
    b = Integer("98765432109876543210")
    lines.append(f"a = {a}")
    lines.append(f"b = {b}")

    aa = Integer("11111111111111111111111111111111111111111111111111111111111111111111")
    bb = Integer("22222222222222222222222222222222222222222222222222222222222222222222")
    lines.append(f"aa = {aa}")
    lines.append(f"bb = {bb}")
    lines.append(f"a + b = {aa + bb}")

    d = Integer("12345678901234567890123456789012345678901234567890")
    dd = d
    for _ in range(10):
        dd *= d
    ddd = dd * d
    lines.append(f"ddd/d = {ddd // d}")
    lines.append("ddd/d == dd" if ddd // d == dd else "ddd/d != dd")

    e = ddd % d
    lines.append(f"ddd % d = {e}")
    lines.append("ddd is divisible by d" if not e else "ddd is not divisible by d")

    bbb = Integer("48585747373838484843993282838457575748483829292938448")
    ccc = Integer("3949494494838382839459595848328283894949049439383")
    lines.append(str(Integer.gcd(bbb, ccc)))
    lines.append(str(Integer.lcm(bbb, ccc)))

    lines.append(str(mod_inverse(Integer(17), Integer(3120))))

    val1 = Integer("4855234577788899234509871023409817234098172350987690227473")
    val2 = Integer(
        "44854567892341234123409850987908709869876123409812734987654321113893929239484"
    )
    lines.append(str(mod_inverse(val1, val2)))

    p1 = bbb.power(Integer(300)) % ccc
    p2 = bbb.power_mod(Integer(300), ccc)
    if p1 == p2:
        lines.append("Power and modular power functions are consistent.")
    p2 = -p2
    if abs(p2) == -p2 and p1 == -(-p1):
        lines.append("Assignment and negation appears consistent.")

    original = p1
    incremented = p1 + 1
    restored = incremented - 1
    if incremented == original + 1 and restored == original and restored + 1 == incremented:
        lines.append("Increment and decrement operators appear consistent.")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration output."""
    parser = argparse.ArgumentParser(
        prog="limbint-demo",
        description="Exercise arbitrary-precision Integer arithmetic.",
    )
    parser.parse_args(argv)
    for line in run_demo():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())