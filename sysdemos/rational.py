"""Rational numbers held as 64-bit numerator/denominator pairs with overflow tracking."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from sysdemos.lwlog import LwLog

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1

_log = LwLog()


def _wrap(value: int) -> int:
    """Reduce an integer to the two's-complement range of a 64-bit long."""
    return (value - LONG_MIN) % (1 << 64) + LONG_MIN


def _wrapping(value: int) -> tuple[int, bool]:
    """Return the wrapped value and whether it fitted without overflow."""
    wrapped = _wrap(value)
    return wrapped, wrapped == value


def checked_add(a: int, b: int) -> int:
    """Add two longs, raising OverflowError if the sum does not fit."""
    value, ok = _wrapping(a + b)
    if not ok:
        raise OverflowError(f"{a} + {b} overflows a 64-bit long")
    return value


def checked_subtract(a: int, b: int) -> int:
    """Subtract two longs, raising OverflowError if the difference does not fit."""
    value, ok = _wrapping(a - b)
    if not ok:
        raise OverflowError(f"{a} - {b} overflows a 64-bit long")
    return value


def checked_multiply(a: int, b: int) -> int:
    """Multiply two longs, raising OverflowError if the product does not fit."""
    value, ok = _wrapping(a * b)
    if not ok:
        raise OverflowError(f"{a} * {b} overflows a 64-bit long")
    return value


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; logs an error and returns 0 when both are zero."""
    if a == 0 and b == 0:
        _log.err("Either a (== %d) or b (== %d) must be non-zero", a, b)
        return 0
    return math.gcd(a, b)


@dataclass(frozen=True)
class Comparison:
    """Result of comparing two rationals: sign of the difference and validity."""

    comparison: int
    valid: bool


@dataclass(init=False)
class Rational:
    """A reduced fraction whose validity is lost on overflow or a zero denominator."""

    num: int
    den: int
    valid: bool

    def __init__(self, num: int, den: int = 1, valid: bool = True) -> None:
        self._assign(num, den, valid)

    def _assign(self, num: int, den: int, valid: bool) -> None:
        self.num = num
        self.den = den
        self.valid = bool(valid) and den != 0
        self._reduce()

    def _reduce(self) -> None:
        divisor = gcd(self.num, self.den)
        if divisor == 0:
            return
        self.num //= divisor
        self.den //= divisor
        if self.den < 0:
            self.den = _wrap(-self.den)
            self.num = _wrap(-self.num)

    @classmethod
    def from_long(cls, whole_number: int) -> Rational:
        """Build the rational whole_number/1."""
        return cls(whole_number, 1)

    def copy(self) -> Rational:
        """Return a fresh rational with the same value, marked valid again."""
        return Rational(self.num, self.den, True)

    def add(self, other: Rational) -> Rational:
        a, ok1 = _wrapping(self.num * other.den)
        b, ok2 = _wrapping(other.num * self.den)
        den, ok3 = _wrapping(self.den * other.den)
        total, ok4 = _wrapping(a + b)
        valid = self.valid and other.valid and ok1 and ok2 and ok3 and ok4
        return Rational(total, den, valid)

    def subtract(self, other: Rational) -> Rational:
        a, ok1 = _wrapping(self.num * other.den)
        b, ok2 = _wrapping(other.num * self.den)
        den, ok3 = _wrapping(self.den * other.den)
        diff, ok4 = _wrapping(a - b)
        valid = self.valid and other.valid and ok1 and ok2 and ok3 and ok4
        return Rational(diff, den, valid)

    def multiply(self, other: Rational) -> Rational:
        num, ok1 = _wrapping(self.num * other.num)
        den, ok2 = _wrapping(other.den * self.den)
        valid = self.valid and other.valid and ok1 and ok2
        return Rational(num, den, valid)

    def divide(self, other: Rational) -> Rational:
        # Both terms are built from this numerator and the other denominator.
        num, ok1 = _wrapping(self.num * other.den)
        den, ok2 = _wrapping(other.den * self.num)
        valid = self.valid and other.valid and ok1 and ok2
        return Rational(num, den, valid)

    def compare(self, other: Rational) -> Comparison:
        """Compare by cross-multiplication; the sign of .comparison orders them."""
        a, ok1 = _wrapping(self.num * other.den)
        b, ok2 = _wrapping(other.num * self.den)
        diff, ok3 = _wrapping(a - b)
        valid = self.valid and other.valid and ok1 and ok2 and ok3
        return Comparison(diff, valid)

    def reciprocal(self) -> None:
        """Swap numerator and denominator in place."""
        self._assign(self.den, self.num, self.valid)

    def negate(self) -> None:
        """Negate the value in place."""
        self.num = _wrap(-self.num)

    def __str__(self) -> str:
        return f"{self.num}/{self.den} (valid={int(self.valid)})"


def main(argv: list[str] | None = None) -> int:
    """Print a demonstration of rational arithmetic."""
    out = sys.stdout
    r1 = Rational(25, 75)
    r2 = Rational(-100, 200)
    Rational(-100, -200)

    out.write(f"r1 = {r1} r2 = {r2} r3 = {r2}\n")
    out.write(f"r1 + r2 = {r1.add(r2)}\n")
    out.write(f"r1 - r2 = {r1.subtract(r2)}\n")
    out.write(f"r1 * r2 = {r1.multiply(r2)}\n")
    out.write(f"r1 / r2 = {r1.divide(r2)}\n")

    result = Rational(1, 1)
    for power in range(64):
        if result.valid:
            out.write(f"r1^{power} = {result}\n")
        else:
            out.write(f"r1^{power} = {result} [underflow]\n")
        result = result.multiply(r1)

    r3 = Rational(0, 25)
    out.write(f"r3 = {r3}\n")
    r3.reciprocal()
    out.write(f"r3 (reciprocal) = {r3}\n")
    r3.reciprocal()
    out.write(f"r3 (reciprocal of invalid) = {r3}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())