"""Exact rational arithmetic.

A ``Rational`` is a fraction ``p/q`` with ``q > 0`` stored in lowest terms.
Numerator and denominator are Python integers, so there is no overflow.

Conventions
- Construction with a zero denominator raises ``ZeroDivisionError``.
- ``str`` renders ``"p"`` when ``q == 1`` and ``"p/q"`` otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import final

from typing_extensions import override


@final
@total_ordering
@dataclass(frozen=True, init=False)
class Rational:
    """Exact fraction ``num/den`` normalized to lowest terms with ``den > 0``.

    Example
    >>> Rational(2, -4)
    Rational(num=-1, den=2)
    >>> str(Rational(6, 3))
    '2'
    """

    num: int
    den: int

    def __init__(self, num: int, den: int = 1) -> None:
        if den == 0:
            raise ZeroDivisionError(f"Rational with zero denominator: {num}/0")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(abs(num), den)
        object.__setattr__(self, "num", num // g)
        object.__setattr__(self, "den", den // g)

    @classmethod
    def from_int(cls, n: int) -> Rational:
        return cls(n, 1)

    def add(self, other: Rational) -> Rational:
        return Rational(self.num * other.den + other.num * self.den, self.den * other.den)

    def sub(self, other: Rational) -> Rational:
        return Rational(self.num * other.den - other.num * self.den, self.den * other.den)

    def mul(self, other: Rational) -> Rational:
        return Rational(self.num * other.num, self.den * other.den)

    def div(self, other: Rational) -> Rational:
        if other.num == 0:
            raise ZeroDivisionError(f"Division of {self} by zero rational")
        return Rational(self.num * other.den, self.den * other.num)

    def neg(self) -> Rational:
        return Rational(-self.num, self.den)

    def inv(self) -> Rational:
        return Rational(1, 1).div(self)

    def is_zero(self) -> bool:
        return self.num == 0

    def to_float(self) -> float:
        return self.num / self.den

    # Operator sugar ---------------------------------------------------------
    def __add__(self, other: Rational | int) -> Rational:
        return self.add(_coerce(other))

    def __radd__(self, other: int) -> Rational:
        return _coerce(other).add(self)

    def __sub__(self, other: Rational | int) -> Rational:
        return self.sub(_coerce(other))

    def __rsub__(self, other: int) -> Rational:
        return _coerce(other).sub(self)

    def __mul__(self, other: Rational | int) -> Rational:
        return self.mul(_coerce(other))

    def __rmul__(self, other: int) -> Rational:
        return _coerce(other).mul(self)

    def __truediv__(self, other: Rational | int) -> Rational:
        return self.div(_coerce(other))

    def __rtruediv__(self, other: int) -> Rational:
        return _coerce(other).div(self)

    def __neg__(self) -> Rational:
        return self.neg()

    def __float__(self) -> float:
        return self.to_float()

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self.den == 1 and self.num == other
        if not isinstance(other, Rational):
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def compare(self, other: Rational) -> int:
        """Return -1, 0 or 1 as ``self`` is below, equal to or above ``other``."""
        lhs = self.num * other.den
        rhs = other.num * self.den
        return (lhs > rhs) - (lhs < rhs)

    def __lt__(self, other: Rational | int) -> bool:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.compare(_coerce(other)) < 0

    @override
    def __hash__(self) -> int:
        # Integral values hash like the int they compare equal to.
        return hash(self.num) if self.den == 1 else hash((self.num, self.den))

    @override
    def __str__(self) -> str:
        return str(self.num) if self.den == 1 else f"{self.num}/{self.den}"


def _coerce(x: Rational | int) -> Rational:
    if isinstance(x, Rational):
        return x
    if isinstance(x, int):
        return Rational(x, 1)
    raise TypeError(f"Cannot combine Rational with {type(x).__name__}")


ZERO = Rational(0)
ONE = Rational(1)
