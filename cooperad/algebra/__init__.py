from .rational import Rational
from .semirings import (
    Semiring,
    NaturalSemiring,
    BigIntegerSemiring,
    RationalSemiring,
    BooleanSemiring,
    TropicalSemiring,
    Monoid,
    StringMonoid,
    TupleMonoid,
    PolynomialSemiring,
    semiring_power,
)

__all__ = [
    "Rational",
    "Semiring",
    "NaturalSemiring",
    "BigIntegerSemiring",
    "RationalSemiring",
    "BooleanSemiring",
    "TropicalSemiring",
    "Monoid",
    "StringMonoid",
    "TupleMonoid",
    "PolynomialSemiring",
    "semiring_power",
]
