"""Semirings used to weight and merge cooperad terms.

A semiring supplies ``zero``, ``one``, ``add`` and ``mul``. Every instance also
supplies ``is_zero``, the semantic test used when sparse sums drop vanishing
entries; identity comparison against ``zero`` is not used anywhere.

Exports
- ``Semiring``: abstract interface.
- ``NaturalSemiring``, ``BigIntegerSemiring``, ``RationalSemiring``: numeric instances.
- ``BooleanSemiring``, ``TropicalSemiring``: closure-style instances.
- ``PolynomialSemiring``: sparse formal sums keyed by a ``Monoid``.
- ``StringMonoid``, ``TupleMonoid``: key monoids for ``PolynomialSemiring``.
- ``semiring_power``: ``a**n`` in any semiring by repeated squaring.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar, final

from typing_extensions import override

from cooperad.algebra.rational import ONE, ZERO, Rational

C = TypeVar("C")
K = TypeVar("K")


class Semiring(ABC, Generic[C]):
    """Abstract semiring ``(C, add, zero, mul, one)``.

    Callers are responsible for the algebraic laws; the engine only ever calls
    the operations below.
    """

    @property
    @abstractmethod
    def zero(self) -> C:
        """Additive identity."""
        raise NotImplementedError

    @property
    @abstractmethod
    def one(self) -> C:
        """Multiplicative identity."""
        raise NotImplementedError

    @abstractmethod
    def add(self, x: C, y: C) -> C:
        raise NotImplementedError

    @abstractmethod
    def mul(self, x: C, y: C) -> C:
        raise NotImplementedError

    @abstractmethod
    def is_zero(self, x: C) -> bool:
        """Semantic equality with ``zero``."""
        raise NotImplementedError

    @override
    def __str__(self) -> str:
        return f"{self.__class__.__name__}"


@final
@dataclass(frozen=True)
class NaturalSemiring(Semiring[int]):
    """Natural numbers with ordinary ``+`` and ``*``."""

    @property
    @override
    def zero(self) -> int:
        return 0

    @property
    @override
    def one(self) -> int:
        return 1

    @override
    def add(self, x: int, y: int) -> int:
        return x + y

    @override
    def mul(self, x: int, y: int) -> int:
        return x * y

    @override
    def is_zero(self, x: int) -> bool:
        return x == 0


@final
@dataclass(frozen=True)
class BigIntegerSemiring(Semiring[int]):
    """Unbounded integers (negative values allowed).

    Python integers never overflow, so this differs from ``NaturalSemiring``
    only in intent: coefficients may be signed.
    """

    @property
    @override
    def zero(self) -> int:
        return 0

    @property
    @override
    def one(self) -> int:
        return 1

    @override
    def add(self, x: int, y: int) -> int:
        return x + y

    @override
    def mul(self, x: int, y: int) -> int:
        return x * y

    @override
    def is_zero(self, x: int) -> bool:
        return x == 0


@final
@dataclass(frozen=True)
class RationalSemiring(Semiring[Rational]):
    """Exact rationals; required for orbit-normalized weights."""

    @property
    @override
    def zero(self) -> Rational:
        return ZERO

    @property
    @override
    def one(self) -> Rational:
        return ONE

    @override
    def add(self, x: Rational, y: Rational) -> Rational:
        return x.add(y)

    @override
    def mul(self, x: Rational, y: Rational) -> Rational:
        return x.mul(y)

    @override
    def is_zero(self, x: Rational) -> bool:
        return x.is_zero()


@final
@dataclass(frozen=True)
class BooleanSemiring(Semiring[bool]):
    """``(or, and)``: reachability-style weights."""

    @property
    @override
    def zero(self) -> bool:
        return False

    @property
    @override
    def one(self) -> bool:
        return True

    @override
    def add(self, x: bool, y: bool) -> bool:
        return x or y

    @override
    def mul(self, x: bool, y: bool) -> bool:
        return x and y

    @override
    def is_zero(self, x: bool) -> bool:
        return not x


@final
@dataclass(frozen=True)
class TropicalSemiring(Semiring[float]):
    """``(min, +)`` with ``zero = +inf`` and ``one = 0``."""

    @property
    @override
    def zero(self) -> float:
        return math.inf

    @property
    @override
    def one(self) -> float:
        return 0.0

    @override
    def add(self, x: float, y: float) -> float:
        return min(x, y)

    @override
    def mul(self, x: float, y: float) -> float:
        return x + y

    @override
    def is_zero(self, x: float) -> bool:
        return x == math.inf


class Monoid(ABC, Generic[K]):
    """Key monoid: ``empty`` plus an associative ``concat``."""

    @property
    @abstractmethod
    def empty(self) -> K:
        raise NotImplementedError

    @abstractmethod
    def concat(self, x: K, y: K) -> K:
        raise NotImplementedError


@final
@dataclass(frozen=True)
class StringMonoid(Monoid[str]):
    """Strings joined by ``joiner``; the empty string is the identity."""

    joiner: str = "·"

    @property
    @override
    def empty(self) -> str:
        return ""

    @override
    def concat(self, x: str, y: str) -> str:
        if not x:
            return y
        if not y:
            return x
        return f"{x}{self.joiner}{y}"


@final
@dataclass(frozen=True)
class TupleMonoid(Monoid[tuple]):
    """Free monoid on words stored as tuples."""

    @property
    @override
    def empty(self) -> tuple:
        return ()

    @override
    def concat(self, x: tuple, y: tuple) -> tuple:
        return x + y


@final
@dataclass(frozen=True)
class PolynomialSemiring(Semiring[dict[K, C]], Generic[K, C]):
    """Sparse formal sums ``K -> C`` with keys multiplied in a monoid.

    Parameters
    - keys: monoid used to multiply keys.
    - coefficients: semiring of coefficients (default ``NaturalSemiring``).

    ``add`` merges coefficients on equal keys. ``mul`` is the Cauchy product
    ``(a*b)[k1 <> k2] += a[k1] * b[k2]``. Both drop entries for which
    ``coefficients.is_zero`` holds. Results are always fresh dicts.

    Example
    >>> P = PolynomialSemiring(StringMonoid())
    >>> P.mul({"x": 2}, {"y": 3, "": 1})
    {'x·y': 6, 'x': 2}
    """

    keys: Monoid[K]
    coefficients: Semiring[C] = field(default_factory=NaturalSemiring)

    @property
    @override
    def zero(self) -> dict[K, C]:
        return {}

    @property
    @override
    def one(self) -> dict[K, C]:
        return {self.keys.empty: self.coefficients.one}

    def _normalize(self, m: dict[K, C]) -> dict[K, C]:
        return {k: v for k, v in m.items() if not self.coefficients.is_zero(v)}

    @override
    def add(self, x: Mapping[K, C], y: Mapping[K, C]) -> dict[K, C]:
        R = self.coefficients
        out = dict(x)
        for k, v in y.items():
            out[k] = R.add(out[k], v) if k in out else v
        return self._normalize(out)

    @override
    def mul(self, x: Mapping[K, C], y: Mapping[K, C]) -> dict[K, C]:
        R = self.coefficients
        out: dict[K, C] = {}
        for k1, c1 in x.items():
            for k2, c2 in y.items():
                k = self.keys.concat(k1, k2)
                term = R.mul(c1, c2)
                out[k] = R.add(out[k], term) if k in out else term
        return self._normalize(out)

    @override
    def is_zero(self, x: Mapping[K, C]) -> bool:
        return all(self.coefficients.is_zero(v) for v in x.values())


def semiring_power(S: Semiring[C], a: C, n: int) -> C:
    """Compute ``a**n`` in ``S`` by repeated squaring (``n >= 0``)."""
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got {n}.")
    acc = S.one
    base = a
    while n > 0:
        if n & 1:
            acc = S.mul(acc, base)
        base = S.mul(base, base)
        n >>= 1
    return acc
