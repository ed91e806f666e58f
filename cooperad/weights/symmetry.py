from abc import ABC
from dataclasses import dataclass
from typing import Literal, final

from typing_extensions import override

SymmetryKind = Literal["planar", "symmetric-agg", "symmetric-orbit"]


@dataclass(frozen=True)
class SymmetryMode(ABC):
    """How weighted comultiplication treats tree symmetry. Exactly one applies per call."""

    kind: SymmetryKind

    @property
    def uses_canonical_keys(self) -> bool:
        return self.kind != "planar"

    @override
    def __str__(self) -> str:
        return self.kind


@final
@dataclass(frozen=True)
class Planar(SymmetryMode):
    """Keep child order; terms merge only when structurally identical."""

    kind: Literal["planar"] = "planar"


@final
@dataclass(frozen=True)
class SymmetricAgg(SymmetryMode):
    """Merge isomorphic terms under canonical keys; no normalization."""

    kind: Literal["symmetric-agg"] = "symmetric-agg"


@final
@dataclass(frozen=True)
class SymmetricOrbit(SymmetryMode):
    """Canonical keys, each term divided by ``|Aut|`` of the whole input tree."""

    kind: Literal["symmetric-orbit"] = "symmetric-orbit"


_MODES: dict[str, SymmetryMode] = {
    "planar": Planar(),
    "symmetric-agg": SymmetricAgg(),
    "symmetric-orbit": SymmetricOrbit(),
}


def parse_mode(name: str) -> SymmetryMode:
    try:
        return _MODES[name]
    except KeyError:
        raise ValueError(
            f"Unknown symmetry mode {name!r}; expected one of {sorted(_MODES)}."
        ) from None
