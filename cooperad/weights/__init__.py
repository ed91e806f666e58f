from .symmetry import SymmetryMode, Planar, SymmetricAgg, SymmetricOrbit, parse_mode
from .delta import (
    WeightedTerm,
    WeightedSum,
    EmitContext,
    emit_term,
    term_key,
    weighted_delta,
    to_poly,
    total_coefficient,
    show_weighted,
    show_poly,
    to_dense,
)

__all__ = [
    "SymmetryMode",
    "Planar",
    "SymmetricAgg",
    "SymmetricOrbit",
    "parse_mode",
    "WeightedTerm",
    "WeightedSum",
    "EmitContext",
    "emit_term",
    "term_key",
    "weighted_delta",
    "to_poly",
    "total_coefficient",
    "show_weighted",
    "show_poly",
    "to_dense",
]
