"""
cooperad - weighted comultiplication of rooted trees.

Enumerates the admissible cuts of planar rooted trees, reduces them modulo
tree symmetry with exact canonical forms and automorphism counts, and merges
the resulting terms with coefficients in a pluggable semiring.

Main functions:
    admissible_cuts: Lazily enumerate (forest, trunk) cuts of a tree
    canonicalize: Canonical code and |Aut| of an unordered rooted tree
    weighted_delta: Weighted, symmetry-aware comultiplication
"""

from .algebra import Rational, RationalSemiring, NaturalSemiring, PolynomialSemiring
from .trees import Tree, t, leaf, admissible_cuts, canonicalize, count_admissible_cuts
from .weights import Planar, SymmetricAgg, SymmetricOrbit, weighted_delta

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Rational",
    "RationalSemiring",
    "NaturalSemiring",
    "PolynomialSemiring",
    "Tree",
    "t",
    "leaf",
    "admissible_cuts",
    "canonicalize",
    "count_admissible_cuts",
    "Planar",
    "SymmetricAgg",
    "SymmetricOrbit",
    "weighted_delta",
]
