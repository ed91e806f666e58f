"""Weighted comultiplication of trees with symmetry handling.

``weighted_delta`` consumes every admissible cut of a tree, attaches a
coefficient to each ``(forest, trunk)`` term and merges terms with equal keys
by the semiring's ``add``. The key and the coefficient depend on the mode:

- ``Planar``: key is the planar rendering of ``(forest, trunk)``.
- ``SymmetricAgg``: key is built from canonical codes, so isomorphic terms
  share a slot; coefficients are summed without normalization.
- ``SymmetricOrbit``: canonical keys, and every coefficient is divided by
  ``|Aut|`` of the whole input tree. Requires exact rational coefficients.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar, final

import jax
import jax.numpy as jnp

from cooperad.algebra.rational import Rational
from cooperad.algebra.semirings import RationalSemiring, Semiring
from cooperad.trees.canonical import canonicalize, canonicalize_forest
from cooperad.trees.cuts import delta_stream
from cooperad.trees.tree_types import Forest, LabelRenderer, Tree, key_forest, key_of, pair_key
from cooperad.weights.symmetry import Planar, SymmetryMode

logger = logging.getLogger(__name__)

A = TypeVar("A")
C = TypeVar("C")
K = TypeVar("K")

CoefficientFn = Callable[[Forest, Tree], C]


@final
@dataclass(frozen=True)
class WeightedTerm(Generic[A, C]):
    """Coefficient together with a representative ``(forest, trunk)``."""

    coef: C
    forest: Forest[A]
    trunk: Tree[A]


WeightedSum = dict[str, WeightedTerm[A, C]]


@dataclass
class EmitContext(Generic[A, C]):
    """State shared by every term emitted during one aggregation.

    ``as_tree`` is the whole input tree; ``SymmetricOrbit`` needs it to
    compute the normalizing ``1/|Aut|``. ``canonical_show`` must be the label
    renderer used for the keys, so keys and ``|Aut|`` see the same symmetries.
    """

    out: WeightedSum[A, C]
    semiring: Semiring[C]
    mode: SymmetryMode
    as_tree: Tree[A] | None = None
    canonical_show: LabelRenderer | None = None
    _orbit_factor: C | None = field(default=None, init=False, repr=False)

    def orbit_factor(self) -> C:
        if self.as_tree is None:
            raise ValueError(
                "symmetric-orbit mode requires the whole input tree (EmitContext.as_tree) "
                "to compute |Aut|."
            )
        if self._orbit_factor is None:
            self._orbit_factor = _reciprocal(
                self.semiring, canonicalize(self.as_tree, self.canonical_show).aut
            )
        return self._orbit_factor


def _reciprocal(semiring: Semiring[C], n: int) -> C:
    if not isinstance(semiring, RationalSemiring):
        raise ValueError(
            f"symmetric-orbit mode requires exact rational coefficients, got {semiring}."
        )
    return Rational(1, n)


def emit_term(ctx: EmitContext[A, C], key: str, forest: Forest[A], trunk: Tree[A], weight: C) -> None:
    """Merge one weighted term into ``ctx.out``, normalizing in orbit mode."""
    if ctx.mode.kind == "symmetric-orbit":
        weight = ctx.semiring.mul(weight, ctx.orbit_factor())
    prev = ctx.out.get(key)
    if prev is None:
        ctx.out[key] = WeightedTerm(ctx.semiring.add(ctx.semiring.zero, weight), forest, trunk)
    else:
        ctx.out[key] = WeightedTerm(ctx.semiring.add(prev.coef, weight), prev.forest, prev.trunk)


def term_key(
    forest: Forest[A],
    trunk: Tree[A],
    mode: SymmetryMode,
    show: LabelRenderer = str,
    canonical_show: LabelRenderer | None = None,
) -> str:
    """Merge key of a term: planar rendering, or canonical codes in symmetric modes."""
    if not mode.uses_canonical_keys:
        return pair_key(forest, trunk, show)
    forest_code = canonicalize_forest(forest, canonical_show).code
    trunk_code = canonicalize(trunk, canonical_show).code
    return f"{forest_code}|{trunk_code}"


def weighted_delta(
    tree: Tree[A],
    mode: SymmetryMode = Planar(),
    semiring: Semiring[C] | None = None,
    coef_of: CoefficientFn | None = None,
    show: LabelRenderer = str,
    canonical_show: LabelRenderer | None = None,
) -> WeightedSum[A, C]:
    """Weighted comultiplication of ``tree`` with duplicate terms merged.

    Args:
        tree: Input tree.
        mode: ``Planar()``, ``SymmetricAgg()`` or ``SymmetricOrbit()``.
        semiring: Coefficient semiring. Defaults to ``RationalSemiring()``.
        coef_of: Per-term weight ``(forest, trunk) -> coefficient``; defaults to
            ``semiring.one`` for every admissible cut.
        show: Label renderer for planar keys.
        canonical_show: If given, labels take part in canonical keys and, in
            ``SymmetricOrbit`` mode, in the ``|Aut|`` used for normalization.

    Returns:
        Mapping from key to ``WeightedTerm``; the first term seen for a key is
        kept as its representative.

    Raises:
        ValueError: ``SymmetricOrbit`` with a non-rational semiring.
    """
    S: Semiring = semiring if semiring is not None else RationalSemiring()
    ctx: EmitContext = EmitContext(
        out={}, semiring=S, mode=mode, as_tree=tree, canonical_show=canonical_show
    )
    if mode.kind == "symmetric-orbit":
        # Fail before enumerating anything.
        ctx.orbit_factor()

    n_cuts = 0
    for forest, trunk in delta_stream(tree):
        weight = coef_of(forest, trunk) if coef_of is not None else S.one
        emit_term(ctx, term_key(forest, trunk, mode, show, canonical_show), forest, trunk, weight)
        n_cuts += 1

    logger.debug("weighted_delta[%s]: %d cuts merged into %d terms", mode, n_cuts, len(ctx.out))
    return ctx.out


def to_poly(ws: WeightedSum[A, C]) -> dict[str, C]:
    """Drop representatives, keeping ``key -> coefficient``."""
    return {k: term.coef for k, term in ws.items()}


def total_coefficient(ws: WeightedSum[A, C], semiring: Semiring[C] | None = None) -> C:
    S: Semiring = semiring if semiring is not None else RationalSemiring()
    acc = S.zero
    for term in ws.values():
        acc = S.add(acc, term.coef)
    return acc


def show_weighted(
    ws: WeightedSum[A, C],
    show_label: LabelRenderer = str,
    show_coef: Callable[[C], str] = str,
) -> list[str]:
    return [
        f"{show_coef(term.coef)} · {key_forest(term.forest, show_label)} ⊗ {key_of(term.trunk, show_label)}"
        for term in ws.values()
    ]


def show_poly(
    poly: Mapping[K, C],
    show_key: Callable[[K], str] = str,
    show_coef: Callable[[C], str] = str,
) -> list[str]:
    return [f"{show_coef(w)} · {show_key(k)}" for k, w in poly.items()]


def to_dense(ws: WeightedSum[A, C], dtype: jnp.dtype = jnp.float32) -> tuple[list[str], jax.Array]:
    """Float approximation of the coefficients as a vector ordered by key.

    Returns:
        ``(keys, values)`` where ``values[i]`` approximates the coefficient of
        ``keys[i]``.
    """
    keys = sorted(ws)
    if not keys:
        return [], jnp.zeros((0,), dtype=dtype)
    return keys, jnp.asarray([float(ws[k].coef) for k in keys], dtype=dtype)
