"""Tests for admissible-cut enumeration.

These tests verify:
1. The exact enumeration order on a reference tree
2. The product count formula and the admissibility invariant
3. Laziness and restartability of the generator
"""

import itertools

import pytest

from cooperad.trees.canonical import canonicalize
from cooperad.trees.cuts import (
    admissible_cuts,
    count_admissible_cuts,
    counit,
    delta,
    delta_stream,
    show_delta,
)
from cooperad.trees.tree_types import Tree, leaf, t

REFERENCE = t("f", [t("g", [leaf("x"), leaf("y")]), leaf("z")])

TREES = [
    leaf("x"),
    t("r", [leaf("a")]),
    t("r", [leaf("a"), leaf("b")]),
    REFERENCE,
    t("r", [leaf(i) for i in range(4)]),
    t("r", [t("a", [t("b", [leaf("c")])]), t("d", [leaf("e"), leaf("f")])]),
]


def _vertices(tree: Tree) -> int:
    return tree.size()


def test_reference_tree_golden_order() -> None:
    assert show_delta(REFERENCE) == [
        "[g(x, y)|z] ⊗ f",
        "[g(x, y)] ⊗ f(z)",
        "[x|y|z] ⊗ f(g)",
        "[x|y] ⊗ f(g, z)",
        "[x|z] ⊗ f(g(y))",
        "[x] ⊗ f(g(y), z)",
        "[y|z] ⊗ f(g(x))",
        "[y] ⊗ f(g(x), z)",
        "[z] ⊗ f(g(x, y))",
        "[] ⊗ f(g(x, y), z)",
    ]


def test_leaf_has_single_empty_cut() -> None:
    x = leaf("x")
    assert delta(x) == [((), x)]


@pytest.mark.parametrize("tree", TREES)
def test_count_formula(tree: Tree) -> None:
    assert sum(1 for _ in admissible_cuts(tree)) == count_admissible_cuts(tree)


def test_reference_count_is_ten() -> None:
    assert count_admissible_cuts(REFERENCE) == 10
    assert len(set(show_delta(REFERENCE))) == 10


@pytest.mark.parametrize("tree", TREES)
def test_cuts_partition_vertices(tree: Tree) -> None:
    for forest, trunk in delta_stream(tree):
        assert sum(_vertices(x) for x in forest) + _vertices(trunk) == _vertices(tree)
        assert trunk.label == tree.label


def _all_subtrees(tree: Tree) -> list[Tree]:
    out = [tree]
    for child in tree.children:
        out.extend(_all_subtrees(child))
    return out


def _is_pruned_copy(tree: Tree, trunk: Tree) -> bool:
    # Trunk children must be pruned copies of an ordered subsequence of the
    # original children (labels are distinct).
    kept = iter(trunk.children)
    current = next(kept, None)
    for child in tree.children:
        if current is not None and current.label == child.label:
            if not _is_pruned_copy(child, current):
                return False
            current = next(kept, None)
    return current is None


def test_admissibility_on_distinctly_labelled_tree() -> None:
    tree = t(0, [t(1, [leaf(2), t(3, [leaf(4)])]), t(5, [leaf(6)])])
    subtrees = set(_all_subtrees(tree))
    seen = set()
    for forest, trunk in admissible_cuts(tree):
        assert _is_pruned_copy(tree, trunk)
        assert all(piece in subtrees for piece in forest)
        seen.add((forest, trunk))
    assert len(seen) == count_admissible_cuts(tree)


def test_enumeration_is_lazy() -> None:
    star = t("r", [leaf(i) for i in range(40)])
    first = next(admissible_cuts(star))
    assert first.trunk == leaf("r")
    assert len(first.forest) == 40
    assert count_admissible_cuts(star) == 2**40


def test_partial_consumption_and_restart() -> None:
    prefix = list(itertools.islice(admissible_cuts(REFERENCE), 3))
    full = list(admissible_cuts(REFERENCE))
    assert prefix == full[:3]
    assert list(admissible_cuts(REFERENCE)) == full


def test_trunk_of_full_cut_keeps_isomorphism_class() -> None:
    *_, last = admissible_cuts(REFERENCE)
    assert last.forest == ()
    assert canonicalize(last.trunk) == canonicalize(REFERENCE)


@pytest.mark.parametrize("tree, expected", [(leaf("x"), 1), (t("r", [leaf("a")]), 0)])
def test_counit(tree: Tree, expected: int) -> None:
    assert counit(tree) == expected
