"""Tests for canonical codes and automorphism counts of unordered rooted trees.

These tests verify:
1. Codes do not depend on child order and separate non-isomorphic trees
2. Exact automorphism-group orders, including very wide and very deep trees
3. Label-sensitive codes when a label renderer is supplied
"""

import math

import pytest

from cooperad.trees.canonical import (
    CanonicalInfo,
    aut_size,
    canonicalize,
    canonicalize_forest,
    is_isomorphic,
)
from cooperad.trees.tree_types import Tree, leaf, t


def test_leaf_canonical_form() -> None:
    assert canonicalize(leaf("x")) == CanonicalInfo(code="()", aut=1)


def test_symmetric_pair_canonical_form() -> None:
    assert canonicalize(t("r", [leaf("a"), leaf("b")])) == CanonicalInfo(code="(()())", aut=2)


def test_three_identical_children() -> None:
    assert canonicalize(t("r", [leaf(1), leaf(2), leaf(3)])).aut == 6


@pytest.mark.parametrize(
    "tree, expected_aut",
    [
        (t("r", [t("a", [leaf("x")])]), 1),
        (t("r", [t("a", [leaf("x"), leaf("y")]), leaf("z")]), 2),
        (t("r", [t("a", [leaf("x"), leaf("y")]), t("b", [leaf("x"), leaf("y")])]), 8),
        (t("r", [leaf(i) for i in range(5)]), 120),
        (t("r", [t("a", [leaf(1), leaf(2), leaf(3)]), t("b", [leaf(1)]), t("c", [leaf(1)])]), 12),
    ],
)
def test_automorphism_counts(tree: Tree, expected_aut: int) -> None:
    assert aut_size(tree) == expected_aut


def test_code_ignores_child_order() -> None:
    a = t("f", [t("g", [leaf("x"), leaf("y")]), leaf("z")])
    b = t("f", [leaf("z"), t("g", [leaf("y"), leaf("x")])])
    assert canonicalize(a) == canonicalize(b)
    assert is_isomorphic(a, b)


def test_non_isomorphic_trees_have_distinct_codes() -> None:
    chain = t("r", [t("a", [leaf("b")])])
    cherry = t("r", [leaf("a"), leaf("b")])
    assert canonicalize(chain).code != canonicalize(cherry).code
    assert not is_isomorphic(chain, cherry)


def test_label_sensitive_canonicalization() -> None:
    tree = t("r", [leaf("a"), leaf("b")])
    assert canonicalize(tree).aut == 2
    labelled = canonicalize(tree, show=str)
    assert labelled.aut == 1
    assert labelled.code == "1:r(1:a()1:b())"
    assert not is_isomorphic(t("r", [leaf("a")]), t("r", [leaf("b")]), show=str)


def test_labels_cannot_imitate_child_codes() -> None:
    two_children = t("r", [leaf("x"), leaf("y")])
    one_child = t("r", [leaf("x()y")])
    assert canonicalize(two_children, show=str).code != canonicalize(one_child, show=str).code
    assert not is_isomorphic(two_children, one_child, show=str)


def test_shared_subtrees_are_counted_per_occurrence() -> None:
    x = leaf("x")
    assert canonicalize(t("r", [x, x, x])).aut == 6


def test_forest_canonical_form_is_order_free() -> None:
    f1 = (leaf("x"), t("g", [leaf("y")]))
    f2 = (t("h", [leaf("z")]), leaf("w"))
    assert canonicalize_forest(f1).code == canonicalize_forest(f2).code
    assert canonicalize_forest(()) == CanonicalInfo(code="()", aut=1)


def test_deep_chain_beyond_recursion_limit() -> None:
    tree = leaf(0)
    for i in range(1, 3000):
        tree = Tree(i, (tree,))
    info = canonicalize(tree)
    assert info.aut == 1
    assert info.code == "(" * 3000 + ")" * 3000


def test_aut_is_exact_for_wide_trees() -> None:
    tree = t("r", [t(i, [leaf(0), leaf(1)]) for i in range(30)])
    # 30 identical cherries: 2**30 * 30!
    assert aut_size(tree) == 2**30 * math.factorial(30)
