"""Admissible cuts of planar rooted trees.

An admissible cut removes a set of subtrees such that at most one edge is cut
along any root-to-leaf path. Each cut is returned as ``(forest, trunk)``: the
removed subtrees in left-to-right order and what remains of the tree.

For every child edge there are two families of choices:

- cut: the whole child subtree goes into the forest and is not entered;
- descend: every admissible cut of the child contributes its forest, and its
  trunk stays in place as the child.

The cuts of a node are the cartesian product of its children's choices, with
the first child varying slowest. A leaf has exactly one cut, ``((), leaf)``.
Hence ``count(leaf) = 1`` and ``count(node) = prod(1 + count(child))``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, NamedTuple, TypeVar

from cooperad.trees.tree_types import Forest, LabelRenderer, Tree, key_forest, key_of

A = TypeVar("A")


class Cut(NamedTuple, Generic[A]):
    """One admissible cut: pruned ``forest`` and remaining ``trunk``."""

    forest: Forest[A]
    trunk: Tree[A]


class _Choice(NamedTuple, Generic[A]):
    forest: Forest[A]
    trunk_child: Tree[A] | None  # None means the edge above was cut


def _child_choices(child: Tree[A]) -> Iterator[_Choice[A]]:
    yield _Choice((child,), None)
    for forest, trunk in admissible_cuts(child):
        yield _Choice(forest, trunk)


def admissible_cuts(root: Tree[A]) -> Iterator[Cut[A]]:
    """Lazily yield every admissible cut of ``root``.

    Each call returns an independent generator; ``root`` is never modified.
    Abandoning the generator early needs no cleanup.

    Example
    >>> from cooperad.trees.tree_types import t, leaf
    >>> sum(1 for _ in admissible_cuts(t("f", [t("g", [leaf("x"), leaf("y")]), leaf("z")])))
    10
    """
    if root.is_leaf:
        yield Cut((), root)
        return

    children = root.children

    def go(i: int, acc_forest: Forest[A], acc_kids: tuple[Tree[A], ...]) -> Iterator[Cut[A]]:
        if i == len(children):
            yield Cut(acc_forest, Tree(root.label, acc_kids))
            return
        # Choices for child i are regenerated for every prefix combination.
        for choice in _child_choices(children[i]):
            kids = acc_kids if choice.trunk_child is None else acc_kids + (choice.trunk_child,)
            yield from go(i + 1, acc_forest + choice.forest, kids)

    yield from go(0, (), ())


def delta_stream(tree: Tree[A]) -> Iterator[tuple[Forest[A], Tree[A]]]:
    """Lazy comultiplication: ``(forest, trunk)`` for every admissible cut."""
    for forest, trunk in admissible_cuts(tree):
        yield forest, trunk


def delta(tree: Tree[A]) -> list[tuple[Forest[A], Tree[A]]]:
    """Eager comultiplication, in enumeration order."""
    return list(delta_stream(tree))


def counit(tree: Tree) -> int:
    """1 on a single-vertex tree, 0 otherwise."""
    return 1 if tree.is_leaf else 0


def count_admissible_cuts(tree: Tree) -> int:
    """Number of admissible cuts, computed from the product formula."""
    total = 1
    for child in tree.children:
        total *= 1 + count_admissible_cuts(child)
    return total


def show_delta(tree: Tree[A], show: LabelRenderer = str) -> list[str]:
    return [f"{key_forest(forest, show)} ⊗ {key_of(trunk, show)}" for forest, trunk in delta_stream(tree)]
