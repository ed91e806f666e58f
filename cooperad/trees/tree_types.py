"""Planar rooted trees and forests.

A ``Tree`` is a label plus an ordered tuple of child trees. Trees are
immutable and never share mutable state, so subtrees can be reused freely
between cuts.

The string renderers ``pretty``, ``key_of`` and ``key_forest`` give identical
strings for structurally identical input and distinct strings otherwise
(given an injective label renderer). They are the planar deduplication keys;
isomorphism-invariant keys live in ``cooperad.trees.canonical``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, final

A = TypeVar("A")

LabelRenderer = Callable[[object], str]


@final
@dataclass(frozen=True)
class Tree(Generic[A]):
    """Rooted tree with ordered children.

    Example
    >>> tr = t("f", [t("g", [leaf("x"), leaf("y")]), leaf("z")])
    >>> pretty(tr)
    'f(g(x, y), z)'
    """

    label: A
    children: tuple[Tree[A], ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def size(self) -> int:
        """Number of vertices."""
        total = 0
        stack: list[Tree[A]] = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total


Forest = tuple[Tree[A], ...]


def t(label: A, children: Iterable[Tree[A]] = ()) -> Tree[A]:
    return Tree(label, tuple(children))


def leaf(label: A) -> Tree[A]:
    return Tree(label, ())


def pretty(tree: Tree[A], show: LabelRenderer = str) -> str:
    if tree.is_leaf:
        return show(tree.label)
    return f"{show(tree.label)}({', '.join(pretty(k, show) for k in tree.children)})"


def key_of(tree: Tree[A], show: LabelRenderer = str) -> str:
    return pretty(tree, show)


def key_forest(forest: Iterable[Tree[A]], show: LabelRenderer = str) -> str:
    return f"[{'|'.join(key_of(x, show) for x in forest)}]"


def pair_key(forest: Iterable[Tree[A]], trunk: Tree[A], show: LabelRenderer = str) -> str:
    """Planar key of a ``(forest, trunk)`` term."""
    return f"{key_forest(forest, show)}|{key_of(trunk, show)}"
