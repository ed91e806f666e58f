"""Canonical forms and automorphism counts for unordered rooted trees.

AHU-style bottom-up encoding:

- a leaf has code ``"()"`` and ``|Aut| = 1``;
- an internal node groups its children by code, sorts the distinct codes and
  emits ``"(" + code_1 * m_1 + code_2 * m_2 + ... + ")"``;
- ``|Aut| = prod_classes aut_class ** m * m!``.

Two trees get the same code iff they are isomorphic as unordered rooted trees.
Labels are ignored unless a ``show`` renderer is passed, in which case each
node's rendered label ``s`` prefixes its code as ``f"{len(s)}:{s}"``, so a
label containing parentheses cannot imitate child codes.

The traversal uses an explicit stack, so tree height is not limited by the
interpreter's recursion limit.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from typing import NamedTuple

from cooperad.trees.tree_types import LabelRenderer, Tree


class CanonicalInfo(NamedTuple):
    """Canonical code and exact automorphism-group order of a tree."""

    code: str
    aut: int


def _combine(prefix: str, child_infos: list[CanonicalInfo]) -> CanonicalInfo:
    if not child_infos:
        return CanonicalInfo(f"{prefix}()", 1)
    multiplicity = Counter(info.code for info in child_infos)
    aut_by_code = {info.code: info.aut for info in child_infos}
    body = "".join(code * multiplicity[code] for code in sorted(multiplicity))
    aut = 1
    for code, m in multiplicity.items():
        aut *= aut_by_code[code] ** m * math.factorial(m)
    return CanonicalInfo(f"{prefix}({body})", aut)


def _label_prefix(s: str) -> str:
    return f"{len(s)}:{s}"


def canonicalize(tree: Tree, show: LabelRenderer | None = None) -> CanonicalInfo:
    """Compute ``(code, aut)`` for ``tree``, independent of child order.

    Args:
        tree: Tree to canonicalize. Only its shape matters unless ``show`` is given.
        show: Optional label renderer; when given, labels take part in the code
            and in the automorphism count.

    Returns:
        ``CanonicalInfo(code, aut)`` with ``aut`` an exact Python integer.

    Complexity:
        O(n log n) for n nodes, dominated by sorting codes at each node.
    """
    memo: dict[int, CanonicalInfo] = {}
    stack: list[tuple[Tree, bool]] = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in memo:
            continue
        if not expanded:
            stack.append((node, True))
            stack.extend((child, False) for child in node.children if id(child) not in memo)
            continue
        prefix = _label_prefix(show(node.label)) if show is not None else ""
        memo[id(node)] = _combine(prefix, [memo[id(child)] for child in node.children])
    return memo[id(tree)]


def canonicalize_forest(forest: Iterable[Tree], show: LabelRenderer | None = None) -> CanonicalInfo:
    """Canonicalize a forest as the children of an unlabeled virtual root."""
    return _combine("", [canonicalize(x, show) for x in forest])


def aut_size(tree: Tree) -> int:
    """Order of the automorphism group of ``tree`` as an unordered tree."""
    return canonicalize(tree).aut


def is_isomorphic(a: Tree, b: Tree, show: LabelRenderer | None = None) -> bool:
    return canonicalize(a, show).code == canonicalize(b, show).code
