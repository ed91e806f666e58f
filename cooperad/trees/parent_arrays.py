"""Parent-array encoding of trees and Unicode rendering.

Trees built from ``Tree`` objects can be exported to (and rebuilt from) the
"parent array" layout used for batched numerical work: one ``int32`` row per
tree, nodes indexed in preorder.

Conventions
- Nodes are indexed in preorder with the root at index 0.
- For each tree, ``parent[0] == -1`` and for all ``i > 0``, ``0 <= parent[i] < i``.
"""

from collections.abc import Sequence
from typing import NamedTuple

import jax.numpy as jnp

from cooperad.trees.tree_types import LabelRenderer, Tree


class TreeBatch(NamedTuple):
    """A batch container for equally sized rooted trees.

    Parameters
    - parent: 2D array of shape ``(num_trees, n)`` with dtype ``int32``.
      Each row encodes one rooted tree via its parent array in preorder:
      ``parent[0] == -1`` and for ``i > 0`` we have ``0 <= parent[i] < i``.

    Example
    >>> import jax.numpy as jnp
    >>> batch = TreeBatch(parent=jnp.array([[-1, 0, 0]], dtype=jnp.int32))
    >>> batch.parent.shape
    (1, 3)
    """

    parent: jnp.ndarray


def _preorder_parents(tree: Tree) -> list[int]:
    parent: list[int] = []
    stack: list[tuple[Tree, int]] = [(tree, -1)]
    while stack:
        node, p = stack.pop()
        idx = len(parent)
        parent.append(p)
        # Reversed so the leftmost child is numbered first.
        stack.extend((child, idx) for child in reversed(node.children))
    return parent


def to_parent_array(tree: Tree) -> jnp.ndarray:
    """Encode ``tree`` as a preorder parent array of dtype ``int32``."""
    return jnp.asarray(_preorder_parents(tree), dtype=jnp.int32)


def _build_children(parent: list[int]) -> list[list[int]]:
    """Compute adjacency lists (children) from a parent array.

    Args:
        parent: A single-tree parent array in preorder, length ``n``.

    Returns:
        A list of length ``n`` where entry ``i`` contains the child indices of ``i``.

    Complexity:
        O(n) time and O(n) additional space.
    """
    n = len(parent)
    children: list[list[int]] = [[] for _ in range(n)]
    for i in range(1, n):
        p = parent[i]
        if not 0 <= p < i:
            raise ValueError(f"Invalid parent array: parent[{i}] = {p} is not in [0, {i}).")
        children[p].append(i)
    return children


def from_parent_array(parent: Sequence[int] | jnp.ndarray, labels: Sequence | None = None) -> Tree:
    """Rebuild a ``Tree`` from a preorder parent array.

    Args:
        parent: Parent array with ``parent[0] == -1``.
        labels: Optional per-node labels; defaults to the node indices.

    Returns:
        The tree whose children appear in increasing index order.
    """
    parent_py: list[int] = [int(p) for p in jnp.asarray(parent).tolist()]
    if not parent_py or parent_py[0] != -1:
        raise ValueError("Invalid parent array: the root must come first with parent -1.")
    if labels is not None and len(labels) != len(parent_py):
        raise ValueError(
            f"Label count {len(labels)} does not match node count {len(parent_py)}."
        )
    children = _build_children(parent_py)
    built: list[Tree | None] = [None] * len(parent_py)
    # Preorder guarantees every child index exceeds its parent's.
    for i in range(len(parent_py) - 1, -1, -1):
        label = labels[i] if labels is not None else i
        built[i] = Tree(label, tuple(built[c] for c in children[i]))
    return built[0]


def stack_trees(trees: Sequence[Tree]) -> TreeBatch:
    """Stack trees with the same number of nodes into a ``TreeBatch``."""
    if not trees:
        raise ValueError("Cannot stack an empty sequence of trees.")
    rows = [_preorder_parents(tr) for tr in trees]
    n = len(rows[0])
    if any(len(row) != n for row in rows):
        raise ValueError("All trees in a TreeBatch must have the same number of nodes.")
    return TreeBatch(parent=jnp.asarray(rows, dtype=jnp.int32))


def render_tree(tree: Tree, show: LabelRenderer | None = None) -> list[str]:
    """Render a single rooted tree to Unicode lines.

    Args:
        tree: Tree to draw.
        show: Label renderer; if ``None`` every node is drawn as a bullet.

    Returns:
        A list of strings, each a line of the rendered tree using box-drawing
        characters.
    """

    def node_label(node: Tree) -> str:
        return f"•{show(node.label)}" if show is not None else "•"

    lines: list[str] = [node_label(tree)]

    def dfs(node: Tree, prefix: str) -> None:
        for idx, child in enumerate(node.children):
            is_last = idx == len(node.children) - 1
            branch = "└─ " if is_last else "├─ "
            lines.append(prefix + branch + node_label(child))
            dfs(child, prefix + ("   " if is_last else "│  "))

    # Root's immediate children are not indented.
    dfs(tree, "")
    return lines


def print_forest(batch: TreeBatch | Sequence[Tree], show: LabelRenderer | None = None) -> str:
    """Render trees as a fenced Markdown code block.

    Args:
        batch: A ``TreeBatch`` or a sequence of ``Tree`` objects.
        show: Label renderer passed to ``render_tree``.

    Returns:
        A single string containing a fenced code block with one Unicode tree
        per entry, separated by a blank line.
    """
    if isinstance(batch, TreeBatch):
        parents = jnp.asarray(batch.parent)
        trees = [from_parent_array(parents[row]) for row in range(parents.shape[0])]
    else:
        trees = list(batch)
    drawings = ["\n".join(render_tree(tr, show)) for tr in trees]
    body = "\n\n".join(drawings)
    return f"```\n{body}\n```"
