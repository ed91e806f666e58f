"""Rooted trees, their canonical forms and their admissible cuts.

Exports
- ``Tree``, ``t``, ``leaf``: planar rooted trees.
- ``key_of``, ``key_forest``, ``pretty``: planar string keys.
- ``canonicalize``: canonical code and automorphism count (unordered).
- ``admissible_cuts``: lazy enumeration of (forest, trunk) cuts.
- ``to_parent_array``, ``from_parent_array``, ``print_forest``: parent-array interop.
"""

from .tree_types import Tree, Forest, t, leaf, pretty, key_of, key_forest, pair_key
from .canonical import CanonicalInfo, canonicalize, canonicalize_forest, aut_size, is_isomorphic
from .cuts import (
    Cut,
    admissible_cuts,
    delta_stream,
    delta,
    counit,
    count_admissible_cuts,
    show_delta,
)
from .parent_arrays import (
    TreeBatch,
    to_parent_array,
    from_parent_array,
    stack_trees,
    render_tree,
    print_forest,
)

__all__ = [
    "Tree",
    "Forest",
    "t",
    "leaf",
    "pretty",
    "key_of",
    "key_forest",
    "pair_key",
    "CanonicalInfo",
    "canonicalize",
    "canonicalize_forest",
    "aut_size",
    "is_isomorphic",
    "Cut",
    "admissible_cuts",
    "delta_stream",
    "delta",
    "counit",
    "count_admissible_cuts",
    "show_delta",
    "TreeBatch",
    "to_parent_array",
    "from_parent_array",
    "stack_trees",
    "render_tree",
    "print_forest",
]
