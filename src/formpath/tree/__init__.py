"""Tree subpackage: path-addressed operations on form data trees.

Re-exports the public API for the tree module:
- get_value / set_value: guarded read and in-place write by field name
- normalize / normalize_with: prune empty values, sort mapping keys
- flatten: project a tree onto a field name -> value map
- deep_equal: strict structural comparison
"""

from formpath.tree.accessor import get_value, next_segment_is_index, set_value
from formpath.tree.equality import deep_equal
from formpath.tree.flattener import flatten
from formpath.tree.nodes import FlatMap, Tree
from formpath.tree.normalizer import normalize, normalize_with

__all__ = [
    "FlatMap",
    "Tree",
    "deep_equal",
    "flatten",
    "get_value",
    "next_segment_is_index",
    "normalize",
    "normalize_with",
    "set_value",
]
