"""Flattener: project a data tree onto form field names.

Every node of the tree is visited and, when its normalized value is not
None, recorded under its field name.  Containers are recorded too, so one
tree produces entries for whole lists and objects as well as their leaves::

    flatten({"tags": ["a", ""]})
    # {"": {"tags": ["a", None]}, "tags": ["a", None], "tags[0]": "a"}

This lets a consumer bind either a whole substructure (a multi-select bound
to ``tags``) or individual leaves (a text input bound to ``tags[0]``).
Traversal follows the input's own ordering; only the recorded values are
normalized (and therefore key-sorted).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from formpath.path.codec import format_path, parse
from formpath.path.segments import Path
from formpath.protocols import FileProbe
from formpath.tree.nodes import FlatMap, is_falsy_scalar, is_mapping, is_sequence
from formpath.tree.normalizer import normalize

__all__ = ["flatten"]


def _identity(data: Any) -> Any:
    return data


def flatten(
    data: Any,
    *,
    resolve: Callable[[Any], Any] | None = None,
    prefix: str = "",
    file_probe: FileProbe | None = None,
) -> FlatMap:
    """Return a field name -> normalized value map for ``data``.

    Args:
        data:       The tree to flatten.  ``None``, ``False``, ``0`` and
                    ``""`` produce an empty map.
        resolve:    Applied to every node before normalization, e.g. to turn
                    domain objects into plain values.  Children are still
                    taken from the unresolved node.
        prefix:     Field name of ``data`` itself; child names are built
                    below it.
        file_probe: Forwarded to ``normalize``.

    Returns:
        A dict in traversal order; a name is absent when its value is empty.
    """
    result: FlatMap = {}
    resolve_fn = resolve if resolve is not None else _identity

    def visit(node: Any, path: Path) -> None:
        value = normalize(resolve_fn(node), file_probe=file_probe)

        if value is not None:
            result[format_path(path)] = value

        if is_sequence(node):
            for index, item in enumerate(node):
                visit(item, [*path, index])
        elif is_mapping(node):
            for key, item in node.items():
                visit(item, [*path, key])

    if not is_falsy_scalar(data):
        visit(data, parse(prefix))

    return result
