"""Type aliases and shape predicates for form data trees.

A tree is built from three kinds of node:

- mapping  : ``dict`` from field keys to subtrees (insertion order matters)
- sequence : ``list`` of subtrees (index order matters)
- scalar   : anything else (str, int, float, bool, None, uploaded files, ...)

Tuples, sets and other iterables are scalars here; only ``list`` addresses
by index, mirroring the arrays a form submission produces.
"""

from __future__ import annotations

from typing import Any, TypeAlias

# Type alias for a form data tree
Tree: TypeAlias = dict[str, Any] | list[Any] | Any

# Field name -> normalized value, in traversal order
FlatMap: TypeAlias = dict[str, Any]


def is_mapping(value: object) -> bool:
    """Return True for mapping nodes."""
    return isinstance(value, dict)


def is_sequence(value: object) -> bool:
    """Return True for sequence nodes."""
    return isinstance(value, list)


def is_container(value: object) -> bool:
    return isinstance(value, (dict, list))


def is_number(value: object) -> bool:
    """Return True for int/float values.  ``bool`` is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_falsy_scalar(value: object) -> bool:
    """Return True for the scalars a form treats as "nothing": None, False, 0, NaN, "".

    Empty containers are not falsy scalars; an empty ``{}`` or ``[]`` is
    still a node that can be visited.
    """
    if value is None or value is False:
        return True
    if is_number(value):
        # NaN is the only value not equal to itself.
        return value == 0 or value != value  # type: ignore[comparison-overlap]
    if isinstance(value, str):
        return value == ""
    return False
