"""Segment model for form field paths.

A path is an ordered list of segments.  Each segment is one of:

- ``str``     : a mapping key, e.g. ``"todos"`` in ``todos[0]``
- ``int``     : a non-negative list index, e.g. ``0`` in ``todos[0]``
- ``APPEND``  : the "new slot" marker written as ``[]``, e.g. ``tags[]``

``bool`` is a subclass of ``int`` in Python but is never treated as an index.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


class Append(Enum):
    """Sentinel type for the ``[]`` segment (an unspecified, new list slot)."""

    MARKER = "[]"

    def __repr__(self) -> str:
        return "APPEND"


APPEND = Append.MARKER

Segment: TypeAlias = str | int | Append
Path: TypeAlias = list[Segment]

# Segments that could redirect a write onto an object's internals.  They are
# dropped while parsing, never rejected.
RESERVED_SEGMENTS: frozenset[str] = frozenset({"__proto__", "constructor", "prototype"})


def is_index(segment: object) -> bool:
    """Return True for list-addressing segments (``int`` indices and ``APPEND``)."""
    if segment is APPEND:
        return True
    return isinstance(segment, int) and not isinstance(segment, bool)


def is_key(segment: object) -> bool:
    """Return True for mapping-addressing segments."""
    return isinstance(segment, str)


def same_segment(left: object, right: object) -> bool:
    """Strict segment comparison: ``1`` never equals ``True`` or ``"1"``."""
    if left is APPEND or right is APPEND:
        return left is right
    if is_index(left) and is_index(right):
        return left == right
    if is_key(left) and is_key(right):
        return left == right
    return False
