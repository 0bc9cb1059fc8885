"""Safe accessor: read and write tree values by field name.

Neither operation raises on partial structures.  ``get_value`` returns its
default when the path runs into a missing key, ``None``, or a node of the
wrong shape.  ``set_value`` creates missing intermediate containers and
silently abandons writes it cannot perform.

Container creation looks one segment ahead: a missing node followed by an
index segment (``[0]`` or ``[]``) becomes a ``list``, anything else a
``dict``::

    tree: dict = {}
    set_value(tree, "todos[0].content", lambda _: "hi")
    # tree == {"todos": [{"content": "hi"}]}
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from enum import StrEnum, auto
from typing import Any

from formpath.path.codec import parse
from formpath.path.segments import APPEND, Segment, is_index, is_key
from formpath.tree.nodes import is_mapping, is_sequence

__all__ = ["ContainerKind", "get_value", "next_segment_is_index", "set_value"]

logger = logging.getLogger(__name__)


class ContainerKind(StrEnum):
    """Which container to create for a missing intermediate node."""

    LIST = auto()
    DICT = auto()

    @classmethod
    def for_segment(cls, path: Sequence[Segment], index: int) -> ContainerKind:
        """Pick the container able to hold the segment after ``path[index]``."""
        return cls.LIST if next_segment_is_index(path, index) else cls.DICT

    def create(self) -> list[Any] | dict[str, Any]:
        return [] if self is ContainerKind.LIST else {}


def next_segment_is_index(path: Sequence[Segment], index: int) -> bool:
    """Return True when ``path[index + 1]`` exists and addresses a list slot."""
    return index + 1 < len(path) and is_index(path[index + 1])


def _slot(container: Any, segment: Segment) -> str | int | None:
    """Translate a segment into a concrete key/index of ``container``.

    Returns None when the container cannot hold the segment.
    """
    if is_mapping(container):
        return segment if is_key(segment) else None
    if is_sequence(container):
        if segment is APPEND:
            return len(container)
        if is_index(segment):
            return segment  # type: ignore[return-value]
    return None


def _read(container: Any, slot: str | int) -> Any:
    if is_sequence(container):
        return container[slot] if slot < len(container) else None  # type: ignore[operator]
    return container.get(slot)


def _write(container: Any, slot: str | int, value: Any) -> None:
    if is_sequence(container) and slot >= len(container):  # type: ignore[operator]
        # Pad with holes so the value lands on its own index.
        container.extend([None] * (slot + 1 - len(container)))  # type: ignore[operator]
    container[slot] = value


def get_value(tree: Any, name: str | None, default: Any = None) -> Any:
    """Return the value stored at ``name`` inside ``tree``.

    The value is returned as stored (not normalized).  An empty name returns
    ``tree`` itself.

    Args:
        tree:    Root of the tree to read.
        name:    Field name such as ``"todos[0].content"``.
        default: Returned when the path does not exist.  Pass a sentinel to
                 tell an absent field from one holding ``None``.

    Returns:
        The addressed value, or ``default``.
    """
    pointer = tree

    for segment in parse(name):
        if pointer is None:
            return default

        if is_mapping(pointer) and is_key(segment):
            if segment not in pointer:
                return default
            pointer = pointer[segment]
        elif is_sequence(pointer) and is_index(segment) and segment is not APPEND:
            if segment >= len(pointer):  # type: ignore[operator]
                return default
            pointer = pointer[segment]
        else:
            return default

    return pointer


def set_value(
    tree: Any,
    name: str | None,
    updater: Callable[[Any], Any],
) -> None:
    """Store ``updater(current)`` at ``name`` inside ``tree``, in place.

    ``updater`` receives the value currently stored there (None when absent)
    and returns the value to store, so one primitive covers both plain
    assignment (``lambda _: value``) and merging (``lambda cur: [*cur, v]``).

    The write is silently abandoned when the path meets a node that cannot
    hold the next segment, e.g. a scalar, a ``str`` key on a list, or an
    index on a dict.  A non-container ``tree`` means nothing is written.
    """
    path = parse(name)
    last = len(path) - 1
    pointer = tree

    for index, segment in enumerate(path):
        slot = _slot(pointer, segment)
        if slot is None:
            logger.debug(
                "Abandoned write to %r: %s cannot hold segment %r",
                name,
                type(pointer).__name__,
                segment,
            )
            return

        current = _read(pointer, slot)

        if index == last:
            _write(pointer, slot, updater(current))
            return

        if current is None:
            current = ContainerKind.for_segment(path, index).create()
            _write(pointer, slot, current)

        pointer = current
