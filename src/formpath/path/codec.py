"""Path codec: converts between field names and path segment lists.

Field names follow the JavaScript property-access convention used by HTML
forms::

    parse("todos[0].content")              # ["todos", 0, "content"]
    format_path(["todos", 0, "content"])   # "todos[0].content"
    parse("tags[]")                        # ["tags", APPEND]

Parsing never raises.  Empty tokens and the reserved segments
``__proto__``, ``constructor`` and ``prototype`` are silently dropped, so a
hostile field name simply addresses a shorter path.

Parsed names are memoized in a module-level LRU cache.  The cache stores
immutable tuples; every caller receives a fresh list it may mutate.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Sequence

from cachetools import LRUCache, cached

from formpath.path.segments import (
    APPEND,
    RESERVED_SEGMENTS,
    Path,
    Segment,
    is_index,
    same_segment,
)

__all__ = [
    "PARSE_CACHE_SIZE",
    "clear_parse_cache",
    "format_name",
    "format_path",
    "get_child_paths",
    "is_prefix",
    "parse",
]

logger = logging.getLogger(__name__)

PARSE_CACHE_SIZE = 1024

# Splits on dots and captures bracket groups of digits (or empty brackets).
# Unmatched capture groups come back as None and are skipped like empty tokens.
_SPLIT = re.compile(r"\.|(\[\d*\])")

_parse_cache: LRUCache[str, tuple[Segment, ...]] = LRUCache(maxsize=PARSE_CACHE_SIZE)
_parse_lock = threading.Lock()


@cached(cache=_parse_cache, lock=_parse_lock)
def _parse_tokens(name: str) -> tuple[Segment, ...]:
    segments: list[Segment] = []
    dropped: list[str] = []

    for token in _SPLIT.split(name):
        if not token:
            continue
        if token in RESERVED_SEGMENTS:
            dropped.append(token)
            continue
        if token.startswith("[") and token.endswith("]"):
            digits = token[1:-1]
            segments.append(int(digits) if digits else APPEND)
        else:
            segments.append(token)

    if dropped:
        logger.debug("Dropped reserved segments %s from field name %r", dropped, name)

    return tuple(segments)


def clear_parse_cache() -> None:
    """Empty the memoized parse results."""
    with _parse_lock:
        _parse_cache.clear()


def parse(name: str | None) -> Path:
    """Return the path segments addressed by a field name.

    Args:
        name: Field name such as ``"todos[0].content"``.  ``None`` and ``""``
              address the root.

    Returns:
        A new list of segments; ``[]`` for the root.
    """
    if not name:
        return []
    return list(_parse_tokens(name))


def format_path(path: Sequence[Segment]) -> str:
    """Return the canonical field name for a list of segments.

    Indices render as ``[n]`` and ``APPEND`` as ``[]``.  Keys are joined with
    a dot, except for the first rendered segment and empty-string keys.
    """
    name = ""

    for segment in path:
        if segment is APPEND:
            name = f"{name}[]"
        elif is_index(segment):
            name = f"{name}[{segment}]"
        elif name == "" or segment == "":
            name = f"{name}{segment}"
        else:
            name = f"{name}.{segment}"

    return name


def format_name(prefix: str | None, segment: Segment | None = None) -> str:
    """Append one segment to a field name, re-canonicalizing the prefix."""
    if segment is None:
        return prefix if prefix is not None else ""
    return format_path([*parse(prefix), segment])


def _starts_with(path: Sequence[Segment], prefix: Sequence[Segment]) -> bool:
    return len(path) >= len(prefix) and all(
        same_segment(segment, path[index]) for index, segment in enumerate(prefix)
    )


def is_prefix(name: str, prefix: str) -> bool:
    """Return True if ``prefix`` addresses ``name`` or one of its ancestors.

    Comparison is segment-aligned: ``"todos[1]"`` is not a prefix of
    ``"todos[10]"``.
    """
    return _starts_with(parse(name), parse(prefix))


def get_child_paths(
    parent: str | Sequence[Segment] | None,
    child_name: str,
) -> Path | None:
    """Return the segments of ``child_name`` below ``parent``.

    Args:
        parent:     A field name or an already parsed path.
        child_name: The descendant field name.

    Returns:
        The remaining segments (``[]`` when both address the same field), or
        None when ``child_name`` is not inside ``parent``.
    """
    parent_path = parse(parent) if parent is None or isinstance(parent, str) else parent
    child_path = parse(child_name)

    if _starts_with(child_path, parent_path):
        return child_path[len(parent_path) :]

    return None
