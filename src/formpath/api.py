"""Public API functions for formpath.

This module provides the user-facing shortcuts that combine the path codec,
accessor, normalizer, flattener and equality checker: change detection
between two drafts, and flattening a raw submission in one call.  Each call
is stateless; configuration is passed explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from formpath.config import NormalizeConfig
from formpath.submission import lift_entries
from formpath.tree.equality import deep_equal
from formpath.tree.flattener import flatten
from formpath.tree.nodes import FlatMap
from formpath.tree.normalizer import normalize_with

__all__ = ["flatten_entries", "has_changed", "is_unchanged"]


def is_unchanged(
    prev: Any,
    next_: Any,
    config: NormalizeConfig | None = None,
) -> bool:
    """Return True if two trees hold the same data once normalized.

    Empty strings, ``None``, empty containers and empty uploads are ignored
    and mapping key order does not matter, so a form that was edited and
    then restored counts as unchanged.

    Args:
        prev:   The tree before editing (e.g. the default values).
        next_:  The tree after editing (e.g. the lifted submission).
        config: Normalization options.  Defaults to ``NormalizeConfig()``.

    Returns:
        True when ``deep_equal(normalize(prev), normalize(next_))``.
    """
    return deep_equal(normalize_with(prev, config), normalize_with(next_, config))


def has_changed(
    prev: Any,
    next_: Any,
    config: NormalizeConfig | None = None,
) -> bool:
    """Return True if the normalized trees differ.  Inverse of ``is_unchanged``."""
    return not is_unchanged(prev, next_, config)


def flatten_entries(entries: Iterable[tuple[str, Any]], **options: Any) -> FlatMap:
    """Lift submitted ``(name, value)`` pairs into a tree and flatten it.

    Keyword arguments (``resolve``, ``prefix``, ``file_probe``) are forwarded
    to ``flatten``.  The result uses canonical field names, so ``a.b`` and
    ``a[0]`` style names come back normalized however they were submitted.
    """
    return flatten(lift_entries(entries), **options)
