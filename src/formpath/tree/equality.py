"""Structural equality for data trees.

``deep_equal`` answers "did anything actually change?" for two trees,
typically two ``normalize`` results.  Unlike ``==`` it never coerces
between kinds: ``0`` is not ``False``, ``1`` is not ``True``, and ``""`` is
not ``None``.  Mapping key order is irrelevant; list order is not.

Trees must be acyclic.
"""

from __future__ import annotations

from typing import Any

from formpath.tree.nodes import is_container, is_falsy_scalar, is_mapping, is_number, is_sequence

__all__ = ["deep_equal"]


def _scalar_equal(left: Any, right: Any) -> bool:
    """Strict equality for two non-container values."""
    if is_container(left) or is_container(right):
        return False
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_number(left) and is_number(right):
        return bool(left == right)
    return type(left) is type(right) and bool(left == right)


def deep_equal(prev: Any, next_: Any) -> bool:
    """Return True if ``prev`` and ``next_`` hold the same data.

    Args:
        prev:  First tree.
        next_: Second tree.

    Returns:
        True for identical objects, strictly equal scalars, lists of equal
        length with pairwise equal items, and dicts with the same keys and
        pairwise equal values.  False otherwise.
    """
    if prev is next_ or _scalar_equal(prev, next_):
        return True

    if is_falsy_scalar(prev) or is_falsy_scalar(next_):
        return False

    if is_sequence(prev) and is_sequence(next_):
        if len(prev) != len(next_):
            return False
        return all(deep_equal(a, b) for a, b in zip(prev, next_, strict=True))

    if is_mapping(prev) and is_mapping(next_):
        if len(prev) != len(next_):
            return False
        return all(key in next_ and deep_equal(value, next_[key]) for key, value in prev.items())

    return False
