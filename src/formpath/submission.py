"""Submission helpers: from submitted (name, value) pairs to a draft tree.

A form submission arrives as an ordered list of ``(name, value)`` pairs,
e.g. from ``request.form.items(multi=True)`` in Flask or
``await request.form()`` in Starlette.  These helpers finish the boundary
work on that list:

- ``with_submitter`` adds the pair of the button that submitted the form,
  which browsers leave out of programmatic submissions.
- ``lift_entries`` folds the pairs into a nested draft tree using the field
  names' path syntax.

Example::

    entries = [("todos[0].content", "milk"), ("todos[1].content", "eggs")]
    lift_entries(with_submitter(entries, Submitter("intent", "save")))
    # {"todos": [{"content": "milk"}, {"content": "eggs"}], "intent": "save"}
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from formpath.tree.accessor import set_value

__all__ = ["Submitter", "lift_entries", "with_submitter"]


@dataclass(frozen=True, slots=True)
class Submitter:
    """The control whose activation submitted the form.

    Attributes:
        name:  The control's ``name`` attribute.  An empty name means the
               control contributes no entry.
        value: The control's ``value`` attribute.
        type:  The control's ``type``; only ``"submit"`` controls contribute.
    """

    name: str
    value: Any = ""
    type: str = "submit"


def _pairs(entries: Iterable[Any]) -> list[tuple[str, Any]]:
    pairs: list[tuple[str, Any]] = []
    for entry in entries:
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            msg = f"form entries must be (name, value) pairs, got {entry!r}"
            raise TypeError(msg)
        pairs.append((entry[0], entry[1]))
    return pairs


def with_submitter(
    entries: Iterable[tuple[str, Any]],
    submitter: Submitter | None = None,
) -> list[tuple[str, Any]]:
    """Return the entries with the submitter's pair included exactly once.

    The pair is appended only for a ``"submit"`` control with a non-empty
    name whose value is not already among the values submitted under that
    name.  The input is not modified.

    Raises:
        TypeError: If an entry is not a ``(name, value)`` pair.
    """
    pairs = _pairs(entries)

    if submitter is None or submitter.type != "submit" or submitter.name == "":
        return pairs

    submitted = [value for name, value in pairs if name == submitter.name]
    if submitter.value not in submitted:
        pairs.append((submitter.name, submitter.value))

    return pairs


def _collect(value: Any) -> Callable[[Any], Any]:
    """Updater storing ``value``, turning repeated names into lists."""

    def updater(current: Any) -> Any:
        if current is None:
            return value
        if isinstance(current, list):
            return [*current, value]
        return [current, value]

    return updater


def lift_entries(entries: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a draft tree from submitted ``(name, value)`` pairs.

    Values are stored unmodified; use ``normalize`` to prune empty ones.
    A name submitted several times collects its values into a list, and
    ``name[]`` always appends a new list element.

    Raises:
        TypeError: If an entry is not a ``(name, value)`` pair.
    """
    tree: dict[str, Any] = {}
    for name, value in _pairs(entries):
        set_value(tree, name, _collect(value))
    return tree
