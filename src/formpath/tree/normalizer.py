"""Normalizer: canonical minimal form of a data tree.

Removes everything a form would consider "not filled in":

- empty strings and ``None``
- uploaded files of size zero (or every file, with ``accept_file=False``)
- mappings left without keys and empty lists

Mapping keys are re-inserted in sorted order, so two trees holding the same
data compare equal regardless of the order fields were entered in.  Lists
keep their length: an emptied element becomes a ``None`` hole instead of
shifting later elements, which would renumber fields such as ``tags[2]``.

Example::

    normalize({"b": "", "a": ["x", ""], "c": {"d": []}})
    # {"a": ["x", None]}
"""

from __future__ import annotations

from typing import Any

from formpath.config import NormalizeConfig
from formpath.probes import AttributeFileProbe
from formpath.protocols import FileProbe
from formpath.tree.nodes import is_mapping, is_sequence

__all__ = ["normalize", "normalize_with"]

# Module-level probe (stateless, safe to share across calls)
_default_probe = AttributeFileProbe()


def _normalize(value: Any, accept_file: bool, probe: FileProbe) -> Any:
    if is_mapping(value):
        result: dict[str, Any] = {}
        for key in sorted(value):
            data = _normalize(value[key], accept_file, probe)
            if data is not None:
                result[key] = data
        return result or None

    if is_sequence(value):
        if not value:
            return None
        return [_normalize(item, accept_file, probe) for item in value]

    if value is None or (isinstance(value, str) and value == ""):
        return None

    size = probe.file_size(value)
    if size is not None and (not accept_file or size == 0):
        return None

    return value


def normalize(
    value: Any,
    accept_file: bool = True,
    *,
    file_probe: FileProbe | None = None,
) -> Any:
    """Return the normalized copy of ``value``, or None if nothing remains.

    The input is never mutated; containers in the result are new objects
    while scalars are shared.

    Args:
        value:       Any tree.
        accept_file: When False every file-like value counts as empty.
        file_probe:  Recognizes file-like values.  Defaults to
                     ``AttributeFileProbe()``.

    Returns:
        The normalized tree, or None when ``value`` holds nothing.
    """
    probe = file_probe if file_probe is not None else _default_probe
    return _normalize(value, accept_file, probe)


def normalize_with(value: Any, config: NormalizeConfig | None = None) -> Any:
    """Normalize ``value`` using the options carried by ``config``."""
    cfg = config if config is not None else NormalizeConfig()
    return _normalize(value, cfg.accept_file, cfg.file_probe)
