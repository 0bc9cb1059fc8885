"""formpath - field-name path algebra for nested form data."""

from __future__ import annotations

from formpath.api import flatten_entries, has_changed, is_unchanged
from formpath.config import NormalizeConfig
from formpath.path import (
    APPEND,
    format_name,
    format_path,
    get_child_paths,
    is_prefix,
    parse,
)
from formpath.probes import AttributeFileProbe
from formpath.protocols import FileProbe
from formpath.submission import Submitter, lift_entries, with_submitter
from formpath.tree import (
    deep_equal,
    flatten,
    get_value,
    normalize,
    normalize_with,
    set_value,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "APPEND",
    "AttributeFileProbe",
    "FileProbe",
    "NormalizeConfig",
    "Submitter",
    "deep_equal",
    "flatten",
    "flatten_entries",
    "format_name",
    "format_path",
    "get_child_paths",
    "get_value",
    "has_changed",
    "is_prefix",
    "is_unchanged",
    "lift_entries",
    "normalize",
    "normalize_with",
    "parse",
    "set_value",
    "with_submitter",
]
