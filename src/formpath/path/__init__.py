"""Path subpackage: the field-name codec and its segment model.

Re-exports:
- parse / format_path / format_name: convert between names and segments
- is_prefix / get_child_paths: ancestry checks between field names
- APPEND, Segment, Path: the segment model
"""

from formpath.path.codec import (
    clear_parse_cache,
    format_name,
    format_path,
    get_child_paths,
    is_prefix,
    parse,
)
from formpath.path.segments import APPEND, RESERVED_SEGMENTS, Path, Segment, is_index

__all__ = [
    "APPEND",
    "RESERVED_SEGMENTS",
    "Path",
    "Segment",
    "clear_parse_cache",
    "format_name",
    "format_path",
    "get_child_paths",
    "is_index",
    "is_prefix",
    "parse",
]
