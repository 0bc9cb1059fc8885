"""AttributeFileProbe: duck-typed recognition of uploaded files.

Recognizes the common upload shapes by attribute rather than by import, so
the package does not depend on any web framework:

- Werkzeug ``FileStorage``   : ``filename`` + ``stream``
- Starlette ``UploadFile``   : ``filename`` + ``file`` / ``size``
- Django ``UploadedFile``    : ``file`` + ``size``

A seekable stream is measured before any size attribute is consulted.
Werkzeug's ``content_length`` is 0 whenever the multipart part carries no
``Content-Length`` header, which is the usual case for browser uploads.

This probe satisfies the FileProbe Protocol structurally.
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass

__all__ = ["AttributeFileProbe"]


def _stream_length(stream: object) -> int | None:
    """Return the byte length of a seekable stream, restoring its position."""
    if not isinstance(stream, io.IOBase) or not stream.seekable():
        return None
    try:
        position = stream.tell()
        end = stream.seek(0, os.SEEK_END)
        stream.seek(position)
    except (OSError, ValueError):
        return None
    return end


@dataclass(frozen=True, slots=True)
class AttributeFileProbe:
    """Probe that identifies files by a filename or stream attribute.

    Attributes:
        size_attributes: Attribute names checked, in order, for an integer
            size when no seekable stream is available.  A ``None`` or
            missing attribute moves on to the next one.
        name_attributes: Attribute names marking a value as an upload.
        stream_attributes: Attribute names holding the upload's content.
            Their presence also marks a value as an upload, and a seekable
            stream found there is measured first.
    """

    size_attributes: tuple[str, ...] = ("size", "content_length")
    name_attributes: tuple[str, ...] = ("filename",)
    stream_attributes: tuple[str, ...] = ("stream", "file")

    def __post_init__(self) -> None:
        if not self.size_attributes:
            msg = "size_attributes must name at least one attribute"
            raise ValueError(msg)
        if not self.name_attributes and not self.stream_attributes:
            msg = "name_attributes or stream_attributes must name at least one attribute"
            raise ValueError(msg)

    def file_size(self, value: object) -> int | None:
        # Strings and raw bytes are field values, never uploads.
        if value is None or isinstance(value, (str, bytes, bytearray, memoryview)):
            return None

        if isinstance(value, io.IOBase):
            return _stream_length(value)

        markers = (*self.name_attributes, *self.stream_attributes)
        if not any(hasattr(value, attr) for attr in markers):
            return None

        for attr in self.stream_attributes:
            length = _stream_length(getattr(value, attr, None))
            if length is not None:
                return length

        for attr in self.size_attributes:
            size = getattr(value, attr, None)
            if isinstance(size, int) and not isinstance(size, bool):
                return size

        return None
