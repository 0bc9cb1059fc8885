"""FileProbe Protocol: the host capability used to recognize uploaded files.

The normalizer treats an empty upload (a file field submitted with nothing
selected) as "no value".  What counts as a file differs between hosts
(Werkzeug, Starlette, Django, plain streams), so the check is injected
rather than hard-coded.  Any object with a conformant ``file_size`` method
satisfies the Protocol; no inheritance is required.

Example::

    from formpath.protocols import FileProbe

    class BlobProbe:
        def file_size(self, value: object) -> int | None:
            return len(value.data) if isinstance(value, Blob) else None

    assert isinstance(BlobProbe(), FileProbe)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileProbe(Protocol):
    """Structural protocol for file-likeness probes.

    ``file_size`` must return the size in bytes when ``value`` is a
    file-like object, and None when it is not a file at all.  It must not
    raise and must not consume the file's content.
    """

    def file_size(self, value: object) -> int | None: ...
