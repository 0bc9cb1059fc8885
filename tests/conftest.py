"""Shared fixtures: upload doubles shaped like common web framework file objects."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class FakeUpload:
    """Starlette/Django style upload: a filename plus a ``size`` attribute."""

    filename: str
    size: int


@dataclass
class FakeFileStorage:
    """Werkzeug style upload: a filename plus a seekable ``stream``."""

    filename: str
    stream: io.BytesIO = field(default_factory=io.BytesIO)

    @property
    def content_length(self) -> int:
        # Werkzeug reports 0 when the part carries no Content-Length header.
        return 0


@pytest.fixture
def empty_upload() -> FakeUpload:
    """A file input submitted with no file selected."""
    return FakeUpload(filename="", size=0)


@pytest.fixture
def upload() -> FakeUpload:
    """A non-empty uploaded file."""
    return FakeUpload(filename="report.pdf", size=2048)


@pytest.fixture
def todo_entries() -> list[tuple[str, Any]]:
    """A typical nested submission, in document order."""
    return [
        ("title", "Groceries"),
        ("todos[0].content", "milk"),
        ("todos[0].done", "on"),
        ("todos[1].content", "eggs"),
        ("todos[1].done", ""),
    ]


@pytest.fixture
def empty_stream_upload() -> FakeFileStorage:
    """A Werkzeug style file field submitted with nothing selected."""
    return FakeFileStorage(filename="")


@pytest.fixture
def stream_upload() -> FakeFileStorage:
    """A Werkzeug style upload holding content but no Content-Length header."""
    return FakeFileStorage(filename="notes.txt", stream=io.BytesIO(b"hello"))
