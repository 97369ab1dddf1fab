"""Append-only sinks the release-notes sections are written into."""

from __future__ import annotations

from typing import Protocol, TextIO

__all__ = ["DocumentBuilder", "DocumentSink", "StreamSink"]


class DocumentSink(Protocol):
    def append(self, block: str = "") -> None:
        """Add `block` followed by a single newline."""
        ...


class DocumentBuilder:
    """In-memory sink; `content()` is the finished document."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, block: str = "") -> None:
        self._parts.append(block)
        self._parts.append("\n")

    def content(self) -> str:
        return "".join(self._parts)


class StreamSink:
    """Sink that writes straight through to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def append(self, block: str = "") -> None:
        self._stream.write(block)
        self._stream.write("\n")
