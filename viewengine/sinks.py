"""Append-only byte sinks accepted by the writer."""

from __future__ import annotations

from typing import Any, Protocol


class ByteSink(Protocol):
    """Anything with ``write(bytes)``; binary files and ``io.BytesIO`` qualify."""

    def write(self, data: bytes) -> Any:
        ...


class ByteBufferSink:
    """Growable in-memory sink that only ever appends."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, data: bytes) -> int:
        self._buffer += data
        return len(data)

    @property
    def written_count(self) -> int:
        return len(self._buffer)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def decode(self, encoding: str = "utf-8") -> str:
        return self._buffer.decode(encoding)

    def __len__(self) -> int:
        return len(self._buffer)


__all__ = ["ByteBufferSink", "ByteSink"]
