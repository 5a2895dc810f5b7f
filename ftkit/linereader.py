"""Reading a source one line at a time through a fixed-size read buffer.

A source is an integer file descriptor or an object with a ``read(n)``
method returning bytes or text. Lines keep their trailing newline; the last
line may lack one.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Optional, Union

DEFAULT_BUFFER_SIZE = 42
MAX_BUFFER_SIZE = 8192000

Chunk = Union[bytes, str]


def _find_newline(data: Chunk, start: int = 0) -> int:
    """Index of the first newline in data at or after start, or -1."""
    if isinstance(data, str):
        return data.find("\n", start)
    return data.find(b"\n", start)


class LineReader:
    """Keeps the data read past the last returned line between calls."""

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(source, int) and not isinstance(source, bool) and source < 0:
            raise ValueError(f"file descriptor must not be negative, got {source}")
        if not 0 < buffer_size <= MAX_BUFFER_SIZE:
            raise ValueError(
                f"buffer size must be in 1..{MAX_BUFFER_SIZE}, got {buffer_size}"
            )
        self.source = source
        self.buffer_size = buffer_size
        self._stash: Optional[Chunk] = None

    def _read(self) -> Chunk:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        return self.source.read(self.buffer_size)

    def _take(self, size: int) -> Chunk:
        line = self._stash[:size]
        self._stash = self._stash[size:] or None
        return line

    def read_line(self) -> Optional[Chunk]:
        """The next line, or None once the source is exhausted."""
        if self._stash is not None:
            end = _find_newline(self._stash)
            if end >= 0:
                return self._take(end + 1)
        while True:
            try:
                chunk = self._read()
            except BaseException:
                self._stash = None
                raise
            if not chunk:
                break
            start = 0 if self._stash is None else len(self._stash)
            self._stash = chunk if self._stash is None else self._stash + chunk
            end = _find_newline(self._stash, start)
            if end >= 0:
                return self._take(end + 1)
        if self._stash:
            return self._take(len(self._stash))
        self._stash = None
        return None

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Chunk]:
    """Yield every line of source in order."""
    yield from LineReader(source, buffer_size)