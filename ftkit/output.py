"""Writing characters, strings and numbers to a stream or file descriptor.

A stream is either an object with a ``write`` method that takes text, or an
integer file descriptor. Text written to a descriptor is encoded as UTF-8.
Strings are written up to their first NUL, as a C string would be.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, Union

from ftkit.numbers import itoa


class _Writable(Protocol):
    def write(self, text: str) -> object: ...


Stream = Union[_Writable, int, None]


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _write(text: str, stream: Stream) -> None:
    if stream is None:
        stream = sys.stdout
    if isinstance(stream, bool):
        raise TypeError("a stream must be a writable object or a file descriptor")
    if isinstance(stream, int):
        data = text.encode("utf-8")
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def put_char(c: str | int, stream: Stream = None) -> None:
    """Write a single character, given as a one-character string or a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write(c, stream)
    elif isinstance(c, int) and not isinstance(c, bool):
        _write(chr(c), stream)
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def put_str(s: str, stream: Stream = None) -> None:
    """Write a string, stopping at its first NUL."""
    _write(_cstr(s), stream)


def put_endl(s: str, stream: Stream = None) -> None:
    """Write a string, stopping at its first NUL, followed by a newline."""
    _write(_cstr(s) + "\n", stream)


def put_nbr(n: int, stream: Stream = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _write(itoa(n), stream)