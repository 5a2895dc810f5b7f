"""A printf work-alike supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from typing import Any

from ftkit.hexconv import format_hex
from ftkit.numconv import format_decimal
from ftkit.spec import FormatSpec, parse_spec
from ftkit.textconv import format_char, format_percent, format_pointer, format_string
from ftkit.unsignedconv import format_unsigned

_CONVERTERS: dict[str, Callable[[Any, FormatSpec], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda value, spec: format_hex(value, spec, upper=False),
    "X": lambda value, spec: format_hex(value, spec, upper=True),
}


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _convert(spec: FormatSpec, values: Iterator[Any]) -> str:
    if spec.conversion == "%":
        return format_percent(spec)
    converter = _CONVERTERS.get(spec.conversion)
    if converter is None:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return converter(value, spec)


def format_output(fmt: str, *args: Any) -> str:
    """The text printf would write for fmt and args.

    Unknown conversion characters produce nothing and take no argument;
    surplus arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    text = _cstr(fmt)
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(text):
        percent = text.find("%", pos)
        if percent < 0:
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:percent])
        spec, pos = parse_spec(text, percent + 1)
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Any = None) -> int:
    """Write the formatted text to file (a stream or a descriptor, stdout by default).

    Returns the number of characters written.
    """
    text = format_output(fmt, *args)
    if file is None:
        file = sys.stdout
    if isinstance(file, int) and not isinstance(file, bool):
        data = text.encode("utf-8")
        while data:
            written = os.write(file, data)
            data = data[written:]
    else:
        file.write(text)
    return len(text)