"""Parsing of one printf-style conversion specification.

A specification is what follows a ``%`` in a format string: any of the
flags ``#``, space, ``+``, ``-`` and ``0``, an optional field width, an
optional ``.`` with a precision, and one conversion character.
"""

from __future__ import annotations

from dataclasses import dataclass

from ftkit.chars import is_digit
from ftkit.numbers import atoi

_FLAGS = {"#": "sharp", " ": "space", "+": "plus", "-": "minus", "0": "zero"}


@dataclass(frozen=True)
class FormatSpec:
    """Flags, width and precision of a conversion, with its conversion character.

    A precision of -1 means none was given. An empty conversion means the
    format string ended before a conversion character was found.
    """

    sharp: bool = False
    space: bool = False
    plus: bool = False
    zero: bool = False
    minus: bool = False
    width: int = 0
    dot: bool = False
    precision: int = -1
    conversion: str = ""


def _skip_digits(fmt: str, pos: int) -> int:
    while pos < len(fmt) and is_digit(fmt[pos]):
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int = 0) -> tuple[FormatSpec, int]:
    """Parse the specification starting at pos, just after a ``%``.

    Returns the specification and the index just past its conversion
    character. The precision is read the way ``atoi`` reads a number, so
    leading blanks and a sign are taken into it; only digits are skipped.
    """
    if not 0 <= pos <= len(fmt):
        raise ValueError(f"position {pos} is outside the format string")
    flags: dict[str, bool] = {}
    while pos < len(fmt) and fmt[pos] in _FLAGS:
        flags[_FLAGS[fmt[pos]]] = True
        pos += 1
    width = 0
    if pos < len(fmt) and is_digit(fmt[pos]):
        width = atoi(fmt[pos:])
        pos = _skip_digits(fmt, pos)
    dot = False
    precision = -1
    if pos < len(fmt) and fmt[pos] == ".":
        dot = True
        pos += 1
        precision = atoi(fmt[pos:])
        pos = _skip_digits(fmt, pos)
    conversion = fmt[pos] if pos < len(fmt) else ""
    if conversion:
        pos += 1
    spec = FormatSpec(
        **flags,
        width=width,
        dot=dot,
        precision=precision,
        conversion=conversion,
    )
    return spec, pos