"""Rendering of the character, string, pointer and percent conversions.

Each function returns the text a conversion produces for a parsed
specification; writing it out is left to the caller.
"""

from __future__ import annotations

from typing import Optional, Union

from ftkit.spec import FormatSpec

_ULL_MASK = 2**64 - 1
_NULL = "(null)"
_NIL = "(nil)"


def pad_spaces(count: int) -> str:
    """As many spaces as the magnitude of count."""
    return " " * abs(count)


def pad_zeros(count: int) -> str:
    """As many zeros as the magnitude of count."""
    return "0" * abs(count)


def count_decimal_digits(n: int) -> int:
    """Number of decimal digits of a non-negative integer; zero has one."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return len(str(n))


def count_hex_digits(n: int) -> int:
    """Number of hexadecimal digits of a non-negative integer; zero has one."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return len(format(n, "x"))


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def format_char(value: Union[str, int], spec: FormatSpec) -> str:
    """Render %c: a single character padded to the field width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        ch = value
    elif isinstance(value, int) and not isinstance(value, bool):
        ch = chr(value & 0xFF)
    else:
        raise TypeError(f"expected a character or an int, got {type(value).__name__}")
    if spec.width == 0:
        return ch
    padding = pad_spaces(spec.width - 1)
    return ch + padding if spec.minus else padding + ch


def _justify(body: str, width: int, minus: bool) -> str:
    if width <= len(body):
        return body
    padding = pad_spaces(width - len(body))
    return body + padding if minus else padding + body


def _format_null(spec: FormatSpec) -> str:
    if spec.precision == -1 or spec.precision >= len(_NULL):
        return _justify(_NULL, spec.width, spec.minus)
    return pad_spaces(spec.width)


def _format_truncated(s: str, spec: FormatSpec) -> str:
    body = s[: max(spec.precision, 0)]
    if spec.precision >= spec.width:
        return body
    padding = pad_spaces(spec.width - spec.precision)
    return body + padding if spec.minus else padding + body


def format_string(value: Optional[str], spec: FormatSpec) -> str:
    """Render %s: a string cut to the precision and padded to the field width.

    None renders as ``(null)`` unless the precision is too short for it.
    """
    if value is None:
        return _format_null(spec)
    s = _cstr(value)
    if spec.precision == -1 or spec.precision >= len(s):
        if spec.precision == -1 and spec.dot:
            return pad_spaces(spec.width)
        return _justify(s, spec.width, spec.minus)
    return _format_truncated(s, spec)


def format_pointer(value: Optional[int], spec: FormatSpec) -> str:
    """Render %p: ``0x`` and the address in lower-case hex, or ``(nil)`` for null."""
    address = 0 if value is None else value & _ULL_MASK
    if address == 0:
        return _justify(_NIL, spec.width, spec.minus)
    return _justify("0x" + format(address, "x"), spec.width, spec.minus)


def format_percent(spec: FormatSpec) -> str:
    """Render %%: a single percent sign; flags and width are ignored."""
    if not isinstance(spec, FormatSpec):
        raise TypeError(f"expected a FormatSpec, got {type(spec).__name__}")
    return "%"