"""Rendering of the hexadecimal conversions %x and %X."""

from __future__ import annotations

from ftkit.spec import FormatSpec
from ftkit.textconv import count_hex_digits, pad_spaces, pad_zeros


def _to_uint32(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value & 0xFFFFFFFF


def format_hex(value: int, spec: FormatSpec, upper: bool = False) -> str:
    """Render %x (or %X when upper) for a value taken as a 32-bit unsigned int.

    With the ``#`` flag a non-zero value gets a ``0x`` or ``0X`` prefix; any
    width padding that is not placed after the digits follows that prefix.
    """
    num = _to_uint32(value)
    if spec.dot and spec.precision <= 0 and num == 0:
        return pad_spaces(spec.width)
    digits = format(num, "X" if upper else "x")
    count = count_hex_digits(num)
    prefix = ("0X" if upper else "0x") if spec.sharp and num != 0 else ""

    if spec.precision <= count:
        if spec.width <= count:
            return prefix + digits
        if spec.minus:
            if prefix and spec.width > count + 2:
                trailing = pad_spaces(spec.width - count - 2)
            elif not spec.sharp:
                trailing = pad_spaces(spec.width - count)
            else:
                trailing = ""
            return prefix + digits + trailing
        if prefix and spec.width <= count + 2:
            return prefix + digits
        pad = pad_zeros if spec.zero and spec.precision == -1 else pad_spaces
        return prefix + pad(spec.width - count - len(prefix)) + digits

    body = prefix + pad_zeros(spec.precision - count) + digits
    if spec.precision >= spec.width:
        return body
    gap = spec.width - spec.precision - len(prefix)
    padding = pad_spaces(gap) if gap >= 0 else ""
    return body + padding if spec.minus else padding + body