"""Rendering of the unsigned decimal conversion %u."""

from __future__ import annotations

from ftkit.spec import FormatSpec
from ftkit.textconv import count_decimal_digits, pad_spaces, pad_zeros


def _to_uint32(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value & 0xFFFFFFFF


def format_unsigned(value: int, spec: FormatSpec) -> str:
    """Render %u for a value taken as a 32-bit unsigned int."""
    num = _to_uint32(value)
    count = count_decimal_digits(num)
    if spec.dot and spec.precision <= 0 and num == 0:
        return pad_spaces(spec.width)
    digits = str(num)

    if spec.precision <= count:
        if -count <= spec.width <= count:
            return digits
        if spec.minus:
            return digits + pad_spaces(spec.width - count)
        pad = pad_zeros if spec.zero and spec.precision == -1 else pad_spaces
        return pad(spec.width - count) + digits

    body = pad_zeros(spec.precision - count) + digits
    if spec.precision >= spec.width:
        return body
    padding = pad_spaces(spec.width - spec.precision)
    return body + padding if spec.minus else padding + body