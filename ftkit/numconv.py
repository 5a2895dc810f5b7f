"""Rendering of the signed decimal conversions %d and %i."""

from __future__ import annotations

from ftkit.spec import FormatSpec
from ftkit.textconv import count_decimal_digits, pad_spaces, pad_zeros


def _to_int32(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def sign_prefix(num: int, spec: FormatSpec) -> str:
    """The sign written before a number.

    The space flag wins over the plus flag for non-negative numbers; a
    negative number always gets a minus.
    """
    if spec.space and num >= 0:
        return " "
    if spec.plus and num >= 0:
        return "+"
    if num < 0:
        return "-"
    return ""


def _format_zero_without_digits(spec: FormatSpec) -> str:
    # A zero with an explicit precision of zero prints no digits at all.
    if spec.plus:
        if spec.minus:
            return "+" + pad_spaces(spec.width - 1)
        if spec.width != 0:
            return pad_spaces(spec.width - 1) + "+"
        return "+"
    return pad_spaces(spec.width)


def format_decimal(value: int, spec: FormatSpec) -> str:
    """Render %d or %i for a value taken as a 32-bit signed int."""
    num = _to_int32(value)
    if spec.dot and spec.precision <= 0 and num == 0:
        return _format_zero_without_digits(spec)
    magnitude = abs(num)
    digits = str(magnitude)
    count = count_decimal_digits(magnitude)
    sign = sign_prefix(num, spec)
    fill = len(sign)

    if spec.precision <= count:
        if spec.width <= count:
            return sign + digits
        if spec.minus:
            return sign + digits + pad_spaces(spec.width - count - fill)
        if spec.zero and spec.precision == -1:
            return sign + pad_zeros(spec.width - count - fill) + digits
        return pad_spaces(spec.width - count - fill) + sign + digits

    body = sign + pad_zeros(spec.precision - count) + digits
    if spec.precision >= spec.width:
        return body
    padding = pad_spaces(spec.width - spec.precision - fill)
    return body + padding if spec.minus else padding + body