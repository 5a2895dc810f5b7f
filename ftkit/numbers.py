"""Conversion between decimal text and 32-bit integers."""

from __future__ import annotations

import re

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[\t-\r ]*([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Values that overflow a 64-bit long saturate (checked one digit
    ahead), and the result is truncated to a 32-bit int.
    """
    match = _NUMBER.match(text)
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    following = text[match.end() : match.end() + 1] or "\0"
    lookahead = digits[1:] + following
    num = 0
    for digit, nxt in zip(digits, lookahead):
        if num > _LONG_MAX // 10:
            ahead = ord(nxt) - ord("0")
            if sign == 1 and ahead > _LONG_MAX % 10:
                return _wrap(_LONG_MAX, 32)
            if sign == -1 and ahead > -8:
                return _wrap(_LONG_MIN, 32)
        num = _wrap(num * 10 + int(digit), 64)
    return _wrap(num * sign, 32)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    magnitude = -n if n < 0 else n
    return ("-" if n < 0 else "") + str(magnitude)