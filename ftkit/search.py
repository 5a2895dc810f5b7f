"""Searching and comparing NUL-terminated strings and byte buffers.

Strings are read the way a C string would be: anything after an embedded
NUL is ignored. Positions are returned as indices, and a failed search
returns None.
"""

from __future__ import annotations

from itertools import zip_longest

Text = str | bytes | bytearray


def _truncate(s: Text) -> Text:
    if isinstance(s, str):
        end = s.find("\0")
    else:
        s = bytes(s)
        end = s.find(0)
    return s if end < 0 else s[:end]


def _codes(s: Text) -> list[int]:
    text = _truncate(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _target(s: Text, c: str | int) -> int:
    code = ord(c) if isinstance(c, str) else c
    return code if isinstance(s, str) else code & 0xFF


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def find_char(s: Text, c: str | int) -> int | None:
    """Index of the first occurrence of c in s.

    Searching for NUL finds the terminator, at the string's length.
    """
    codes = _codes(s)
    target = _target(s, c)
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def rfind_char(s: Text, c: str | int) -> int | None:
    """Index of the last occurrence of c in s; NUL finds the terminator."""
    codes = _codes(s)
    target = _target(s, c)
    if target == 0:
        return len(codes)
    try:
        return len(codes) - 1 - codes[::-1].index(target)
    except ValueError:
        return None


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most n characters; the result is the difference of the first pair that differs."""
    _check_count(n)
    if n == 0:
        return 0
    for i, (a, b) in enumerate(zip_longest(_codes(s1), _codes(s2), fillvalue=0)):
        if a != b or a == 0 or i == n - 1:
            return a - b
    return 0


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c (taken modulo 256) among the first n bytes."""
    _check_count(n)
    if n > len(data):
        raise ValueError(f"count {n} exceeds buffer length {len(data)}")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; the result is the difference of the first pair that differs."""
    _check_count(n)
    if n > len(a) or n > len(b):
        raise ValueError(f"count {n} exceeds buffer length")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def strnstr(big: Text, little: Text, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within the first length characters of big."""
    _check_count(length)
    big = _truncate(big)
    little = _truncate(little)
    if not little:
        return 0
    for start in range(min(length, len(big))):
        if start + len(little) > length:
            break
        if big.startswith(little, start):
            return start
    return None