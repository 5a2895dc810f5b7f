"""Building, cutting and bounded copying of strings.

Text is read up to its first NUL, as a C string would be. The bounded
copies work on bytearray buffers holding NUL-terminated data.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _cbytes(data: bytes | bytearray) -> bytes:
    data = bytes(data)
    end = data.find(0)
    return data if end < 0 else data[:end]


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s starting at start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(s)
    if not text or length == 0 or start >= len(text):
        return ""
    return text[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    text = _cstr(s)
    chars = _cstr(charset)
    return text.strip(chars) if chars else text


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of s between occurrences of the single character sep."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _cstr(s)
    if sep == "\0":
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, char) for each character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(_cstr(s)))


def striteri(chars: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Replace each element of chars, up to its terminator, with f(index, element) in place."""
    for i, ch in enumerate(chars):
        if ch in ("\0", 0):
            break
        chars[i] = f(i, ch)


def _check_size(dst: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds destination length {len(dst)}")


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL; return len(src)."""
    _check_size(dst, size)
    data = _cbytes(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append src to the string in dst within a total of size bytes.

    Returns the length of the string it tried to build: len(dst) + len(src),
    or size + len(src) when dst already fills size.
    """
    _check_size(dst, size)
    end = bytes(dst).find(0)
    if end < 0:
        raise ValueError("destination holds no NUL-terminated string")
    data = _cbytes(src)
    if end >= size:
        return len(data) + size
    count = min(size - end - 1, len(data))
    dst[end : end + count] = data[:count]
    dst[end + count] = 0
    return len(data) + end