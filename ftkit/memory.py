"""Filling, allocating and copying raw byte buffers.

Buffers are bytearrays. Counts that reach past the end of a buffer raise
ValueError instead of touching memory that is not there.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1

Buffer = bytearray
Readable = bytes | bytearray | memoryview


def _check_span(name: str, buf_len: int, offset: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > buf_len:
        raise ValueError(
            f"{name} span of {n} bytes at offset {offset} exceeds buffer length {buf_len}"
        )


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first n bytes of buf to c (taken modulo 256) and return buf."""
    _check_span("buffer", len(buf), 0, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> Buffer:
    """Return a zero-filled buffer of nmemb elements of size bytes each.

    Raises MemoryError when the total size does not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise MemoryError(f"{nmemb} elements of {size} bytes overflow the address space")
    return bytearray(nmemb * size)


def memcpy(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy the first n bytes of src into the start of dest and return dest."""
    _check_span("destination", len(dest), 0, n)
    _check_span("source", len(src), 0, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy n bytes inside buf from offset src to offset dest; the spans may overlap."""
    _check_span("destination", len(buf), dest, n)
    _check_span("source", len(buf), src, n)
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf