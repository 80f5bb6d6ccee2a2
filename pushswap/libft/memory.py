"""Byte buffer helpers working on bytearray objects."""

from __future__ import annotations

from collections.abc import Sequence


def _check_span(buf: Sequence[int], n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("length and offset must not be negative")
    if offset + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(elems: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``elems * size`` bytes."""
    if elems < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(elems * size)


def memcpy(
    dest: bytearray | None, src: Sequence[int] | None, count: int
) -> bytearray | None:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``.

    When both buffers are missing, nothing is done and None is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_span(dest, count)
    _check_span(src, count)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(
    dest: bytearray,
    src: Sequence[int],
    n: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> bytearray:
    """Copy ``n`` bytes between possibly overlapping regions.

    The regions start at ``src_offset`` in ``src`` and ``dest_offset`` in
    ``dest``; ``src`` may be ``dest`` itself.
    """
    _check_span(dest, n, dest_offset)
    _check_span(src, n, src_offset)
    if src is dest and src_offset == dest_offset:
        return dest
    # The source slice is taken as a copy before assignment, so overlap is safe.
    dest[dest_offset:dest_offset + n] = bytes(src[src_offset:src_offset + n])
    return dest


def memchr(buf: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes."""
    if n < 0:
        raise ValueError("length must not be negative")
    index = buf.find(bytes([c & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(buf1: bytes | bytearray, buf2: bytes | bytearray, count: int) -> int:
    """Compare up to ``count`` bytes, stopping early at a zero byte.

    Bytes past the end of a buffer read as zero. The result is the
    difference of the first bytes that decide the comparison.
    """
    if count <= 0:
        return 0

    def at(buf: bytes | bytearray, i: int) -> int:
        return buf[i] if i < len(buf) else 0

    for i in range(count):
        a, b = at(buf1, i), at(buf2, i)
        if a == 0 or b == 0 or a != b or i == count - 1:
            return a - b
    return 0