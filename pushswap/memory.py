"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero, in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)
    return buf


def calloc(count: int, size: int) -> bytearray:
    """New zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (as an unsigned char) within ``n`` bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, or 0."""
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``, in place."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buf`` from one offset to another; overlap is safe."""
    if dst_offset < 0 or src_offset < 0 or length < 0:
        raise ValueError("offsets and length must not be negative")
    if max(dst_offset, src_offset) + length > len(buf):
        raise ValueError("move reaches past the end of the buffer")
    chunk = bytes(buf[src_offset : src_offset + length])
    buf[dst_offset : dst_offset + length] = chunk
    return buf


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` (as an unsigned char)."""
    _check_count(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf