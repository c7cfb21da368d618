"""Byte-buffer primitives: filling, copying, moving, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Lengths are checked against the buffers involved, and a
length that would run past the end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(name: str, n: int, *buffers: ReadableBuffer) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{name} {n} exceeds buffer length {len(buf)}")


def fill(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_length("length", length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def zero(buf: WritableBuffer, n: int) -> WritableBuffer:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def copy(dst: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_length("n", n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def move(
    buf: WritableBuffer, dst_offset: int, src_offset: int, length: int
) -> WritableBuffer:
    """Copy ``length`` bytes within ``buf`` from ``src_offset`` to ``dst_offset``.

    The two regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    for name, offset in (("dst_offset", dst_offset), ("src_offset", src_offset)):
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError(f"{name} must be an int")
        if offset < 0:
            raise ValueError(f"{name} must not be negative, got {offset}")
    _check_length("length", length)
    end = max(dst_offset, src_offset) + length
    if end > len(buf):
        raise ValueError(f"region ends at {end}, past buffer length {len(buf)}")
    buf[dst_offset:dst_offset + length] = bytes(buf[src_offset:src_offset + length])
    return buf


def find_byte(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` (modulo 256) among the
    first ``n`` bytes of ``data``, or ``None`` if there is none."""
    _check_length("n", n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def compare(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns zero when they are equal, otherwise the difference of the first
    pair of bytes that differ.
    """
    _check_length("n", n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def zeroed(count: int, size: int) -> bytearray:
    """Return a new zero-filled buffer of ``count * size`` bytes."""
    for name, value in (("count", count), ("size", size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int")
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")
    return bytearray(count * size)