"""Byte-buffer helpers: search, compare, copy, move and fill."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_span(name: str, buffer: Buffer, start: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > len(buffer):
        raise ValueError(
            f"{name}: range {start}..{start + n} exceeds buffer of {len(buffer)} bytes"
        )


def mem_find(buffer: Buffer, value: int, n: int) -> Optional[int]:
    """Offset of the first byte equal to ``value & 0xFF`` in the first *n* bytes."""
    _check_span("buffer", buffer, 0, n)
    index = bytes(buffer[:n]).find(bytes([value & 0xFF]))
    return index if index >= 0 else None


def mem_compare(first: Buffer, second: Buffer, n: int) -> int:
    """Difference of the first differing unsigned bytes within *n*, or zero."""
    _check_span("first", first, 0, n)
    _check_span("second", second, 0, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def mem_copy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy *n* bytes from *src* to the start of *dst* and return *dst*."""
    _check_span("dst", dst, 0, n)
    _check_span("src", src, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def mem_move(
    buffer: MutableBuffer, dst_offset: int, src_offset: int, n: int
) -> MutableBuffer:
    """Move *n* bytes inside *buffer*; the regions may overlap."""
    _check_span("source", buffer, src_offset, n)
    _check_span("destination", buffer, dst_offset, n)
    buffer[dst_offset : dst_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def mem_set(buffer: MutableBuffer, value: int, n: int) -> MutableBuffer:
    """Fill the first *n* bytes with ``value & 0xFF`` and return *buffer*."""
    _check_span("buffer", buffer, 0, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: MutableBuffer, n: int) -> MutableBuffer:
    """Clear the first *n* bytes of *buffer*."""
    return mem_set(buffer, 0, n)


def alloc_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)