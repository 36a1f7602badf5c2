"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def bzero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    _check_count(count, buffer)
    buffer[:count] = bytes(count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` among the first ``count``.

    ``value`` is reduced to a byte first. Returns None when it is not found.
    """
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, count: int) -> int:
    """Compare the first ``count`` bytes.

    Returns 0 when they are equal, otherwise the difference between the first
    pair of bytes that differ.
    """
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(buffer: bytearray, dest_start: int, src_start: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer`` from ``src_start`` to ``dest_start``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if dest_start < 0 or src_start < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, buffer[src_start:], buffer[dest_start:])
    if dest_start != src_start:
        buffer[dest_start:dest_start + count] = buffer[src_start:src_start + count]
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` reduced to a byte."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer