"""Filling, clearing, allocating and copying byte buffers."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Union

Buffer = Union[bytearray, memoryview, MutableSequence[int]]


def _check_count(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):  # type: ignore[arg-type]
            raise ValueError(f"byte count {n} exceeds a buffer of {len(buffer)} bytes")  # type: ignore[arg-type]


def fill(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: Buffer, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer large enough for ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def copy(dst: Buffer, src: bytes | Buffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst``; the buffers should not overlap."""
    _check_count(n, dst, src)
    if dst is src:
        return dst
    dst[:n] = src[:n]
    return dst


def move(dst: Buffer, src: bytes | Buffer, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` into ``dst``, correct even when they overlap."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst