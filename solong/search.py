"""Searching and comparing strings and byte sequences."""

from __future__ import annotations

from typing import Optional

NUL = "\0"


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing code points, or 0.
    """
    for pos in range(n):
        a = ord(s1[pos]) if pos < len(s1) else 0
        b = ord(s2[pos]) if pos < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_substring(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) among the first ``n``."""
    if n <= 0:
        return None
    index = bytes(data).find(value & 0xFF, 0, n)
    return None if index < 0 else index


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; the difference of the first unequal pair, or 0."""
    if n > len(a) or n > len(b):
        raise ValueError("n is larger than one of the buffers")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0