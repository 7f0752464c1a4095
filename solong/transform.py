"""Building new strings from existing ones: splitting, slicing, trimming and joining."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep`` and drop the empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in text.split(sep) if part]


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def trim(text: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def join(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return first + second


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def for_each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A returned character replaces the element; ``None`` leaves it unchanged.
    The same sequence is returned.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``, so a returned
    length of ``size`` or more means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def concat_bounded(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have needed; when ``size`` does not exceed ``len(dst)`` nothing is appended
    and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)