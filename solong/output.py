"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional

_INT_MIN = -2147483648
_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode(_ENCODING))


def put_str(text: Optional[str], fd: int) -> None:
    """Write ``text`` to ``fd``; ``None`` writes nothing."""
    if text is None:
        return
    _write_all(fd, text.encode(_ENCODING))


def put_endl(text: Optional[str], fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if text is None:
        return
    _write_all(fd, (text + "\n").encode(_ENCODING))


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    if n == _INT_MIN:
        _write_all(fd, b"-2147483648")
        return
    _write_all(fd, str(int(n)).encode("ascii"))