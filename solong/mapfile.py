"""Reading ``.ber`` map files and checking that they describe a playable board."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import Optional, TextIO, Union

MAP_EXTENSION = ".ber"
DEFAULT_BUFFER_SIZE = 4096

WALL = "1"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"

ERROR_HEADER = "Error"
MAP_MESSAGE = "Attention, la carte n'est pas conforme!"
EXIT_MESSAGE = "Pas de panier sur la carte!"
MULTIPLE_PLAYERS_MESSAGE = "Plusieurs player sur la carte!"
PLAYER_MESSAGE = "Pas de chat sur la carte!"
COLLECTIBLE_MESSAGE = "Pas de souris sur la carte!"
MAP_NAME_MESSAGE = "Fichier de la map n'est pas conforme!"


class MapError(Exception):
    """A map file that cannot be played: a bad name, layout or set of items."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LineReader:
    """Read a text stream line by line, keeping each line's newline."""

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    def next_line(self) -> Optional[str]:
        """Return the next line with its newline, the unterminated tail, or None at the end."""
        while "\n" not in self._pending and not self._eof:
            chunk = self._stream.read(self._buffer_size)
            if chunk:
                self._pending += chunk
            else:
                self._eof = True
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


def check_map_name(name: str) -> str:
    """Return ``name`` if its first ``.ber`` is at its very end, else raise MapError."""
    position = name.find(MAP_EXTENSION)
    if position < 0 or position != len(name) - len(MAP_EXTENSION):
        raise MapError(MAP_NAME_MESSAGE)
    return name


def read_map(path: Union[str, PathLike]) -> tuple[str, int, int]:
    """Read a map file and return its text, its width and its height in tiles.

    The width is taken from the first line, less its newline; the height is
    the number of lines. An unreadable file raises OSError.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        lines = list(LineReader(stream))
    if not lines:
        return "", 0, 0
    return "".join(lines), len(lines[0]) - 1, len(lines)


def _rows(text: str) -> list[str]:
    body = text[:-1] if text.endswith("\n") else text
    return body.split("\n")


def walls_closed(text: str, width: int) -> bool:
    """True if the map is a rectangle of ``width`` columns enclosed by walls."""
    if width <= 0:
        return False
    rows = _rows(text)
    if len(rows) < 2:
        return False
    if any(len(row) != width for row in rows):
        return False
    if set(rows[0]) != {WALL} or set(rows[-1]) != {WALL}:
        return False
    return all(row[0] == WALL and row[-1] == WALL for row in rows)


def check_items(text: str) -> None:
    """Raise MapError unless the map has a collectible, one player and an exit."""
    if COLLECTIBLE not in text:
        raise MapError(COLLECTIBLE_MESSAGE)
    players = text.count(PLAYER)
    if players == 0:
        raise MapError(PLAYER_MESSAGE)
    if players > 1:
        raise MapError(MULTIPLE_PLAYERS_MESSAGE)
    if EXIT not in text:
        raise MapError(EXIT_MESSAGE)


def validate_map(text: str, width: int) -> None:
    """Raise MapError if the walls are open or the items are wrong."""
    if not walls_closed(text, width):
        raise MapError(MAP_MESSAGE)
    check_items(text)


def count_letter(text: Optional[str], letter: str) -> int:
    """Number of times ``letter`` occurs in ``text``; None counts as empty."""
    if len(letter) != 1:
        raise ValueError(f"expected a single character, got {letter!r}")
    if text is None:
        return 0
    return text.count(letter)


def load_map(path: Union[str, PathLike]) -> tuple[str, int, int]:
    """Check the file name, read the map and validate it.

    Returns the map text and its width and height in tiles.
    """
    check_map_name(str(path))
    text, width, height = read_map(path)
    validate_map(text, width)
    return text, width, height