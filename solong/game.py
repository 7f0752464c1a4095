"""Board state and movement rules for the cat-and-mice puzzle."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .mapfile import COLLECTIBLE, EXIT, PLAYER, WALL

FLOOR = "0"

KEY_ESC = 53
KEY_UP = 126
KEY_RIGHT = 124
KEY_DOWN = 125
KEY_LEFT = 123
KEY_W = 13
KEY_A = 0
KEY_S = 1
KEY_D = 2


class Direction(Enum):
    """A step on the board, as a (row, column) offset."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class MoveResult(Enum):
    """What a key press or a move did to the game."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


_KEY_DIRECTIONS = {
    KEY_LEFT: Direction.LEFT,
    KEY_A: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_D: Direction.RIGHT,
    KEY_DOWN: Direction.DOWN,
    KEY_S: Direction.DOWN,
    KEY_UP: Direction.UP,
    KEY_W: Direction.UP,
}


def direction_for_key(keycode: int) -> Optional[Direction]:
    """The direction bound to ``keycode`` (arrows or WASD), or None."""
    return _KEY_DIRECTIONS.get(keycode)


class Game:
    """A board, the player on it and the counters of a running game."""

    def __init__(self, text: str) -> None:
        body = text[:-1] if text.endswith("\n") else text
        self._grid = [list(row) for row in body.split("\n")] if body else []
        self._player = self._locate_player()
        self.height = len(self._grid)
        self.width = len(self._grid[0]) if self._grid else 0
        self.collectibles = text.count(COLLECTIBLE)
        self.collected = 0
        self.steps = 0
        self.finished = False
        self.facing = Direction.DOWN

    def _locate_player(self) -> tuple[int, int]:
        for row_index, row in enumerate(self._grid):
            if PLAYER in row:
                return row_index, row.index(PLAYER)
        raise ValueError("the map has no player")

    @property
    def player(self) -> tuple[int, int]:
        """The player's (row, column)."""
        return self._player

    def tile_at(self, row: int, col: int) -> str:
        """The letter at ``row``, ``col``; IndexError outside the board."""
        if not (0 <= row < len(self._grid) and 0 <= col < len(self._grid[row])):
            raise IndexError(f"no tile at ({row}, {col})")
        return self._grid[row][col]

    def rows(self) -> list[str]:
        """The board as one string per row, without newlines."""
        return ["".join(row) for row in self._grid]

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        row, col = self._player
        d_row, d_col = direction.delta
        target_row, target_col = row + d_row, col + d_col
        try:
            target = self.tile_at(target_row, target_col)
        except IndexError:
            return MoveResult.BLOCKED
        if target == EXIT and self.collected == self.collectibles:
            self.finished = True
            return MoveResult.WON
        if target in (WALL, EXIT):
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.collected += 1
        self._grid[row][col] = FLOOR
        self._grid[target_row][target_col] = PLAYER
        self._player = (target_row, target_col)
        self.steps += 1
        self.facing = direction
        return MoveResult.MOVED

    def handle_key(self, keycode: int) -> MoveResult:
        """Apply a key press: escape quits, arrows and WASD move."""
        if keycode == KEY_ESC:
            self.finished = True
            return MoveResult.QUIT
        direction = direction_for_key(keycode)
        if direction is None:
            return MoveResult.IGNORED
        return self.move(direction)