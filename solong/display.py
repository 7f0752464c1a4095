"""Drawing the board in a window and running the game."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import (  # noqa: E402
    KEY_A,
    KEY_D,
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_S,
    KEY_UP,
    KEY_W,
    Direction,
    Game,
    MoveResult,
)
from .mapfile import ERROR_HEADER, MapError, load_map  # noqa: E402

TEXT_TITLE = "So long!"
TEXT_START = "Manges vite les souris"
TEXT_ARG_ERROR = "Attention, pas d'arguments!"
TEXT_STEPS_LABEL = "Nbr de pas:"
TEXT_COLOR = (0x2F, 0x09, 0xC0)

IMG_GROUND = "./img/sol.xpm"
IMG_CAT_F = "./img/Cat-front.xpm"
IMG_CAT_B = "./img/Cat-back.xpm"
IMG_CAT_L = "./img/Cat-left.xpm"
IMG_CAT_R = "./img/Cat-right.xpm"
IMG_BOX = "./img/box.xpm"
IMG_EXIT = "./img/panier.xpm"
IMG_COLLECT = "./img/mouse.xpm"
IMG_WALL = "./img/mur.xpm"

IMG_W = 64
IMG_H = 64
IMG_W2 = 32
IMG_H2 = 32

_FONT_SIZE = 24

_TILE_IMAGES = {
    "1": IMG_WALL,
    "0": IMG_GROUND,
    "C": IMG_COLLECT,
    "P": IMG_CAT_F,
    "E": IMG_EXIT,
}

_CAT_IMAGES = {
    Direction.DOWN: IMG_CAT_F,
    Direction.UP: IMG_CAT_B,
    Direction.LEFT: IMG_CAT_L,
    Direction.RIGHT: IMG_CAT_R,
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: KEY_ESC,
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_w: KEY_W,
    pygame.K_a: KEY_A,
    pygame.K_s: KEY_S,
    pygame.K_d: KEY_D,
}


def image_for_tile(letter: str) -> Optional[str]:
    """The image path drawn for a map letter, or None for letters not drawn."""
    return _TILE_IMAGES.get(letter)


def tile_origin(row: int, col: int) -> tuple[int, int]:
    """Pixel position of the top-left corner of a tile."""
    return col * IMG_W, row * IMG_H


class Renderer:
    """Draws a game onto a pygame surface, loading each image once."""

    def __init__(
        self,
        surface: pygame.Surface,
        loader: Optional[Callable[[str], pygame.Surface]] = None,
    ) -> None:
        self.surface = surface
        self._loader = loader or pygame.image.load
        self._images: dict[str, pygame.Surface] = {}
        self._font: Optional[pygame.font.Font] = None

    def _image(self, path: str) -> pygame.Surface:
        if path not in self._images:
            self._images[path] = self._loader(path)
        return self._images[path]

    def _blit(self, path: str, position: tuple[int, int]) -> None:
        self.surface.blit(self._image(path), position)

    def _text(self, text: str, position: tuple[int, int]) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _FONT_SIZE)
        self.surface.blit(self._font.render(text, False, TEXT_COLOR), position)

    def _draw_text_box(self) -> None:
        x, y = IMG_W // 4, IMG_H // 4
        for _ in range(3):
            self._blit(IMG_BOX, (x, y))
            x += IMG_W

    def draw_board(self, game: Game) -> None:
        """Draw every tile, the text box and the opening message."""
        for row_index, row in enumerate(game.rows()):
            for col_index, letter in enumerate(row):
                origin = tile_origin(row_index, col_index)
                if letter == "P":
                    self._blit(IMG_GROUND, origin)
                    self._blit(_CAT_IMAGES[game.facing], origin)
                    continue
                path = image_for_tile(letter)
                if path is not None:
                    self._blit(path, origin)
        self._draw_text_box()
        self._text(TEXT_START, (IMG_W2, IMG_H2))

    def draw_steps(self, steps: int) -> None:
        """Redraw the text box with the current number of steps."""
        self._draw_text_box()
        self._text(TEXT_STEPS_LABEL, (IMG_W2, IMG_H2))
        self._text(str(steps), (IMG_W2 * 4, IMG_H2))


def _run(text: str, width: int, height: int) -> int:
    pygame.init()
    try:
        screen = pygame.display.set_mode((width * IMG_W, height * IMG_H))
        pygame.display.set_caption(TEXT_TITLE)
        game = Game(text)
        renderer = Renderer(screen)
        renderer.draw_board(game)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                result = game.handle_key(_PYGAME_KEYS.get(event.key, -1))
                if result in (MoveResult.QUIT, MoveResult.WON):
                    return 0
                print(f"Nombre de pas : {game.steps}")
                renderer.draw_board(game)
                renderer.draw_steps(game.steps)
                pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and play it in a window."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(TEXT_ARG_ERROR)
        return 0
    try:
        text, width, height = load_map(args[0])
    except MapError as error:
        print(ERROR_HEADER)
        print(error.message)
        return 0
    except OSError:
        return 0
    return _run(text, width, height)


if __name__ == "__main__":
    sys.exit(main())