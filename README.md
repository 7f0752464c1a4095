# solong

A small tile-based puzzle game. You play a cat on a walled map. Eat every
mouse, then reach the basket to finish. Each move that succeeds adds one to
the step counter, which is shown in the window and printed to the terminal
after every key press.

## Installing

```
pip install .
```

This installs the game together with `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

The command runs `solong.display.main`. It takes exactly one argument, the
map file, whose name must end in `.ber`. With no argument (or more than one)
it prints `Attention, pas d'arguments!` and exits. A map that breaks a rule is
refused with `Error` and a short reason; a file that cannot be opened makes
the command exit without a message.

Controls:

| Key                  | Action     |
|----------------------|------------|
| W / Up arrow         | move up    |
| S / Down arrow       | move down  |
| A / Left arrow       | move left  |
| D / Right arrow      | move right |
| Esc                  | quit       |

The basket only opens once every mouse has been eaten; stepping onto it then
ends the game and closes the window. Walls and a closed basket block the
move, and a blocked move does not count as a step. Closing the window also
quits.

## Images

The package ships no artwork. The window loads its tiles from an `img`
directory in the current working directory: `sol.xpm`, `mur.xpm`,
`mouse.xpm`, `panier.xpm`, `box.xpm`, `Cat-front.xpm`, `Cat-back.xpm`,
`Cat-left.xpm` and `Cat-right.xpm`, each drawn as a 64 by 64 pixel tile. Run
`solong` from a directory that holds them.

## Map format

A map is a plain text file of equal-length rows, one row per line:

| Letter | Meaning           |
|--------|-------------------|
| `1`    | wall              |
| `0`    | floor             |
| `C`    | mouse (collect)   |
| `P`    | the cat (start)   |
| `E`    | basket (exit)     |

Rules checked when the map loads:

- the file name ends in `.ber`;
- every row has the width of the first row and the map is closed by walls on
  all four sides;
- there is at least one mouse;
- there is exactly one cat;
- there is at least one basket.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using it as a library

The map rules and the game logic do not need a display:

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction, MoveResult

text, width, height = load_map("level.ber")  # raises MapError on a bad map
game = Game(text)
if game.move(Direction.RIGHT) is MoveResult.MOVED:
    print(game.player, game.steps, game.collected, game.collectibles)
```

- `solong.mapfile` reads and checks maps: `MapError`, `LineReader`,
  `check_map_name`, `read_map`, `walls_closed`, `check_items`,
  `validate_map`, `count_letter` and `load_map`.
- `solong.game` holds the board and the moves: `Game` (with `move`,
  `handle_key`, `tile_at`, `rows`), `Direction`, `MoveResult` and
  `direction_for_key`.
- `solong.display` draws the board with pygame: `Renderer` (with
  `draw_board` and `draw_steps`), `image_for_tile`, `tile_origin` and `main`.

The package also carries a few small helper modules:

- `solong.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, `atoi` (wraps to a signed 32-bit
  integer) and `itoa`.
- `solong.search`: `find_char`, `rfind_char`, `compare`, `find_substring`,
  `find_byte` and `compare_bytes`.
- `solong.transform`: `split`, `substring`, `trim`, `join`, `map_indexed`,
  `for_each_indexed`, `copy_bounded` and `concat_bounded`.
- `solong.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a file descriptor.
- `solong.memory`: `fill`, `zero`, `calloc`, `copy` and `move` on byte
  buffers.

## Running the tests

```
pip install ".[test]"
pytest
```