# solong

A small tile-based puzzle game. You walk a player around a walled map,
pick up every collectible, and then step onto the exit. Once the last
collectible is taken, the game measures the shortest route from that
spot to the exit. Reach the exit in no more moves than that and you win
(`GG!` is printed); take a longer route and you lose.

## Installing

```
pip install .
```

This installs the game together with its one runtime dependency, pygame.

## Playing

```
solong path/to/map.ber
```

The game looks for its images in a `textures` directory under the
current working directory, one file per kind of tile:

| Tile         | File         |
|--------------|--------------|
| wall         | `tree.png`   |
| empty floor  | `empty.png`  |
| collectible  | `Taide.png`  |
| exit         | `Ditto.png`  |
| player       | `Player.png` |

Images are scaled to 64 × 64 pixel tiles.

Controls:

- `W` / `A` / `S` / `D` move up, left, down and right
- `Esc` or closing the window quits

Each move that lands on a free tile is counted and printed as `Moves:N`.
Maps wider than 15 tiles or taller than 11 tiles are shown through a
15 × 11 viewport that follows the player; cells past the edge of the map
are drawn as walls.

Run without an argument, the command does nothing and exits with status 0.

## Map files

A map is a plain text file with the `.ber` extension, made only of:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

Rules checked before the game starts:

- the file name ends in `.ber`;
- every row has the same width;
- the map is surrounded by walls;
- there is exactly one `P`, exactly one `E` and at least one `C`;
- the map is large enough (at least 3 × 5 or 5 × 3);
- every collectible and the exit can be reached from the start.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

If a rule is broken, a file cannot be opened, the window cannot be
created or the textures cannot be loaded, the command writes `Error`
and a message to standard error and exits with status 1.

## Using it as a library

The pieces are importable on their own:

```python
from solong.mapfile import load_map, parse_map, MapError
from solong.pathing import is_solvable, reachable, shortest_path
from solong.game import Game, Direction, Outcome

game_map = load_map("maps/level.ber")
assert is_solvable(game_map)

game = Game(game_map)
outcome = game.move(Direction.RIGHT)
```

- `solong.mapfile`: `load_map` reads a file and `parse_map` takes map
  text; both raise `MapError` on a malformed map and return a `GameMap`
  whose grid holds `Tile` values. `measure`, `check_chars`,
  `check_walls` and `validate_extension` run the individual checks.
- `solong.pathing`: `reachable` gives every open position reachable
  from a start, `is_solvable` tells whether the player can reach every
  collectible and the exit, and `shortest_path` returns the number of
  moves between two positions, or `None`.
- `solong.game`: `Game` plays on its own copy of a map. `Game.move`
  returns an `Outcome` (`CONTINUE`, `WIN` or `LOSE`) and raises
  `RuntimeError` once the game is over; `Game.visible_tiles` returns
  what the viewport currently shows.
- `solong.app`: `Window` draws a game with pygame and feeds it key
  presses; `load_textures` loads the tile images; `main` is the
  `solong` command.

The package also carries some small helpers:

- `solong.printf`: `sprintf` and `printf` with the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `format_int`, `format_unsigned`,
  `format_pointer` and `format_str`; bad conversions raise
  `FormatError`.
- `solong.libft.chars`: ASCII classification (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`), case changes (`tolower`,
  `toupper`) and 32-bit `atoi` / `itoa`.
- `solong.libft.search`: `strlen`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `strlcpy`, `strlcat` and `strdup` over NUL-terminated text.
- `solong.libft.text`: `split`, `substr`, `strjoin`, `strtrim`,
  `strmapi` and `striteri`.
- `solong.libft.lists`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.

## What it does not include

No texture images and no map files ship with the package; you supply
the `textures` directory and the `.ber` maps yourself.

## Running the tests

```
pip install .[test]
pytest
```