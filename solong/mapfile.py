"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from enum import Enum

INVALID_MAP = "Invalid Map!"
TOO_SMALL = "Smaller than minimum size map"
OPEN_FAILED = "Opening File"
INVALID_ARGUMENT = "Invalid argument"
MAP_EXTENSION = ".ber"

_ALLOWED_CHARS = frozenset("\nCEP10")

Position = tuple[int, int]


class Tile(Enum):
    """One cell of a map, keyed by its character in the map file."""

    WALL = "1"
    EMPTY = "0"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"


class MapError(Exception):
    """Raised when a map file cannot be used."""


@dataclass
class GameMap:
    """A rectangular grid of tiles with the player and exit positions."""

    grid: list[list[Tile]]
    player: Position
    exit: Position

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def collectibles(self) -> int:
        """Number of collectibles still on the map."""
        return sum(row.count(Tile.COLLECTIBLE) for row in self.grid)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"position ({row}, {col}) is outside the map")

    def tile_at(self, row: int, col: int) -> Tile:
        self._check_bounds(row, col)
        return self.grid[row][col]

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        self._check_bounds(row, col)
        self.grid[row][col] = tile

    def __str__(self) -> str:
        return "\n".join("".join(tile.value for tile in row) for row in self.grid)


def validate_extension(path: str | os.PathLike[str]) -> str:
    """Return the path as a string if it names a ``.ber`` file."""
    name = os.fspath(path)
    if not name.endswith(MAP_EXTENSION):
        raise MapError(INVALID_ARGUMENT)
    return name


def measure(text: str) -> tuple[int, int]:
    """Return ``(rows, cols)`` of the map text, checking that it is rectangular."""
    first, _, rest = text.partition("\n")
    cols = len(first)
    *complete, tail = rest.split("\n")
    if any(len(line) != cols for line in complete):
        raise MapError(INVALID_MAP)
    rows = 1 + len(complete)
    if tail or not complete:
        if tail and len(tail) != cols:
            raise MapError(INVALID_MAP)
        rows += 1
    if (rows < 5 and cols < 3) or (rows < 3 and cols < 5):
        raise MapError(TOO_SMALL)
    return rows, cols


def check_chars(text: str) -> int:
    """Check the characters of a map and return how many collectibles it has."""
    counts = Counter(text)
    if set(counts) - _ALLOWED_CHARS:
        raise MapError(INVALID_MAP)
    if counts["P"] != 1 or counts["E"] != 1 or counts["C"] < 1:
        raise MapError(INVALID_MAP)
    return counts["C"]


def check_walls(text: str, rows: int, cols: int) -> None:
    """Check that the map is closed in by walls."""
    for ri, line in enumerate(text.split("\n"), start=1):
        for ci, char in enumerate(line, start=1):
            outer = ri in (1, rows) and ci <= cols
            side = 1 < ri < rows and ci in (1, cols)
            if (outer or side) and char != Tile.WALL.value:
                raise MapError(INVALID_MAP)


def parse_map(text: str) -> GameMap:
    """Validate map text and build a :class:`GameMap` from it."""
    rows, cols = measure(text)
    check_chars(text)
    check_walls(text, rows, cols)
    grid: list[list[Tile]] = []
    player: Position | None = None
    exit_pos: Position | None = None
    for r, line in enumerate(text.split("\n")[:rows]):
        row = [Tile(char) for char in line]
        for c, tile in enumerate(row):
            if tile is Tile.PLAYER:
                player = (r, c)
            elif tile is Tile.EXIT:
                exit_pos = (r, c)
        grid.append(row)
    if player is None or exit_pos is None or len(grid) != rows:
        raise MapError(INVALID_MAP)
    return GameMap(grid=grid, player=player, exit=exit_pos)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read, validate and parse a ``.ber`` map file."""
    name = validate_extension(path)
    try:
        with open(name, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(OPEN_FAILED) from exc
    return parse_map(text)