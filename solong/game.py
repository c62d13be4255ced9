"""Player movement, scoring and the part of the map that is on screen."""

from __future__ import annotations

from enum import Enum

from .mapfile import GameMap, Position, Tile
from .pathing import shortest_path

VIEW_ROWS = 11
VIEW_COLS = 15
_VIEW_ROW_OFFSET = 5
_VIEW_COL_OFFSET = 7


class Direction(Enum):
    """A step on the grid as ``(row, col)`` deltas."""

    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)


class Outcome(Enum):
    """State of a game after a move; finished games carry their message."""

    CONTINUE = ""
    WIN = "GG!"
    LOSE = "Noa You SUCK!!!"

    @property
    def message(self) -> str:
        return self.value


class Game:
    """A running game on its own copy of a map.

    Once the last collectible is taken, the shortest route from that spot
    to the exit is measured. Reaching the exit in no more moves than that
    wins; taking longer loses.
    """

    def __init__(self, game_map: GameMap) -> None:
        self.map = GameMap(
            grid=[list(row) for row in game_map.grid],
            player=game_map.player,
            exit=game_map.exit,
        )
        self.actions = 0
        self.moves = 0
        self.shortest: int | None = None
        self.outcome = Outcome.CONTINUE
        self._awaiting_shortest = True
        if self.map.collectibles == 0:
            self._measure_shortest()

    @property
    def big(self) -> bool:
        """Whether the map is larger than the window and must scroll."""
        return self.map.cols > VIEW_COLS or self.map.rows > VIEW_ROWS

    @property
    def collectibles(self) -> int:
        return self.map.collectibles

    def _measure_shortest(self) -> None:
        self.moves = 0
        self._awaiting_shortest = False
        self.shortest = shortest_path(self.map, self.map.player, self.map.exit)

    def _step(self, target: Position) -> None:
        old = self.map.player
        self.map.set_tile(*old, Tile.EXIT if old == self.map.exit else Tile.EMPTY)
        self.map.set_tile(*target, Tile.PLAYER)
        self.map.player = target
        self.actions += 1
        print(f"Moves:{self.actions}")

    def move(self, direction: Direction) -> Outcome:
        """Move the player one step unless a wall is in the way."""
        if self.outcome is not Outcome.CONTINUE:
            raise RuntimeError("the game is over")
        d_row, d_col = direction.value
        row, col = self.map.player
        target = (row + d_row, col + d_col)
        if self.map.tile_at(*target) is not Tile.WALL:
            self.moves += 1
            self._step(target)
        if self.map.collectibles == 0:
            if target == self.map.exit:
                won = self.shortest is not None and self.moves <= self.shortest
                self.outcome = Outcome.WIN if won else Outcome.LOSE
            elif self._awaiting_shortest:
                self._measure_shortest()
        return self.outcome

    def _tile_or_wall(self, row: int, col: int) -> Tile:
        if row < self.map.rows and col < self.map.cols:
            return self.map.grid[row][col]
        return Tile.WALL

    def visible_tiles(self) -> list[list[Tile]]:
        """Tiles to draw: the whole map, or a window around the player."""
        if not self.big:
            return [list(row) for row in self.map.grid]
        p_row, p_col = self.map.player
        top = max(p_row - _VIEW_ROW_OFFSET, 0)
        left = max(p_col - _VIEW_COL_OFFSET, 0)
        return [
            [self._tile_or_wall(r, c) for c in range(left, left + VIEW_COLS)]
            for r in range(top, top + VIEW_ROWS)
        ]