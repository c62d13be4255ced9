"""Reachability and shortest-path searches over a game map."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .mapfile import GameMap, Position, Tile

_DIRECTIONS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def _open_neighbours(game_map: GameMap, pos: Position) -> Iterator[Position]:
    row, col = pos
    for d_row, d_col in _DIRECTIONS:
        r, c = row + d_row, col + d_col
        if (
            0 <= r < game_map.rows
            and 0 <= c < game_map.cols
            and game_map.grid[r][c] is not Tile.WALL
        ):
            yield (r, c)


def reachable(game_map: GameMap, start: Position) -> set[Position]:
    """Return every non-wall position reachable from ``start``."""
    if game_map.tile_at(*start) is Tile.WALL:
        return set()
    seen = {start}
    stack = [start]
    while stack:
        for neighbour in _open_neighbours(game_map, stack.pop()):
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen


def is_solvable(game_map: GameMap) -> bool:
    """Whether the player can reach every collectible and the exit."""
    seen = reachable(game_map, game_map.player)
    if game_map.exit not in seen:
        return False
    return all(
        (r, c) in seen
        for r, row in enumerate(game_map.grid)
        for c, tile in enumerate(row)
        if tile is Tile.COLLECTIBLE
    )


def shortest_path(game_map: GameMap, start: Position, goal: Position) -> int | None:
    """Number of moves on the shortest route from ``start`` to ``goal``, or None."""
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        pos, dist = queue.popleft()
        if pos == goal:
            return dist
        for neighbour in _open_neighbours(game_map, pos):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((neighbour, dist + 1))
    return None