import pytest

from solong.mapfile import Tile, parse_map
from solong.pathing import is_solvable, reachable, shortest_path

OPEN = ["1111111", "1P0C0E1", "1000C01", "1111111"]
MAZE = ["1111111", "1P1E001", "1010101", "1000C01", "1111111"]
BLOCKED_COLLECTIBLE = ["111111", "1P01C1", "1E0111", "111111"]
BLOCKED_EXIT = ["11111", "1PC11", "111E1", "11111"]


def load(lines):
    return parse_map("\n".join(lines))


def test_open_map_is_solvable():
    assert is_solvable(load(OPEN)) is True
    assert is_solvable(load(MAZE)) is True


@pytest.mark.parametrize("lines", [BLOCKED_COLLECTIBLE, BLOCKED_EXIT])
def test_blocked_maps_are_not_solvable(lines):
    assert is_solvable(load(lines)) is False


def test_reachable_covers_open_tiles():
    game_map = load(OPEN)
    seen = reachable(game_map, game_map.player)
    assert game_map.player in seen
    assert game_map.exit in seen
    assert all(game_map.tile_at(*pos) is not Tile.WALL for pos in seen)
    open_tiles = sum(line.count(ch) for line in OPEN for ch in "0CEP")
    assert len(seen) == open_tiles


def test_reachable_from_wall_is_empty():
    game_map = load(OPEN)
    assert reachable(game_map, (0, 0)) == set()


def test_reachable_excludes_blocked_exit():
    game_map = load(BLOCKED_EXIT)
    seen = reachable(game_map, game_map.player)
    assert game_map.exit not in seen
    assert (1, BLOCKED_EXIT[1].index("C")) in seen


def test_shortest_path_straight_corridor():
    game_map = load(OPEN)
    assert shortest_path(game_map, game_map.player, game_map.exit) == 4


def test_shortest_path_same_position():
    game_map = load(OPEN)
    assert shortest_path(game_map, game_map.player, game_map.player) == 0


def test_shortest_path_takes_detour():
    game_map = load(MAZE)
    assert shortest_path(game_map, game_map.player, game_map.exit) == 6


def test_shortest_path_unreachable():
    game_map = load(BLOCKED_EXIT)
    assert shortest_path(game_map, game_map.player, game_map.exit) is None


def test_shortest_path_is_symmetric_and_bounded():
    game_map = load(MAZE)
    start = game_map.player
    for pos in reachable(game_map, start):
        there = shortest_path(game_map, start, pos)
        back = shortest_path(game_map, pos, start)
        assert there == back
        assert there >= abs(pos[0] - start[0]) + abs(pos[1] - start[1])


def test_shortest_path_to_wall_is_none():
    game_map = load(OPEN)
    assert shortest_path(game_map, game_map.player, (0, 0)) is None