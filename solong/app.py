"""The game window, its textures and the command that plays a map."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pygame

from .game import VIEW_COLS, VIEW_ROWS, Direction, Game, Outcome
from .mapfile import MapError, Tile, load_map
from .pathing import is_solvable

TILE_SIZE = 64
TITLE = "Noa's Game"
TEXTURE_DIR = "textures"
TEXTURE_FILES = {
    Tile.WALL: "tree.png",
    Tile.EMPTY: "empty.png",
    Tile.COLLECTIBLE: "Taide.png",
    Tile.EXIT: "Ditto.png",
    Tile.PLAYER: "Player.png",
}
TEXTURE_FAILED = "Failed to create textures!"
INIT_FAILED = "Failed to initialize the window"
NO_PATH = "No Path!"

_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}


def load_textures(
    directory: str | os.PathLike[str], tile_size: int | None = None
) -> dict[Tile, pygame.Surface]:
    """Load one image per tile kind, scaled to ``tile_size`` if given."""
    base = Path(directory)
    textures: dict[Tile, pygame.Surface] = {}
    for tile, name in TEXTURE_FILES.items():
        try:
            image = pygame.image.load(str(base / name))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(TEXTURE_FAILED) from exc
        if tile_size is not None and image.get_size() != (tile_size, tile_size):
            image = pygame.transform.scale(image, (tile_size, tile_size))
        textures[tile] = image
    return textures


class Window:
    """A pygame window that shows a game and feeds key presses to it."""

    def __init__(self, game: Game, texture_dir: str | os.PathLike[str]) -> None:
        self.game = game
        self.tile_size = TILE_SIZE
        if game.big:
            cols, rows = VIEW_COLS, VIEW_ROWS
        else:
            cols, rows = game.map.cols, game.map.rows
        try:
            pygame.display.init()
            self.screen = pygame.display.set_mode(
                (cols * self.tile_size, rows * self.tile_size)
            )
        except pygame.error as exc:
            raise RuntimeError(INIT_FAILED) from exc
        pygame.display.set_caption(TITLE)
        self.textures = load_textures(texture_dir, self.tile_size)
        self.running = True
        self.draw()

    def draw(self) -> None:
        """Paint every visible tile and show the frame."""
        for r, row in enumerate(self.game.visible_tiles()):
            for c, tile in enumerate(row):
                self.screen.blit(
                    self.textures[tile], (c * self.tile_size, r * self.tile_size)
                )
        pygame.display.flip()

    def handle_key(self, key: int) -> Outcome | None:
        """React to a pressed key; return the outcome of a move, if one was made."""
        if not self.running:
            return None
        if key == pygame.K_ESCAPE:
            self.running = False
            return None
        direction = _KEYS.get(key)
        if direction is None:
            return None
        outcome = self.game.move(direction)
        self.draw()
        if outcome is not Outcome.CONTINUE:
            print(outcome.message)
            self.running = False
        return outcome

    def run(self) -> Outcome:
        """Process events until the game ends or the window is closed."""
        clock = pygame.time.Clock()
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                clock.tick(60)
        finally:
            pygame.display.quit()
        return self.game.outcome


def _fail(message: str) -> int:
    sys.stderr.write(f"Error\n{message}\n")
    return 1


def main(argv: list[str] | None = None) -> int:
    """Play the map file named by the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        return _fail(str(exc))
    if not is_solvable(game_map):
        return _fail(NO_PATH)
    try:
        window = Window(Game(game_map), TEXTURE_DIR)
    except RuntimeError as exc:
        pygame.quit()
        return _fail(str(exc))
    window.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())