"""Tile-based puzzle game: collect everything, then reach the exit by the shortest route."""

__version__ = "0.1.0"