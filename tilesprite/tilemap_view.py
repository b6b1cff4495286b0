"""Projections between tile coordinates and screen coordinates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class Direction(IntEnum):
    """Compass directions used when walking across tiles."""

    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4
    NORTHEAST = 5
    NORTHWEST = 6
    SOUTHEAST = 7
    SOUTHWEST = 8


class TilemapView(ABC):
    """How a tile map is laid out on screen."""

    @abstractmethod
    def compute_draw_position(
        self, col: int, row: int, tw: float, th: float
    ) -> tuple[float, float]:
        """Screen position of tile ``(col, row)`` for tiles of size ``tw`` x ``th``."""

    @abstractmethod
    def compute_mouse_map(
        self, tw: float, th: float, mx: float, my: float
    ) -> tuple[int, int]:
        """Tile ``(col, row)`` under the screen point ``(mx, my)``."""

    @abstractmethod
    def compute_tile_walking(
        self, col: int, row: int, direction: int
    ) -> tuple[int, int]:
        """Tile reached by stepping from ``(col, row)`` towards ``direction``."""


_SLIDE_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 2),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (1, -2),
    Direction.WEST: (-1, 0),
    Direction.NORTHEAST: (0, 1),
    Direction.SOUTHEAST: (1, -1),
    Direction.SOUTHWEST: (0, -1),
    Direction.NORTHWEST: (-1, 1),
}


class SlideView(TilemapView):
    """Slide (staggered diamond) layout: each row shifts half a tile right."""

    def compute_draw_position(
        self, col: int, row: int, tw: float, th: float
    ) -> tuple[float, float]:
        return col * tw + row * tw / 2, row * th / 2

    def compute_mouse_map(
        self, tw: float, th: float, mx: float, my: float
    ) -> tuple[int, int]:
        tw2 = tw / 2.0
        th2 = th / 2.0
        row = int(my / th2)
        col = int((mx - row * tw2) / tw)
        return col, row

    def compute_tile_walking(
        self, col: int, row: int, direction: int
    ) -> tuple[int, int]:
        """Step one tile; an unknown direction leaves the position unchanged."""
        try:
            dcol, drow = _SLIDE_STEPS[Direction(direction)]
        except ValueError:
            return col, row
        return col + dcol, row + drow