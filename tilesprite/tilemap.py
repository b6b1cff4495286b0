"""Tile maps holding tile ids, and parallax layer descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


class TileMap:
    """A width x height grid of tile ids (0-255) stored row by row."""

    def __init__(self, width: int, height: int, init_with: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"tile map size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.z = 0.0
        self.tid = 0
        self._map = bytearray([init_with]) * (width * height)

    @property
    def tiles(self) -> bytes:
        """A copy of all tile ids, row after row."""
        return bytes(self._map)

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(
                f"tile ({col}, {row}) outside {self.width}x{self.height} map"
            )
        return col + row * self.width

    def tile(self, col: int, row: int) -> int:
        """Tile id at ``(col, row)``."""
        return self._map[self._index(col, row)]

    def set_tile(self, col: int, row: int, tile: int) -> None:
        """Store tile id ``tile`` at ``(col, row)``."""
        self._map[self._index(col, row)] = tile

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(col, row, tile)`` for every cell, row by row."""
        for index, tile in enumerate(self._map):
            row, col = divmod(index, self.width)
            yield col, row, tile


@dataclass
class Layer:
    """A background layer drawn with its own offset and scroll rate."""

    z: float = 0.0
    tid: int = 0
    filename: str = ""
    offsetx: float = 0.0
    offsety: float = 0.0
    ratex: float = 0.0
    ratey: float = 0.0