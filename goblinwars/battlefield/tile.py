"""Static terrain: open ground and walls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Set

from goblinwars.errors import ParseTileError
from goblinwars.geometry import BoundingBox, Point


class Tile(Enum):
    """Terrain glyphs."""

    EMPTY = "."
    WALL = "#"

    @classmethod
    def parse(cls, text: str) -> "Tile":
        if not text:
            raise ParseTileError(ParseTileError.NO_CHARACTERS)
        if len(text) != 1:
            raise ParseTileError(ParseTileError.TOO_MANY_CHARACTERS, text)
        for tile in cls:
            if tile.value == text:
                return tile
        raise ParseTileError(ParseTileError.UNKNOWN_TILE, text)

    def __str__(self) -> str:
        return self.value


@dataclass
class Grid:
    """Terrain stored as the explicit set of open points.

    Any point never marked open is a wall, including everything outside the
    parsed input, so movement can never leave the parsed footprint.
    """

    open: Set[Point] = field(default_factory=set)

    def insert(self, point: Point, tile: Tile) -> bool:
        """Record ``tile`` at ``point``. Returns True if the terrain changed."""
        if tile is Tile.EMPTY:
            if point in self.open:
                return False
            self.open.add(point)
            return True
        if point not in self.open:
            return False
        self.open.discard(point)
        return True

    def get(self, point: Point) -> Tile:
        return Tile.EMPTY if point in self.open else Tile.WALL

    def __contains__(self, point: Point) -> bool:
        return point in self.open

    def __len__(self) -> int:
        return len(self.open)

    def bbox(self) -> BoundingBox:
        return BoundingBox.from_points(self.open)
