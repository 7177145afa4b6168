"""The battlefield: terrain plus the sprites standing on it."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Optional, Set

from goblinwars.errors import ParseMapError, ParseSpeciesError, ParseTileError
from goblinwars.geometry import BoundingBox, Point, reading_order
from goblinwars.sprite import Species, SpriteBuilder, Sprites

from .schemas import BattlefieldSnapshot, SpriteState
from .tile import Grid, Tile


@dataclass(frozen=True)
class MapElement:
    """What occupies a single point: a terrain tile or a sprite."""

    tile: Optional[Tile] = None
    species: Optional[Species] = None

    def is_empty(self) -> bool:
        return self.species is None and self.tile is Tile.EMPTY

    def glyph(self) -> str:
        if self.species is not None:
            return self.species.value
        return self.tile.value

    @classmethod
    def parse(cls, text: str) -> "MapElement":
        try:
            return cls(tile=Tile.parse(text))
        except ParseTileError:
            pass
        try:
            return cls(tile=Tile.EMPTY, species=Species.parse(text))
        except ParseSpeciesError as exc:
            raise ParseMapError(f"Invalid sprite: {exc}", underlying=exc) from exc


class Map:
    """Terrain and live sprites.

    Built once by ``MapBuilder`` and then mutated in place by rounds. ``clone``
    gives an independent copy for what-if runs and display snapshots.
    """

    def __init__(self, grid: Optional[Grid] = None, sprites: Optional[Sprites] = None) -> None:
        self.grid = grid if grid is not None else Grid()
        self.sprites = sprites if sprites is not None else Sprites()

    def clone(self) -> "Map":
        return copy.deepcopy(self)

    def bbox(self) -> BoundingBox:
        return self.grid.bbox().union(self.sprites.bbox())

    def element(self, position: Point) -> MapElement:
        sprite = self.sprites.get(position)
        if sprite is not None:
            return MapElement(tile=Tile.EMPTY, species=sprite.species)
        return MapElement(tile=self.grid.get(position))

    def is_occupied(self, position: Point) -> bool:
        """True for walls and for squares holding a sprite."""
        return position in self.sprites or position not in self.grid

    def victorious(self) -> Optional[Species]:
        return self.sprites.victorious()

    def target(self, location: Point) -> Optional[Point]:
        """The adjacent enemy the sprite at ``location`` should attack.

        Lowest hit points first; ties go to the enemy first in reading order.
        """
        sprite = self.sprites.get(location)
        if sprite is None:
            return None

        candidates = []
        for neighbor in location.adjacent():
            other = self.sprites.get(neighbor)
            if other is not None and sprite.is_enemy(other):
                candidates.append((other.health, reading_order(neighbor), neighbor))

        if not candidates:
            return None
        return min(candidates)[2]

    def target_points(self, species: Species) -> Set[Point]:
        """Open, unoccupied squares adjacent to an enemy of ``species``."""
        targets: Set[Point] = set()
        for position, sprite in self.sprites.items():
            if not species.is_enemy(sprite.species):
                continue
            for neighbor in position.adjacent():
                if not self.is_occupied(neighbor):
                    targets.add(neighbor)
        return targets

    def score(self) -> int:
        """Total hit points of every surviving sprite."""
        return self.sprites.total_health()

    def alive(self, species: Species) -> int:
        return self.sprites.alive(species)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_rows(self, bbox: BoundingBox) -> List[str]:
        rows = []
        for y in bbox.vertical():
            rows.append("".join(self.element(Point(x, y)).glyph() for x in bbox.horizontal()))
        return rows

    def render(self) -> str:
        """The map as text, with a one-square wall margin around its extent.

        Only the walls bordering open ground are drawn: an input framed by a
        thicker wall comes back with the extra outer rows and columns dropped.
        """
        return "\n".join(self._render_rows(self.bbox().margin(1))) + "\n"

    def render_status(self) -> str:
        """The map plus ``E(200), G(131)`` health annotations for each row."""
        bbox = self.bbox().margin(1)
        lines = []
        for y, row in zip(bbox.vertical(), self._render_rows(bbox)):
            info = [
                self.sprites.get(Point(x, y)).info()
                for x in bbox.horizontal()
                if Point(x, y) in self.sprites
            ]
            lines.append(f"{row}   {', '.join(info)}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def snapshot(self, round_number: int = 0, message: str = "") -> BattlefieldSnapshot:
        bbox = self.bbox().margin(1)
        sprites = [
            SpriteState(
                species=sprite.glyph(),
                x=position.x,
                y=position.y,
                hit_points=sprite.hit_points,
                attack_power=sprite.attack_power,
            )
            for position, sprite in sorted(
                self.sprites.items(), key=lambda item: reading_order(item[0])
            )
        ]
        return BattlefieldSnapshot(
            round_number=round_number,
            message=message,
            left=bbox.left,
            top=bbox.top,
            rows=self._render_rows(bbox),
            sprites=sprites,
        )


class MapBuilder:
    """Parses the textual battlefield format.

    ``.`` is open ground, ``#`` a wall, ``E``/``G`` a sprite standing on open
    ground. Surrounding whitespace and blank lines are ignored; every remaining
    row must have the same width.
    """

    def __init__(self, sprite_builder: Optional[SpriteBuilder] = None) -> None:
        self.sprite_builder = sprite_builder or SpriteBuilder()

    def build(self, text: str) -> Map:
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ParseMapError("no rows to parse")

        width = len(rows[0])
        game_map = Map()
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ParseMapError(
                    f"row has {len(row)} columns, expected {width} (map is not rectangular)",
                    line=y,
                )
            for x, char in enumerate(row):
                try:
                    element = MapElement.parse(char)
                except ParseMapError as exc:
                    raise ParseMapError(exc.reason, line=y, column=x, underlying=exc.underlying) from exc

                point = Point(x, y)
                game_map.grid.insert(point, element.tile)
                if element.species is not None:
                    game_map.sprites.place(point, self.sprite_builder.build(element.species))

        return game_map
