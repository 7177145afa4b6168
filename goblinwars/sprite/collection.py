"""Point-indexed collection of the sprites standing on the battlefield."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from goblinwars.errors import OccupiedError
from goblinwars.geometry import BoundingBox, Direction, Point, reading_order
from goblinwars.sprite.model import Species, Sprite, SpriteStatus


class Sprites:
    """Live sprites keyed by position.

    At most one sprite stands on a point. Dead sprites are removed by ``attack``
    as soon as they fall, so everything reachable through this collection is
    alive.
    """

    def __init__(self) -> None:
        self._sprites: Dict[Point, Sprite] = {}

    def __len__(self) -> int:
        return len(self._sprites)

    def __contains__(self, point: Point) -> bool:
        return point in self._sprites

    def place(self, position: Point, sprite: Sprite) -> None:
        if position in self._sprites:
            raise OccupiedError(origin=position, destination=position)
        self._sprites[position] = sprite

    def get(self, point: Point) -> Optional[Sprite]:
        return self._sprites.get(point)

    def items(self) -> Iterator[Tuple[Point, Sprite]]:
        return iter(list(self._sprites.items()))

    def positions(self) -> List[Point]:
        """Occupied points in reading order."""
        return sorted(self._sprites, key=reading_order)

    def step(self, point: Point, direction: Direction) -> Point:
        """Move the sprite at ``point`` one square and return its new position."""
        destination = point.step(direction)
        if destination in self._sprites:
            raise OccupiedError(origin=point, destination=destination)
        sprite = self._sprites.pop(point)
        self._sprites[destination] = sprite
        return destination

    def attack(self, aggressor: Point, target: Point) -> SpriteStatus:
        power = self._sprites[aggressor].attack()
        result = self._sprites[target].wound(power)

        # Corpses leave the battlefield immediately.
        if result.dead:
            del self._sprites[target]
        return result

    def alive(self, species: Species) -> int:
        return sum(1 for sprite in self._sprites.values() if sprite.species is species)

    def total_health(self) -> int:
        return sum(sprite.health for sprite in self._sprites.values())

    def bbox(self) -> BoundingBox:
        return BoundingBox.from_points(self._sprites)

    def victorious(self) -> Optional[Species]:
        """The species left standing, if only one remains."""
        species = {sprite.species for sprite in self._sprites.values()}
        if len(species) == 1:
            return species.pop()
        return None
