"""Breadth-first pathfinding towards the nearest enemy, with a memo cache.

The search walks outward from a sprite one level at a time. At the first level
that touches a square in range of an enemy, the square first in reading order
wins. Each frontier square carries the direction of the first step that
reached it; because the seeds are enqueued in ``Direction.all()`` order and
squares are marked visited on first discovery, that direction is the first in
reading order among all shortest paths to the square.

Results are memoised per origin. Any move or death on the battlefield can open
or close a route for every sprite, so the round engine must call
``Pathfinder.invalidate`` after each one; the cache is all-or-nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from goblinwars.geometry import Direction, Point, reading_order

from .map import Map


@dataclass(frozen=True)
class SpritePath:
    """Where a sprite is heading, which way to step first, and how far it is."""

    destination: Point
    direction: Direction
    distance: int


def shortest_path(game_map: Map, origin: Point) -> Optional[SpritePath]:
    """Compute the path for the sprite at ``origin`` without any caching.

    Returns None when there is no sprite at ``origin``, when it already stands
    next to an enemy, or when no square in range of an enemy is reachable.
    """
    sprite = game_map.sprites.get(origin)
    if sprite is None:
        return None

    if game_map.target(origin) is not None:
        return None

    targets = game_map.target_points(sprite.species)
    if not targets:
        return None

    visited: Set[Point] = {origin}
    frontier: List[Tuple[Point, Direction]] = []
    for direction in Direction.all():
        point = origin.step(direction)
        if not game_map.is_occupied(point):
            visited.add(point)
            frontier.append((point, direction))

    distance = 1
    while frontier:
        reached = [(point, direction) for point, direction in frontier if point in targets]
        if reached:
            destination, direction = min(reached, key=lambda entry: reading_order(entry[0]))
            return SpritePath(destination=destination, direction=direction, distance=distance)

        next_frontier: List[Tuple[Point, Direction]] = []
        for point, first_step in frontier:
            for direction in Direction.all():
                neighbor = point.step(direction)
                if neighbor in visited or game_map.is_occupied(neighbor):
                    continue
                visited.add(neighbor)
                next_frontier.append((neighbor, first_step))
        frontier = next_frontier
        distance += 1

    return None


class Pathfinder:
    """Read-through cache of ``shortest_path`` results keyed by origin.

    Only ``find_path`` and ``invalidate`` change the cache; there is no way to
    insert or edit an entry directly.
    """

    def __init__(self) -> None:
        self._cache: Dict[Point, Optional[SpritePath]] = {}
        self.hits = 0
        self.misses = 0

    def find_path(self, game_map: Map, origin: Point) -> Optional[SpritePath]:
        if origin in self._cache:
            self.hits += 1
            return self._cache[origin]

        self.misses += 1
        path = shortest_path(game_map, origin)
        self._cache[origin] = path
        return path

    def invalidate(self) -> None:
        """Forget every cached path. Call after any move or death."""
        self._cache.clear()

    def cached(self, origin: Point) -> bool:
        return origin in self._cache

    def __len__(self) -> int:
        return len(self._cache)
