"""Grid geometry primitives.

Points use screen coordinates: ``x`` grows to the right and ``y`` grows
downwards, so "up" means ``y - 1``. Every ordering decision in the battle
(turn order, target choice, path tie-breaks) goes through ``reading_order``:
top row first, then left to right within a row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple


def reading_order(point: "Point") -> Tuple[int, int]:
    """Sort key placing points top-to-bottom, then left-to-right."""

    return (point.y, point.x)


class Direction(Enum):
    """Cardinal step directions."""

    UP = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @classmethod
    def all(cls) -> List["Direction"]:
        """Directions ordered so the points they reach are in reading order."""

        return [cls.UP, cls.LEFT, cls.RIGHT, cls.DOWN]


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate with structural equality and hashing."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Point":
        dx, dy = direction.delta
        return Point(self.x + dx, self.y + dy)

    def adjacent(self) -> List["Point"]:
        """The four neighbours, in reading order."""

        return [self.step(direction) for direction in Direction.all()]

    def distance(self, other: "Point") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass
class BoundingBox:
    """Inclusive rectangle folded over a set of points.

    An empty box has ``left > right`` and ``top > bottom``; ``include`` widens it.
    Boxes are always derived from current occupants and never stored as state.
    """

    left: int
    right: int
    top: int
    bottom: int

    @classmethod
    def empty(cls) -> "BoundingBox":
        return cls(left=0, right=-1, top=0, bottom=-1)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        bbox = cls.empty()
        for point in points:
            bbox.include(point)
        return bbox

    def is_empty(self) -> bool:
        return self.left > self.right or self.top > self.bottom

    def include(self, point: Point) -> None:
        if self.is_empty():
            self.left = self.right = point.x
            self.top = self.bottom = point.y
            return
        self.left = min(self.left, point.x)
        self.right = max(self.right, point.x)
        self.top = min(self.top, point.y)
        self.bottom = max(self.bottom, point.y)

    def union(self, other: "BoundingBox") -> "BoundingBox":
        if self.is_empty():
            return BoundingBox(other.left, other.right, other.top, other.bottom)
        if other.is_empty():
            return BoundingBox(self.left, self.right, self.top, self.bottom)
        return BoundingBox(
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            top=min(self.top, other.top),
            bottom=max(self.bottom, other.bottom),
        )

    def margin(self, size: int) -> "BoundingBox":
        if self.is_empty():
            return BoundingBox.empty()
        return BoundingBox(
            left=self.left - size,
            right=self.right + size,
            top=self.top - size,
            bottom=self.bottom + size,
        )

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def on_edge(self, point: Point) -> bool:
        if not self.contains(point):
            return False
        return point.x in (self.left, self.right) or point.y in (self.top, self.bottom)

    def horizontal(self) -> range:
        return range(self.left, self.right + 1)

    def vertical(self) -> range:
        return range(self.top, self.bottom + 1)

    @property
    def width(self) -> int:
        return max(self.right - self.left + 1, 0)

    @property
    def height(self) -> int:
        return max(self.bottom - self.top + 1, 0)
