"""Pydantic schemas for battlefield snapshots.

``Map`` and ``Sprites`` are mutable runtime containers. Snapshots copy their
contents into these models so a display (or a test) can hold on to a round's
state while the simulation keeps mutating the live map.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class SpriteState(BaseModel):
    """One sprite as it stood when the snapshot was taken."""

    species: str = Field(..., description="Species glyph (E or G)")
    x: int
    y: int
    hit_points: int = Field(..., ge=0)
    attack_power: int = Field(..., gt=0)

    def info(self) -> str:
        return f"{self.species}({self.hit_points})"


class BattlefieldSnapshot(BaseModel):
    """An owned, independent copy of the battlefield after a round."""

    round_number: int = Field(0, ge=0, description="Round about to be played (0 before the first)")
    message: str = Field("", description="Free-text status line for the display")
    left: int = Field(0, description="x coordinate of the first column in rows")
    top: int = Field(0, description="y coordinate of the first row in rows")
    rows: List[str] = Field(
        default_factory=list,
        description="Rendered map rows, sprites drawn by glyph, without health annotations",
    )
    sprites: List[SpriteState] = Field(
        default_factory=list, description="Living sprites in reading order"
    )

    def sprites_on_row(self, y: int) -> List[SpriteState]:
        return [sprite for sprite in self.sprites if sprite.y == y]
