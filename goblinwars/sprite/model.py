"""Combatants: species, status and the sprite itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from goblinwars.errors import ParseSpeciesError


class Species(Enum):
    """The two armies on the battlefield. The value is the map glyph."""

    ELF = "E"
    GOBLIN = "G"

    def is_enemy(self, other: "Species") -> bool:
        return self is not other

    @property
    def plural(self) -> str:
        return _PLURALS[self]

    @classmethod
    def parse(cls, text: str) -> "Species":
        if not text:
            raise ParseSpeciesError(ParseSpeciesError.NO_CHARACTERS)
        if len(text) != 1:
            raise ParseSpeciesError(ParseSpeciesError.TOO_MANY_CHARACTERS, text)
        for species in cls:
            if species.value == text:
                return species
        raise ParseSpeciesError(ParseSpeciesError.UNKNOWN_SPECIES, text)

    @classmethod
    def from_plural(cls, text: str) -> "Species":
        for species, plural in _PLURALS.items():
            if plural == text:
                return species
        raise ParseSpeciesError(ParseSpeciesError.UNKNOWN_SPECIES, text)

    def __str__(self) -> str:
        return self.value


_PLURALS = {Species.ELF: "Elves", Species.GOBLIN: "Goblins"}


@dataclass(frozen=True)
class SpriteStatus:
    """Result of a wound: remaining hit points, dead at zero."""

    hit_points: int

    @property
    def alive(self) -> bool:
        return self.hit_points > 0

    @property
    def dead(self) -> bool:
        return self.hit_points == 0

    @classmethod
    def alive_with(cls, hit_points: int) -> "SpriteStatus":
        if hit_points <= 0:
            raise ValueError(f"a living sprite needs hit points, got {hit_points}")
        return cls(hit_points)


DEAD = SpriteStatus(0)


@dataclass
class Sprite:
    """A single combatant.

    ``hit_points`` only ever decreases (through ``wound``) and saturates at zero.
    Position is not stored here; the ``Sprites`` collection keys sprites by point.
    """

    species: Species
    hit_points: int
    attack_power: int

    def attack(self) -> int:
        return self.attack_power

    def wound(self, attack_power: int) -> SpriteStatus:
        self.hit_points = max(self.hit_points - attack_power, 0)
        return self.status()

    def status(self) -> SpriteStatus:
        if self.hit_points == 0:
            return DEAD
        return SpriteStatus.alive_with(self.hit_points)

    @property
    def health(self) -> int:
        return self.hit_points

    def is_enemy(self, other: "Sprite") -> bool:
        return self.species.is_enemy(other.species)

    def glyph(self) -> str:
        return self.species.value

    def info(self) -> str:
        """Short status label, e.g. ``G(131)``."""
        return f"{self.glyph()}({self.hit_points})"
