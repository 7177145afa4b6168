"""Per-species stat tables used when sprites are placed on a new map."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from goblinwars.config import Config
from goblinwars.sprite.model import Species, Sprite


@dataclass(frozen=True)
class StatBuilder:
    """A default stat with optional per-species overrides."""

    default: int
    species: Dict[Species, int] = field(default_factory=dict)

    def for_species(self, species: Species, stat: int) -> "StatBuilder":
        return replace(self, species={**self.species, species: stat})

    def get(self, species: Species) -> int:
        return self.species.get(species, self.default)


@dataclass(frozen=True)
class SpriteBuilder:
    """Creates sprites with hit points and attack power looked up by species.

    Builders are immutable; ``with_health`` and ``with_attack`` return new
    builders so a base builder can be shared across trials.
    """

    health: StatBuilder = field(default_factory=lambda: StatBuilder(Config.DEFAULT_HIT_POINTS))
    attack: StatBuilder = field(default_factory=lambda: StatBuilder(Config.DEFAULT_ATTACK_POWER))

    def with_health(self, species: Species, health: int) -> "SpriteBuilder":
        return replace(self, health=self.health.for_species(species, health))

    def with_attack(self, species: Species, attack: int) -> "SpriteBuilder":
        return replace(self, attack=self.attack.for_species(species, attack))

    def build(self, species: Species, *, health: Optional[int] = None) -> Sprite:
        return Sprite(
            species=species,
            hit_points=self.health.get(species) if health is None else health,
            attack_power=self.attack.get(species),
        )
