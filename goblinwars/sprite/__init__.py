"""Sprites: the combatants of a goblin war."""

from .model import DEAD, Species, Sprite, SpriteStatus
from .builder import SpriteBuilder, StatBuilder
from .collection import Sprites

__all__ = [
    "DEAD",
    "Species",
    "Sprite",
    "SpriteStatus",
    "SpriteBuilder",
    "StatBuilder",
    "Sprites",
]
