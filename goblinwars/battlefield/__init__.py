"""Battlefield: terrain, sprites on it, and how they find each other."""

from .tile import Grid, Tile
from .schemas import BattlefieldSnapshot, SpriteState
from .map import Map, MapBuilder, MapElement
from .pathfinding import Pathfinder, SpritePath, shortest_path

__all__ = [
    "Grid",
    "Tile",
    "BattlefieldSnapshot",
    "SpriteState",
    "Map",
    "MapBuilder",
    "MapElement",
    "Pathfinder",
    "SpritePath",
    "shortest_path",
]
