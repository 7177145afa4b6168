"""
Goblin Wars - deterministic grid combat between elves and goblins.

Elves and goblins take turns in reading order: each steps along the shortest
path towards the nearest enemy, then strikes the weakest enemy in reach. The
simulation reproduces reference battle transcripts exactly.
"""

__version__ = "0.1.0"

from .geometry import BoundingBox, Direction, Point, reading_order
from .sprite import Species, Sprite, SpriteBuilder, Sprites, SpriteStatus, StatBuilder
from .battlefield import (
    BattlefieldSnapshot,
    Grid,
    Map,
    MapBuilder,
    MapElement,
    Pathfinder,
    SpritePath,
    SpriteState,
    Tile,
)
from .game import Game, Round, RoundOutcome, RunOutcome
from .transcript import CombatExample, map_ascii_trim
from .tuning import TuningOutcome, find_minimum_elf_attack
from .errors import (
    GoblinWarsError,
    GameInterruptedError,
    NoMovesRemainError,
    OccupiedError,
    ParseMapError,
    ParseSpeciesError,
    ParseTileError,
    RoundLimitExceededError,
    TranscriptMismatchError,
    TranscriptParseError,
    TuningExhaustedError,
)

__all__ = [
    # Geometry
    "BoundingBox",
    "Direction",
    "Point",
    "reading_order",
    # Sprites
    "Species",
    "Sprite",
    "SpriteBuilder",
    "Sprites",
    "SpriteStatus",
    "StatBuilder",
    # Battlefield
    "BattlefieldSnapshot",
    "Grid",
    "Map",
    "MapBuilder",
    "MapElement",
    "Pathfinder",
    "SpritePath",
    "SpriteState",
    "Tile",
    # Engine
    "Game",
    "Round",
    "RoundOutcome",
    "RunOutcome",
    # Harness
    "CombatExample",
    "map_ascii_trim",
    "TuningOutcome",
    "find_minimum_elf_attack",
    # Errors
    "GoblinWarsError",
    "GameInterruptedError",
    "NoMovesRemainError",
    "OccupiedError",
    "ParseMapError",
    "ParseSpeciesError",
    "ParseTileError",
    "RoundLimitExceededError",
    "TranscriptMismatchError",
    "TranscriptParseError",
    "TuningExhaustedError",
]
