"""Search for the weakest elf attack power that wins without elf losses.

Each trial rebuilds the battlefield from its text with a stronger elf attack
and fights a fresh battle; nothing carries over between trials.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, Field

from .battlefield import MapBuilder
from .config import Config
from .errors import TuningExhaustedError
from .game import Game, RunOutcome
from .sprite import Species, SpriteBuilder

TrialCallback = Callable[[int, Game, int], None]


class TuningOutcome(BaseModel):
    """The winning attack power and the battle it produced."""

    attack_power: int = Field(..., gt=0)
    outcome: RunOutcome
    trials: int = Field(..., ge=1, description="Number of battles fought")


def flawless_elf_victory(game: Game, elves_at_start: int, outcome: RunOutcome) -> bool:
    return outcome.victors is Species.ELF and game.map.alive(Species.ELF) == elves_at_start


def find_minimum_elf_attack(
    text: str,
    *,
    start: Optional[int] = None,
    limit: Optional[int] = None,
    sprite_builder: Optional[SpriteBuilder] = None,
    on_trial: Optional[TrialCallback] = None,
) -> TuningOutcome:
    """Raise the elf attack power one step at a time until no elf dies.

    Args:
        text: Battlefield in the map text format
        start: First attack power to try (defaults to Config.TUNING_START)
        limit: Highest attack power to try; None searches until success
        sprite_builder: Base stats; only the elf attack power is overridden
        on_trial: Optional ``on_trial(attack_power, game, round_number)`` progress hook,
            called at the start of every round of every trial

    Raises:
        TuningExhaustedError: No attack power up to ``limit`` succeeded
        NoMovesRemainError: A trial battle deadlocked
    """
    start = Config.TUNING_START if start is None else start
    base = sprite_builder or SpriteBuilder()

    attack = start
    trials = 0
    while limit is None or attack <= limit:
        builder = MapBuilder(base.with_attack(Species.ELF, attack))
        game = Game(builder.build(text))
        elves = game.map.alive(Species.ELF)

        callback = None
        if on_trial is not None:
            callback = lambda g, round_number, power=attack: on_trial(power, g, round_number)

        outcome = game.run(callback)
        trials += 1
        if flawless_elf_victory(game, elves, outcome):
            return TuningOutcome(attack_power=attack, outcome=outcome, trials=trials)
        attack += 1

    raise TuningExhaustedError(start=start, limit=limit)
