"""
Round engine and battle driver.

A round gives every sprite standing at round start one turn, in reading order
of where they stood when the round began:

1. Skip the turn if that sprite has since died.
2. If only one species remains, the battle ends mid-round.
3. With no enemy adjacent, consult the pathfinder and step once.
4. Attack the weakest adjacent enemy (ties by reading order).

Every move and every death invalidates the pathfinder cache before the next
turn. ``Game.run`` plays rounds until a victory or until a round passes with
nothing happening, which is reported as a deadlock.
"""

from __future__ import annotations

import heapq
from enum import Enum
from typing import Callable, List, Optional, Tuple

from pydantic import BaseModel, Field

from .battlefield import Map, Pathfinder
from .config import Config
from .errors import GameInterruptedError, NoMovesRemainError, RoundLimitExceededError
from .geometry import Direction, Point, reading_order
from .sprite import Species, Sprite


class RoundOutcome(Enum):
    """Coarse classification of what happened during a round.

    The first four escalate in order as events occur; the victory outcomes are
    terminal and stop the round.
    """

    NO_ACTION = 0
    COMBAT_ONLY = 1
    CASUALTY = 2
    MOVEMENT = 3
    MID_ROUND_VICTORY = 4
    VICTORY = 5

    @property
    def finished(self) -> bool:
        return self in (RoundOutcome.MID_ROUND_VICTORY, RoundOutcome.VICTORY)

    def _escalate(self, event: "RoundOutcome") -> "RoundOutcome":
        if self.finished or self.value >= event.value:
            return self
        return event

    def combat(self) -> "RoundOutcome":
        return self._escalate(RoundOutcome.COMBAT_ONLY)

    def casualty(self) -> "RoundOutcome":
        return self._escalate(RoundOutcome.CASUALTY)

    def movement(self) -> "RoundOutcome":
        return self._escalate(RoundOutcome.MOVEMENT)


class RunOutcome(BaseModel):
    """Final result of a battle."""

    victors: Species
    rounds: int = Field(..., ge=0, description="Completed full rounds")
    hit_points: int = Field(..., ge=0, description="Total hit points of the survivors")
    score: int = Field(..., ge=0, description="rounds * hit_points")

    def __str__(self) -> str:
        return (
            f"{self.victors.plural} win after {self.rounds} rounds "
            f"for a total score of {self.score}"
        )


class Round:
    """One pass over every sprite alive at round start."""

    def __init__(self, game_map: Map, pathfinder: Pathfinder):
        self.map = game_map
        self.pathfinder = pathfinder
        self.outcome = RoundOutcome.NO_ACTION
        self.victor: Optional[Species] = None

        # Turn order is fixed at round start. Entries whose sprite is gone (or
        # no longer standing there) are skipped when popped.
        self._queue: List[Tuple[Tuple[int, int], Point, Sprite]] = [
            (reading_order(position), position, self.map.sprites.get(position))
            for position in self.map.sprites.positions()
        ]
        heapq.heapify(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def direction(self, location: Point) -> Optional[Direction]:
        """First step for the sprite at ``location``, or None to stay put."""
        if self.map.target(location) is not None:
            return None
        path = self.pathfinder.find_path(self.map, location)
        return path.direction if path is not None else None

    def tick(self) -> RoundOutcome:
        """Play the next sprite's turn."""
        if not self._queue or self.outcome.finished:
            return self.outcome

        _, location, sprite = heapq.heappop(self._queue)
        if self.map.sprites.get(location) is not sprite:
            return self.outcome

        victor = self.map.victorious()
        if victor is not None:
            self.victor = victor
            self.outcome = RoundOutcome.MID_ROUND_VICTORY
            return self.outcome

        # Movement phase
        direction = self.direction(location)
        if direction is not None:
            location = self.map.sprites.step(location, direction)
            self.outcome = self.outcome.movement()
            self.pathfinder.invalidate()

        # Attack phase
        target = self.map.target(location)
        if target is not None:
            status = self.map.sprites.attack(location, target)
            if status.dead:
                self.outcome = self.outcome.casualty()
                self.pathfinder.invalidate()
            else:
                self.outcome = self.outcome.combat()

        return self.outcome

    def play(self) -> RoundOutcome:
        while self._queue and not self.outcome.finished:
            self.tick()

        # Every sprite has acted: a victory now counts the full round.
        if not self.outcome.finished:
            victor = self.map.victorious()
            if victor is not None:
                self.victor = victor
                self.outcome = RoundOutcome.VICTORY

        return self.outcome


RoundCallback = Callable[["Game", int], None]


class Game:
    """Owns a map and the pathfinder cache shared by its rounds."""

    def __init__(
        self,
        game_map: Map,
        *,
        pathfinder: Optional[Pathfinder] = None,
        round_limit: Optional[int] = None,
    ):
        """Set up a battle.

        Args:
            game_map: Battlefield to fight on; mutated in place by every round
            pathfinder: Optional path cache (a fresh one by default)
            round_limit: Optional cap on rounds; defaults to Config.ROUND_LIMIT
        """
        self.map = game_map
        self.pathfinder = pathfinder or Pathfinder()
        self.round_limit = round_limit if round_limit is not None else Config.ROUND_LIMIT
        self.rounds_played = 0

    def round(self) -> Round:
        return Round(self.map, self.pathfinder)

    def run(self, on_round: Optional[RoundCallback] = None) -> RunOutcome:
        """Play rounds until one side wins.

        Args:
            on_round: Optional callable invoked as ``on_round(game, round_number)``
                at the start of every round (progress display, snapshots).

        Returns:
            RunOutcome with victors, completed rounds, surviving hit points and score

        Raises:
            NoMovesRemainError: A round passed with no movement and no combat
            GameInterruptedError: ``on_round`` raised
            RoundLimitExceededError: The configured round limit was reached
        """
        round_number = 0
        while True:
            round_number += 1
            if self.round_limit is not None and round_number > self.round_limit:
                raise RoundLimitExceededError(limit=self.round_limit)

            if on_round is not None:
                try:
                    on_round(self, round_number)
                except Exception as exc:
                    raise GameInterruptedError(round_number=round_number, underlying=exc) from exc

            current = self.round()
            outcome = current.play()
            self.rounds_played = round_number

            if outcome is RoundOutcome.VICTORY:
                return self._outcome(current.victor, round_number)
            if outcome is RoundOutcome.MID_ROUND_VICTORY:
                return self._outcome(current.victor, round_number - 1)
            if outcome is RoundOutcome.NO_ACTION:
                raise NoMovesRemainError(round_number=round_number)

    def _outcome(self, victors: Species, rounds: int) -> RunOutcome:
        hit_points = self.map.score()
        return RunOutcome(
            victors=victors,
            rounds=rounds,
            hit_points=hit_points,
            score=rounds * hit_points,
        )
