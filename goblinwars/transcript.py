"""Reference combat transcripts.

A transcript shows a battle's starting map beside its final map, followed by
summary lines::

    #######       #######
    #G..#E#       #...#E#   E(200)
    #E#E.E#  -->  #E#...#   E(197)
    #######       #######

    Combat ends after 37 full rounds
    Elves win with 982 total hit points left
    Outcome: 37 * 982 = 36334

``CombatExample.check`` replays the starting map and compares every part of
the result with the transcript.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .battlefield import Map, MapBuilder
from .errors import GoblinWarsError, ParseSpeciesError, TranscriptMismatchError, TranscriptParseError
from .game import Game, RunOutcome
from .sprite import Species

_MAP_ROW = re.compile(r"(#\S+)\s+(?:-->\s+)?(#.+)")
_ROUNDS = re.compile(r"Combat ends after (\d+) full rounds")
_VICTORY = re.compile(r"(\w+) win with (\d+) total hit points left")
_OUTCOME = re.compile(r"Outcome: (\d+) \* (\d+) = (\d+)")


def map_ascii_trim(text: str) -> str:
    """Strip every line and drop blank ones, for whitespace-insensitive comparison."""
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


def _number(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise TranscriptParseError(TranscriptParseError.INVALID_NUMBER, text) from exc


@dataclass
class CombatExample:
    """A parsed transcript: starting map plus the expected result."""

    map: Map
    outcome: str
    rounds: int
    hit_points: int
    score: int
    victor: Species

    @classmethod
    def parse(cls, text: str, builder: Optional[MapBuilder] = None) -> "CombatExample":
        lines = [line.strip() for line in text.splitlines()]
        lines = [line for line in lines if line]

        before = []
        after = []
        index = 0
        for index, line in enumerate(lines):
            match = _MAP_ROW.match(line)
            if match is None:
                break
            before.append(match.group(1))
            after.append(match.group(2))
        else:
            index = len(lines)

        rounds = hit_points = score = None
        victor = None
        for line in lines[index:]:
            match = _ROUNDS.search(line)
            if match:
                rounds = _number(match.group(1))
                continue

            match = _VICTORY.search(line)
            if match:
                try:
                    victor = Species.from_plural(match.group(1))
                except ParseSpeciesError as exc:
                    raise TranscriptParseError(
                        TranscriptParseError.INVALID_VICTOR, match.group(1)
                    ) from exc
                hit_points = _number(match.group(2))
                continue

            match = _OUTCOME.search(line)
            if match:
                rounds = _number(match.group(1))
                hit_points = _number(match.group(2))
                score = _number(match.group(3))
                continue

            raise TranscriptParseError(TranscriptParseError.INVALID_META, line)

        for name, value in (
            ("rounds", rounds),
            ("health", hit_points),
            ("score", score),
            ("victor", victor),
        ):
            if value is None:
                raise TranscriptParseError(TranscriptParseError.MISSING_PART, name)

        if not before:
            raise TranscriptParseError(TranscriptParseError.INVALID_MAP, "no map rows found")
        try:
            game_map = (builder or MapBuilder()).build("\n".join(before))
        except GoblinWarsError as exc:
            raise TranscriptParseError(TranscriptParseError.INVALID_MAP, str(exc)) from exc

        return cls(
            map=game_map,
            outcome="\n".join(after),
            rounds=rounds,
            hit_points=hit_points,
            score=score,
            victor=victor,
        )

    def check(self) -> RunOutcome:
        """Replay a copy of the starting map and compare against the transcript.

        Raises:
            TranscriptMismatchError: The first field that differs
            NoMovesRemainError: The replay deadlocked
        """
        game = Game(self.map.clone())
        outcome = game.run()

        got = map_ascii_trim(game.map.render_status())
        expected = map_ascii_trim(self.outcome)
        if got != expected:
            raise TranscriptMismatchError(field="Outcome map", got=got, expected=expected)

        for field, got_value, expected_value in (
            ("Rounds", outcome.rounds, self.rounds),
            ("Victor", outcome.victors, self.victor),
            ("Hit points", outcome.hit_points, self.hit_points),
            ("Score", outcome.score, self.score),
        ):
            if got_value != expected_value:
                raise TranscriptMismatchError(field=field, got=got_value, expected=expected_value)

        return outcome
