"""Exceptions raised by the battle engine and its loaders.

Each exception keeps the structured fields that caused it so callers (tests,
the CLI) can inspect them, and composes a readable message for display.
"""

from typing import Optional


class GoblinWarsError(Exception):
    """Base class for every error raised by goblinwars."""


# =============================
# Parse errors
# =============================

class ParseSpeciesError(GoblinWarsError, ValueError):
    """Raised when a sprite glyph cannot be parsed."""

    NO_CHARACTERS = "no_characters"
    TOO_MANY_CHARACTERS = "too_many_characters"
    UNKNOWN_SPECIES = "unknown_species"

    def __init__(self, kind: str, text: str = "") -> None:
        self.kind = kind
        self.text = text
        if kind == self.NO_CHARACTERS:
            message = "No characters to parse"
        elif kind == self.TOO_MANY_CHARACTERS:
            message = f"Too many characters to parse: {text}"
        else:
            message = f"Unknown species: {text}"
        super().__init__(message)


class ParseTileError(GoblinWarsError, ValueError):
    """Raised when a terrain glyph cannot be parsed."""

    NO_CHARACTERS = "no_characters"
    TOO_MANY_CHARACTERS = "too_many_characters"
    UNKNOWN_TILE = "unknown_tile"

    def __init__(self, kind: str, text: str = "") -> None:
        self.kind = kind
        self.text = text
        if kind == self.NO_CHARACTERS:
            message = "No characters to parse"
        elif kind == self.TOO_MANY_CHARACTERS:
            message = f"Too many characters to parse: {text}"
        else:
            message = f"Unknown tile: {text}"
        super().__init__(message)


class ParseMapError(GoblinWarsError, ValueError):
    """Raised when a battlefield description is malformed.

    ``line`` and ``column`` are zero-based and refer to the stripped input rows.
    """

    def __init__(
        self,
        reason: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        underlying: Optional[Exception] = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        self.underlying = underlying
        location = ""
        if line is not None:
            location = f" (line {line + 1}" + (f", column {column + 1})" if column is not None else ")")
        super().__init__(f"Invalid map{location}: {reason}")


class TranscriptParseError(GoblinWarsError, ValueError):
    """Raised when a reference combat transcript is malformed."""

    INVALID_MAP = "invalid_map"
    INVALID_NUMBER = "invalid_number"
    INVALID_VICTOR = "invalid_victor"
    MISSING_PART = "missing_part"
    INVALID_META = "invalid_meta"

    _LABELS = {
        INVALID_MAP: "Invalid Map",
        INVALID_NUMBER: "Invalid number",
        INVALID_VICTOR: "Invalid victor",
        MISSING_PART: "Missing Part",
        INVALID_META: "Invalid Meta Line",
    }

    def __init__(self, kind: str, detail: str) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{self._LABELS.get(kind, kind)}: {detail}")


# =============================
# Simulation errors
# =============================

class OccupiedError(GoblinWarsError):
    """Raised when a sprite would step onto a square that already holds one."""

    def __init__(self, *, origin, destination) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(
            f"Cannot move sprite from {origin} to {destination}: square is occupied"
        )


class NoMovesRemainError(GoblinWarsError):
    """Raised when a whole round passes without any movement or combat.

    The battlefield is deadlocked (no sprite can reach an enemy) and running
    further rounds would loop forever.
    """

    def __init__(self, *, round_number: int) -> None:
        self.round_number = round_number
        super().__init__(f"No moves remain on the map (round {round_number}).")


class GameInterruptedError(GoblinWarsError):
    """Raised when the per-round callback of ``Game.run`` fails."""

    def __init__(self, *, round_number: int, underlying: Exception) -> None:
        self.round_number = round_number
        self.underlying = underlying
        super().__init__(f"Game interrupted at round {round_number}: {underlying}")


class RoundLimitExceededError(GoblinWarsError):
    """Raised when a battle runs past the configured round limit."""

    def __init__(self, *, limit: int) -> None:
        self.limit = limit
        message = (
            f"Battle did not finish within {limit} rounds.\n\n"
            "Remediation tips:\n"
            "  - Unset GOBLINWARS_ROUND_LIMIT to allow unlimited rounds\n"
            "  - Check the input map for sprites that can never reach each other"
        )
        super().__init__(message)


# =============================
# Harness errors
# =============================

class TranscriptMismatchError(GoblinWarsError):
    """Raised when a replayed battle disagrees with its reference transcript."""

    def __init__(self, *, field: str, got, expected) -> None:
        self.field = field
        self.got = got
        self.expected = expected
        super().__init__(
            f"{field} doesn't match:\nGot:\n{got}\nExpected:\n{expected}"
        )


class TuningExhaustedError(GoblinWarsError):
    """Raised when no elf attack power up to the limit wins without losses."""

    def __init__(self, *, start: int, limit: int) -> None:
        self.start = start
        self.limit = limit
        super().__init__(
            f"No elf attack power between {start} and {limit} wins without elf casualties."
        )
