"""
Goblin Wars Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Sprite stats (per-species overrides come from SpriteBuilder)
    DEFAULT_HIT_POINTS: int = int(os.getenv("GOBLINWARS_HIT_POINTS", "200"))
    DEFAULT_ATTACK_POWER: int = int(os.getenv("GOBLINWARS_ATTACK_POWER", "3"))

    # Playback (watch mode)
    PLAYBACK_SPEED: int = int(os.getenv("GOBLINWARS_SPEED", "1"))
    DISPLAY_FPS: int = int(os.getenv("GOBLINWARS_FPS", "30"))

    # Safety cap on battle length; None means run until victory or deadlock
    ROUND_LIMIT: Optional[int] = _optional_int("GOBLINWARS_ROUND_LIMIT")

    # Elf attack power search
    TUNING_START: int = int(os.getenv("GOBLINWARS_TUNING_START", "4"))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if cls.DEFAULT_HIT_POINTS <= 0:
            raise ValueError("GOBLINWARS_HIT_POINTS must be a positive integer")

        if cls.DEFAULT_ATTACK_POWER <= 0:
            raise ValueError("GOBLINWARS_ATTACK_POWER must be a positive integer")

        if not 1 <= cls.PLAYBACK_SPEED <= 5:
            raise ValueError("GOBLINWARS_SPEED must be between 1 and 5")

        if cls.TUNING_START <= 0:
            raise ValueError("GOBLINWARS_TUNING_START must be a positive integer")

        if cls.DISPLAY_FPS <= 0:
            raise ValueError("GOBLINWARS_FPS must be a positive integer")

        if cls.ROUND_LIMIT is not None and cls.ROUND_LIMIT <= 0:
            raise ValueError(
                "GOBLINWARS_ROUND_LIMIT must be positive. "
                "Leave it unset to run battles until they finish."
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Goblin Wars Configuration:",
            f"  Hit Points: {cls.DEFAULT_HIT_POINTS}",
            f"  Attack Power: {cls.DEFAULT_ATTACK_POWER}",
            f"  Speed: {cls.PLAYBACK_SPEED}",
            f"  FPS: {cls.DISPLAY_FPS}",
            f"  Round Limit: {cls.ROUND_LIMIT if cls.ROUND_LIMIT is not None else 'none'}",
            f"  Tuning Start: {cls.TUNING_START}",
        ]
        return "\n".join(lines)
