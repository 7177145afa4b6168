"""Console output for the goblinwars command line.

Every line starts with a short bracketed tag, so a battle log reads the same
with or without colour. Export ``GOBLINWARS_NO_COLOR`` to get plain text
(piping to a file, snapshot tests).
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI escapes used by the CLI and the playback screen."""

    BLUE = "\033[94m"      # round progress
    RED = "\033[91m"       # failures
    GREEN = "\033[92m"     # battle results
    CYAN = "\033[96m"      # map details, playback status line

    YELLOW = "\033[93m"    # E
    MAGENTA = "\033[95m"   # G

    BOLD = "\033[1m"
    RESET = "\033[0m"


def colors_enabled() -> bool:
    return not os.getenv("GOBLINWARS_NO_COLOR")


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Return ``text`` wrapped in ``color`` (and bold), or unchanged when colour is off."""
    if not colors_enabled():
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """One step of the simulation, e.g. ``[•] Round 12``."""
    print(colored(f"{LOG_TAG_DETERMINISTIC} {message}", Color.BLUE))


def log_error(message: str, *, file=None) -> None:
    """A failure; the CLI sends these to stderr."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED), file=file)


def log_success(message: str) -> None:
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
