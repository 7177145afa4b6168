"""
Goblin Wars command line.

Run: goblinwars path/to/map.txt
     goblinwars --example path/to/transcript.txt
     goblinwars --watch --speed 3 path/to/map.txt
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from .battlefield import MapBuilder
from .config import Config
from .errors import GoblinWarsError
from .game import Game, RunOutcome
from .logging_utils import log_deterministic, log_error, log_info, log_success
from .sprite import Species
from .transcript import CombatExample
from .tuning import find_minimum_elf_attack
from .watch import terminal_renderer, watch


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog="goblinwars", description="Play a goblin wars scenario.")
    parser.add_argument("input", type=Path, help="Map file (or transcript with --example)")
    parser.add_argument(
        "-e",
        "--example",
        action="store_true",
        help="Treat the input as a reference transcript and check the result against it",
    )
    parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Animate the battle in the terminal",
    )
    parser.add_argument(
        "-s",
        "--speed",
        type=int,
        choices=range(1, 6),
        default=Config.PLAYBACK_SPEED,
        help="Playback speed for --watch, 1 (slow) to 5 (fast)",
    )
    parser.add_argument(
        "--part2",
        action="store_true",
        help="Also find the lowest elf attack power that wins without elf losses",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Print every round")
    return parser.parse_args(argv)


def load(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def run_battle(game: Game, args: argparse.Namespace) -> RunOutcome:
    if args.watch:
        return asyncio.run(watch(game, terminal_renderer(), speed=args.speed))

    def progress(current: Game, round_number: int) -> None:
        log_deterministic(f"Round {round_number}")
        print(current.map.render_status())

    return game.run(progress if args.debug else None)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        Config.validate()
        if args.debug:
            print(Config.display())
        text = load(args.input)

        example = None
        if args.example:
            example = CombatExample.parse(text)
            game_map = example.map.clone()
        else:
            game_map = MapBuilder().build(text)
        source = game_map.render()

        log_info(
            f"Map: {args.input} "
            f"({game_map.alive(Species.ELF)} elves, {game_map.alive(Species.GOBLIN)} goblins)"
        )
        outcome = run_battle(Game(game_map), args)
        log_success(str(outcome))

        if example is not None:
            example.check()
            log_success("Outcome matches the reference transcript")

        if args.part2:
            tuned = find_minimum_elf_attack(source)
            log_success(
                f"Elves need attack power {tuned.attack_power}: {tuned.outcome} "
                f"({tuned.trials} trials)"
            )
    except (GoblinWarsError, OSError, ValueError) as exc:
        log_error(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
