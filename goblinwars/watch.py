"""Watch a battle play out in the terminal.

The simulation runs to completion on a worker thread and pushes a snapshot
after every round into a one-way channel. The display side polls that channel
without blocking and only ever draws the newest snapshot, so it can fall
behind without slowing the battle down. Closing the channel (display gone)
turns further sends into no-ops; the battle still finishes.
"""

from __future__ import annotations

import asyncio
import queue
import sys
import threading
import time
from typing import Callable, Optional, TextIO

from .battlefield import BattlefieldSnapshot
from .config import Config
from .errors import GoblinWarsError
from .game import Game, RunOutcome
from .logging_utils import Color, colored

Renderer = Callable[[BattlefieldSnapshot], None]

_SPECIES_COLORS = {"E": Color.YELLOW, "G": Color.MAGENTA}


class SnapshotChannel:
    """Fire-and-forget channel from the simulation thread to the display."""

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[BattlefieldSnapshot]" = queue.SimpleQueue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def close(self) -> None:
        self._closed.set()

    def send(self, snapshot: BattlefieldSnapshot) -> bool:
        """Queue ``snapshot``. Returns False (and drops it) once the receiver is gone."""
        if self.closed:
            return False
        self._queue.put(snapshot)
        return True

    def drain(self) -> Optional[BattlefieldSnapshot]:
        """Newest pending snapshot, discarding older ones; None if nothing arrived."""
        latest = None
        while True:
            try:
                latest = self._queue.get_nowait()
            except queue.Empty:
                return latest


def playback_delay(speed: int) -> float:
    """Seconds to pause before each round: 0.5s at speed 1, 0.1s at speed 5."""
    return max(500 - (speed - 1) * 100, 0) / 1000


def simulate(game: Game, channel: SnapshotChannel, delay: float = 0.0) -> RunOutcome:
    """Run ``game`` to the end, reporting every round on ``channel``.

    The final snapshot carries the outcome (or the error) as its message. Errors
    are re-raised after being reported.
    """

    def on_round(current: Game, round_number: int) -> None:
        if delay:
            time.sleep(delay)
        channel.send(current.map.snapshot(round_number, f"Round: {round_number}"))

    try:
        outcome = game.run(on_round)
    except GoblinWarsError as exc:
        channel.send(game.map.snapshot(game.rounds_played, f"Error: {exc}"))
        raise

    channel.send(game.map.snapshot(game.rounds_played, str(outcome)))
    return outcome


async def watch(
    game: Game,
    render: Renderer,
    *,
    speed: Optional[int] = None,
    fps: Optional[int] = None,
) -> RunOutcome:
    """Play ``game`` on a background thread while ``render`` draws snapshots.

    Args:
        game: Battle to play
        render: Called on the event loop with the newest snapshot
        speed: Playback speed 1 (slow) to 5 (fast); defaults to Config.PLAYBACK_SPEED
        fps: Display polling rate; defaults to Config.DISPLAY_FPS

    Returns:
        The battle's RunOutcome (errors from the battle propagate)
    """
    speed = speed or Config.PLAYBACK_SPEED
    fps = fps or Config.DISPLAY_FPS

    channel = SnapshotChannel()
    render(game.map.snapshot(0, "Starting"))

    worker = asyncio.create_task(
        asyncio.to_thread(simulate, game, channel, playback_delay(speed))
    )
    try:
        while not worker.done():
            snapshot = channel.drain()
            if snapshot is not None:
                render(snapshot)
            await asyncio.sleep(1 / fps)

        snapshot = channel.drain()
        if snapshot is not None:
            render(snapshot)
        return worker.result()
    finally:
        channel.close()


def render_snapshot(snapshot: BattlefieldSnapshot) -> str:
    """Terminal text for a snapshot: status line, then rows with health annotations."""
    lines = [colored(snapshot.message, Color.CYAN, bold=True)]
    for offset, row in enumerate(snapshot.rows):
        y = snapshot.top + offset
        glyphs = "".join(
            colored(char, _SPECIES_COLORS[char]) if char in _SPECIES_COLORS else char
            for char in row
        )
        info = ", ".join(sprite.info() for sprite in snapshot.sprites_on_row(y))
        lines.append(f"{glyphs}   {info}".rstrip())
    return "\n".join(lines)


def terminal_renderer(out: TextIO = sys.stdout) -> Renderer:
    """Renderer that redraws the whole screen for every snapshot."""

    def render(snapshot: BattlefieldSnapshot) -> None:
        out.write("\033[2J\033[H")
        out.write(render_snapshot(snapshot) + "\n")
        out.flush()

    return render
