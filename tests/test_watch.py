"""Tests for the snapshot channel and terminal playback."""

import io
from pathlib import Path

import pytest

from goblinwars.battlefield import MapBuilder
from goblinwars.errors import NoMovesRemainError
from goblinwars.game import Game
from goblinwars.watch import (
    SnapshotChannel,
    playback_delay,
    render_snapshot,
    simulate,
    terminal_renderer,
    watch,
)

FIXTURES = Path(__file__).parent / "fixtures"
DEADLOCK = "#######\n#E#.#G#\n#######"


def combat_game() -> Game:
    return Game(MapBuilder().build((FIXTURES / "combat" / "initial.txt").read_text(encoding="utf-8")))


def test_channel_keeps_only_the_newest_snapshot():
    game_map = MapBuilder().build(DEADLOCK)
    channel = SnapshotChannel()

    assert channel.drain() is None
    assert channel.send(game_map.snapshot(1, "first"))
    assert channel.send(game_map.snapshot(2, "second"))

    latest = channel.drain()
    assert latest.message == "second"
    assert channel.drain() is None


def test_closed_channel_drops_sends():
    channel = SnapshotChannel()
    channel.close()

    assert channel.closed
    assert channel.send(MapBuilder().build(DEADLOCK).snapshot()) is False
    assert channel.drain() is None


def test_playback_delay_by_speed():
    assert playback_delay(1) == pytest.approx(0.5)
    assert playback_delay(3) == pytest.approx(0.3)
    assert playback_delay(5) == pytest.approx(0.1)


def test_simulate_reports_outcome():
    game = combat_game()
    channel = SnapshotChannel()

    outcome = simulate(game, channel)

    final = channel.drain()
    assert outcome.score == 27730
    assert final.message == str(outcome)
    assert final.round_number == 47
    assert all("E" not in row for row in final.rows)


def test_simulate_reports_errors_then_raises():
    game = Game(MapBuilder().build(DEADLOCK))
    channel = SnapshotChannel()

    with pytest.raises(NoMovesRemainError):
        simulate(game, channel)

    assert channel.drain().message.startswith("Error: No moves remain")


def test_simulate_keeps_running_after_display_closes():
    channel = SnapshotChannel()
    channel.close()

    outcome = simulate(combat_game(), channel)

    assert outcome.rounds == 47


@pytest.mark.asyncio
async def test_watch_renders_until_the_end(monkeypatch):
    monkeypatch.setattr("goblinwars.watch.playback_delay", lambda speed: 0.0)
    rendered = []

    outcome = await watch(combat_game(), rendered.append, speed=5, fps=200)

    assert outcome.score == 27730
    assert rendered[0].message == "Starting"
    assert rendered[0].round_number == 0
    assert rendered[-1].message == str(outcome)


@pytest.mark.asyncio
async def test_watch_propagates_battle_errors(monkeypatch):
    monkeypatch.setattr("goblinwars.watch.playback_delay", lambda speed: 0.0)
    rendered = []

    with pytest.raises(NoMovesRemainError):
        await watch(Game(MapBuilder().build(DEADLOCK)), rendered.append, fps=200)

    assert rendered[-1].message.startswith("Error:")


def test_render_snapshot_without_colors(monkeypatch):
    monkeypatch.setenv("GOBLINWARS_NO_COLOR", "1")
    game_map = combat_game().map

    text = render_snapshot(game_map.snapshot(0, "Starting"))

    lines = text.splitlines()
    assert lines[0] == "Starting"
    assert lines[1:] == [line.rstrip() for line in game_map.render_status().splitlines()]


def test_render_snapshot_colors_species(monkeypatch):
    monkeypatch.delenv("GOBLINWARS_NO_COLOR", raising=False)

    text = render_snapshot(combat_game().map.snapshot(0, "Starting"))

    assert "\033[93mE\033[0m" in text
    assert "\033[95mG\033[0m" in text


def test_terminal_renderer_redraws_screen(monkeypatch):
    monkeypatch.setenv("GOBLINWARS_NO_COLOR", "1")
    out = io.StringIO()
    render = terminal_renderer(out)

    render(combat_game().map.snapshot(0, "Starting"))

    written = out.getvalue()
    assert written.startswith("\033[2J\033[H")
    assert "Starting\n#######" in written
