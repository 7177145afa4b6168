"""Tests for tagged, color-coded console output."""

import sys

import pytest

from goblinwars.logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    Color,
    colored,
    log_deterministic,
    log_error,
    log_info,
    log_success,
)


def test_colored_wraps_text(monkeypatch):
    monkeypatch.delenv("GOBLINWARS_NO_COLOR", raising=False)

    assert colored("win", Color.GREEN) == "\033[92mwin\033[0m"
    assert colored("win", Color.GREEN, bold=True) == "\033[1m\033[92mwin\033[0m"


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("GOBLINWARS_NO_COLOR", "1")

    assert colored("win", Color.GREEN, bold=True) == "win"


@pytest.mark.parametrize(
    ("log", "tag"),
    [
        (log_deterministic, "[•]"),
        (log_success, "[✓]"),
        (log_info, "[i]"),
    ],
)
def test_tags_go_to_stdout(monkeypatch, capsys, log, tag):
    monkeypatch.setenv("GOBLINWARS_NO_COLOR", "1")

    log("Round 3")

    assert capsys.readouterr().out == f"{tag} Round 3\n"


def test_errors_can_go_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("GOBLINWARS_NO_COLOR", "1")

    log_error("Error: boom", file=sys.stderr)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{LOG_TAG_ERROR} Error: boom\n"
    assert LOG_TAG_SUCCESS == "[✓]"
