"""Tests for the elf attack power search."""

from pathlib import Path

import pytest

from goblinwars.errors import TuningExhaustedError
from goblinwars.sprite import Species
from goblinwars.transcript import CombatExample
from goblinwars.tuning import TuningOutcome, find_minimum_elf_attack

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def test_finds_minimum_attack_power():
    result = find_minimum_elf_attack(load_fixture("combat/initial.txt"))

    assert isinstance(result, TuningOutcome)
    assert result.attack_power == 15
    assert result.outcome.victors is Species.ELF
    assert result.outcome.rounds == 29
    assert result.outcome.hit_points == 172
    assert result.outcome.score == 4988
    assert result.trials == 12


@pytest.mark.parametrize(
    ("score", "attack_power", "tuned_score"),
    [(39514, 4, 31284), (18740, 34, 1140)],
)
def test_minimum_attack_power_for_transcripts(score, attack_power, tuned_score):
    example = CombatExample.parse(load_fixture(f"transcripts/combat_{score}.txt"))

    result = find_minimum_elf_attack(example.map.render())

    assert result.attack_power == attack_power
    assert result.outcome.score == tuned_score


def test_each_trial_starts_from_a_fresh_map():
    seen = {}

    def record(power, game, round_number):
        if round_number == 1:
            seen[power] = game.map.alive(Species.ELF)

    find_minimum_elf_attack(load_fixture("combat/initial.txt"), start=10, on_trial=record)

    assert list(seen) == [10, 11, 12, 13, 14, 15]
    assert set(seen.values()) == {2}


def test_search_gives_up_at_limit():
    with pytest.raises(TuningExhaustedError) as exc:
        find_minimum_elf_attack(load_fixture("combat/initial.txt"), start=4, limit=6)

    assert (exc.value.start, exc.value.limit) == (4, 6)
