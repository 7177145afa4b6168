"""Tests for terrain, map parsing, targeting and rendering."""

from pathlib import Path

import pytest

from goblinwars.battlefield import Grid, MapBuilder, MapElement, Tile
from goblinwars.errors import ParseMapError, ParseTileError
from goblinwars.geometry import Point
from goblinwars.sprite import Species
from goblinwars.transcript import map_ascii_trim

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def test_tile_parse():
    assert Tile.parse(".") is Tile.EMPTY
    assert Tile.parse("#") is Tile.WALL

    with pytest.raises(ParseTileError) as exc:
        Tile.parse("x")
    assert exc.value.kind == ParseTileError.UNKNOWN_TILE


def test_grid_defaults_to_wall():
    grid = Grid()

    assert grid.get(Point(3, 3)) is Tile.WALL
    assert grid.insert(Point(3, 3), Tile.EMPTY) is True
    assert grid.insert(Point(3, 3), Tile.EMPTY) is False
    assert grid.get(Point(3, 3)) is Tile.EMPTY
    assert Point(3, 3) in grid

    assert grid.insert(Point(3, 3), Tile.WALL) is True
    assert grid.insert(Point(3, 3), Tile.WALL) is False
    assert len(grid) == 0


def test_map_element_parse():
    assert MapElement.parse("#").tile is Tile.WALL
    elf = MapElement.parse("E")
    assert elf.species is Species.ELF
    assert elf.tile is Tile.EMPTY
    assert elf.glyph() == "E"
    assert MapElement.parse(".").is_empty()

    with pytest.raises(ParseMapError):
        MapElement.parse("?")


def test_parse_and_render_round_trip():
    text = load_fixture("simple.txt")

    game_map = MapBuilder().build(text)

    assert len(game_map.sprites) == 4
    assert game_map.alive(Species.ELF) == 1
    assert game_map.alive(Species.GOBLIN) == 3
    assert game_map.render() == text
    assert str(game_map) == text


def test_parse_ignores_indentation_and_blank_lines():
    text = "\n   #####\n   #E.G#   \n\n   #####\n"

    game_map = MapBuilder().build(text)

    assert game_map.render() == "#####\n#E.G#\n#####\n"


def test_parse_marks_sprite_squares_open():
    game_map = MapBuilder().build("#####\n#E.G#\n#####")

    assert game_map.grid.get(Point(1, 1)) is Tile.EMPTY
    assert game_map.grid.get(Point(0, 1)) is Tile.WALL
    assert game_map.sprites.get(Point(3, 1)).species is Species.GOBLIN


def test_parse_rejects_ragged_rows():
    with pytest.raises(ParseMapError) as exc:
        MapBuilder().build("#####\n#E.G#\n####")

    assert exc.value.line == 2
    assert "line 3" in str(exc.value)


def test_parse_reports_bad_character_position():
    with pytest.raises(ParseMapError) as exc:
        MapBuilder().build("#####\n#E?G#\n#####")

    assert (exc.value.line, exc.value.column) == (1, 2)
    assert "line 2, column 3" in str(exc.value)
    assert isinstance(exc.value.underlying, Exception)


def test_parse_rejects_empty_input():
    with pytest.raises(ParseMapError):
        MapBuilder().build("  \n\n")


def test_occupied_squares():
    game_map = MapBuilder().build(load_fixture("simple.txt"))

    assert game_map.is_occupied(Point(0, 0))
    assert game_map.is_occupied(Point(1, 1))
    assert not game_map.is_occupied(Point(2, 1))
    assert game_map.is_occupied(Point(40, 40))


def test_target_prefers_weakest_then_reading_order():
    game_map = MapBuilder().build("#####\n#.G.#\n#GEG#\n#.G.#\n#####")
    elf = Point(2, 2)

    assert game_map.target(elf) == Point(2, 1)

    game_map.sprites.get(Point(3, 2)).hit_points = 50
    assert game_map.target(elf) == Point(3, 2)

    game_map.sprites.get(Point(1, 2)).hit_points = 50
    assert game_map.target(elf) == Point(1, 2)

    assert game_map.target(Point(1, 1)) is None


def test_target_points_are_open_squares_beside_enemies():
    game_map = MapBuilder().build(load_fixture("simple.txt"))

    assert game_map.target_points(Species.ELF) == {
        Point(3, 1),
        Point(5, 1),
        Point(2, 2),
        Point(1, 3),
        Point(3, 3),
        Point(5, 2),
    }


def test_render_status_annotates_rows():
    game_map = MapBuilder().build(load_fixture("combat/initial.txt"))

    assert map_ascii_trim(game_map.render_status()) == map_ascii_trim(
        load_fixture("combat/after_00.txt")
    )
    assert game_map.score() == 6 * 200


def test_clone_is_independent():
    game_map = MapBuilder().build(load_fixture("simple.txt"))
    copy = game_map.clone()

    game_map.sprites.attack(Point(4, 1), Point(1, 1))

    assert copy.sprites.get(Point(1, 1)).hit_points == 200
    assert game_map.sprites.get(Point(1, 1)).hit_points == 197


def test_snapshot_copies_state():
    game_map = MapBuilder().build(load_fixture("simple.txt"))

    snapshot = game_map.snapshot(3, "Round: 3")
    game_map.sprites.attack(Point(4, 1), Point(1, 1))

    assert snapshot.round_number == 3
    assert snapshot.message == "Round: 3"
    assert (snapshot.left, snapshot.top) == (0, 0)
    assert snapshot.rows == map_ascii_trim(load_fixture("simple.txt")).splitlines()
    assert [sprite.info() for sprite in snapshot.sprites] == [
        "E(200)",
        "G(200)",
        "G(200)",
        "G(200)",
    ]
    assert [sprite.info() for sprite in snapshot.sprites_on_row(3)] == ["G(200)", "G(200)"]


def test_render_trims_walls_beyond_one_square():
    game_map = MapBuilder().build("#######\n#######\n#.G.E.#\n#######\n")

    assert game_map.render() == "#######\n#.G.E.#\n#######\n"


def test_snapshot_lists_sprites_in_reading_order():
    game_map = MapBuilder().build("#####\n#.G.#\n#GEG#\n#####")

    snapshot = game_map.snapshot()

    assert [(sprite.species, sprite.x, sprite.y) for sprite in snapshot.sprites] == [
        ("G", 2, 1),
        ("G", 1, 2),
        ("E", 2, 2),
        ("G", 3, 2),
    ]
