import pytest

from cubed.mapcheck import (
    build_cells,
    check_closed,
    check_spawn_count,
    extract_map,
    find_spawn,
    load_map,
    reachable_cells,
)
from cubed.model import SPAWN_DIRECTIONS, Cell, SceneError, Vector

CLOSED = ["111111", "1N0001", "100001", "111111"]


def _lines(*rows, blanks=6):
    return [""] * blanks + list(rows)


def test_extract_map_returns_rows_after_blanks():
    assert extract_map(_lines(*CLOSED, blanks=7)) == CLOSED


def test_extract_map_needs_enough_leading_blank_lines():
    with pytest.raises(SceneError, match="invalid map file"):
        extract_map(_lines(*CLOSED, blanks=5))


def test_extract_map_without_rows():
    with pytest.raises(SceneError, match="no map in file"):
        extract_map([""] * 8)


def test_extract_map_rejects_blank_line_inside_map():
    with pytest.raises(SceneError, match="invalid map"):
        extract_map(_lines("111", "", "1N1", "111"))


@pytest.mark.parametrize("rows", [("1N1",), ("111", "1N1")])
def test_extract_map_rejects_small_maps(rows):
    with pytest.raises(SceneError, match="map too small"):
        extract_map(_lines(*rows))


@pytest.mark.parametrize("rows", [["111", "101", "111"], ["111", "NS1", "111"]])
def test_spawn_count_must_be_one(rows):
    with pytest.raises(SceneError, match="spawn"):
        check_spawn_count(rows)


def test_spawn_count_accepts_single_spawn():
    check_spawn_count(CLOSED)
    assert sum(row.count("N") for row in CLOSED) == 1


def test_build_cells_classifies_and_pads():
    cells = build_cells(["1 0W", "1"])
    assert cells[0] == [Cell.WALL, Cell.EMPTY, Cell.SPACE, Cell.SPAWN]
    assert cells[1] == [Cell.WALL, Cell.EMPTY, Cell.EMPTY, Cell.EMPTY]


def test_build_cells_rejects_unknown_character():
    with pytest.raises(SceneError, match="invalid character"):
        build_cells(["111", "1X1", "111"])


@pytest.mark.parametrize("letter", ["N", "S", "E", "W"])
def test_find_spawn_uses_letter_direction(letter):
    rows = ["111", f"1{letter}1", "111"]
    player = find_spawn(rows, build_cells(rows))
    assert player.dir == SPAWN_DIRECTIONS[letter]
    assert player.pos == Vector(1.5, 1.5)


def test_reachable_cells_stay_inside_walls():
    cells = build_cells(CLOSED)
    reachable = reachable_cells(cells, (1, 1))
    assert reachable == {(x, y) for x in range(1, 5) for y in (1, 2)}
    assert all(cells[y][x] is not Cell.WALL for x, y in reachable)


def test_check_closed_detects_open_border():
    rows = ["111111", "1N0000", "111111"]
    cells = build_cells(rows)
    with pytest.raises(SceneError, match="not closed"):
        check_closed(cells, reachable_cells(cells, (1, 1)))


def test_check_closed_detects_reachable_empty_cell():
    rows = ["11111", "1N 01", "11111"]
    cells = build_cells(rows)
    with pytest.raises(SceneError, match="empty cell"):
        check_closed(cells, reachable_cells(cells, (1, 1)))


def test_load_map_valid():
    rows, player = load_map(_lines(*CLOSED))
    assert rows == CLOSED
    assert player.pos == Vector(1.5, 1.5)
    assert player.dir == SPAWN_DIRECTIONS["N"]


def test_load_map_rejects_spawn_on_border():
    with pytest.raises(SceneError, match="not closed"):
        load_map(_lines("1N11", "1001", "1111"))


def test_load_map_rejects_padding_reachable():
    with pytest.raises(SceneError):
        load_map(_lines("111111", "1N0001", "1000", "111111"))