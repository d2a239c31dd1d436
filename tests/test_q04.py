import pytest

from aoc2024.q04 import parse_grid, part1, part2
from aoc2024.vec import Vec2i

EXAMPLE = (
    "MMMSXXMASM\n"
    "MSAMXMSMSA\n"
    "AMXSXMAAMM\n"
    "MSAMASMSMX\n"
    "XMASAMXAMM\n"
    "XXAMMXXAMA\n"
    "SMSMSASXSS\n"
    "SAXAMASAAA\n"
    "MAMMMXMMMM\n"
    "MXMXAXMASX\n"
)


def test_parse_grid_dimensions():
    grid = parse_grid(EXAMPLE)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.cells[0] == "MMMSXXMASM"


def test_parse_grid_strips_carriage_returns():
    grid = parse_grid("AB\r\nCD\r\n")
    assert grid.cells == ["AB", "CD"]


def test_parse_grid_empty_raises():
    with pytest.raises(ValueError):
        parse_grid("  \n")


def test_is_inside_and_at():
    grid = parse_grid("AB\nCD")
    assert grid.is_inside(Vec2i(1, 1))
    assert not grid.is_inside(Vec2i(2, 0))
    assert not grid.is_inside(Vec2i(0, -1))
    assert grid.at(Vec2i(1, 0)) == "B"


def test_walk_reads_in_direction():
    grid = parse_grid("AB\nCD")
    assert grid.walk(Vec2i(0, 0), Vec2i(1, 1), 2) == "AD"


def test_walk_stops_at_edge():
    grid = parse_grid(EXAMPLE)
    assert grid.walk(Vec2i(0, 0), Vec2i(-1, 0), 4) == "M"
    assert grid.walk(Vec2i(-1, 0), Vec2i(1, 0), 4) == ""


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_part1_same_for_reversed_rows():
    reversed_rows = "\n".join(row[::-1] for row in EXAMPLE.strip().split("\n"))
    assert part1(reversed_rows) == part1(EXAMPLE)