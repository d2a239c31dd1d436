import pytest

from aoc2024.q02 import is_unsafe, parse_line, part1, part2, try_removing_one

EXAMPLE = (
    "7 6 4 2 1\n"
    "1 2 7 8 9\n"
    "9 7 6 2 1\n"
    "1 3 2 4 5\n"
    "8 6 4 4 1\n"
    "1 3 6 7 9\n"
)


def test_parse_line():
    assert parse_line("7 6 4 2 1") == [7, 6, 4, 2, 1]


def test_parse_line_rejects_garbage():
    with pytest.raises(ValueError):
        parse_line("1 x 3")


def test_parse_line_rejects_double_space():
    with pytest.raises(ValueError):
        parse_line("1  3")


@pytest.mark.parametrize(
    "level, unsafe",
    [
        ([7, 6, 4, 2, 1], False),
        ([1, 3, 6, 7, 9], False),
        ([1, 2, 7, 8, 9], True),
        ([9, 7, 6, 2, 1], True),
        ([1, 3, 2, 4, 5], True),
        ([8, 6, 4, 4, 1], True),
        ([1], True),
        ([], True),
    ],
)
def test_is_unsafe(level, unsafe):
    assert is_unsafe(level) is unsafe


def test_try_removing_one_fixable():
    assert try_removing_one([1, 3, 2, 4, 5]) is False
    assert try_removing_one([8, 6, 4, 4, 1]) is False


def test_try_removing_one_unfixable():
    assert try_removing_one([1, 2, 7, 8, 9]) is True
    assert try_removing_one([9, 7, 6, 2, 1]) is True


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_part2_never_below_part1():
    text = "1 5 9\n3 2 1\n1 1 1\n4 5 5 6\n"
    assert part2(text) >= part1(text)