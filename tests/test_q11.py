import pytest

from aoc2024.q11 import blink, blink_counts, count_values, parse, part1, part2


def test_parse():
    assert parse("125 17\n") == [125, 17]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("1 x")


def test_blink_rules():
    assert list(blink([0, 1, 10, 99, 999])) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_blink_negative_even_length_fails():
    with pytest.raises(ValueError):
        list(blink([-1]))


def test_count_values():
    assert count_values([1, 1, 2]) == {1: 2, 2: 1}


def test_counts_agree_with_sequence():
    stones = parse("125 17")
    sequence = list(stones)
    counts = count_values(stones)
    for _ in range(6):
        sequence = list(blink(sequence))
        counts = blink_counts(counts)
        assert counts == count_values(sequence)


def test_part1_example():
    assert part1("125 17") == 55312


def test_part1_matches_counted_blinks():
    counts = count_values(parse("125 17"))
    for _ in range(25):
        counts = blink_counts(counts)
    assert part1("125 17") == sum(counts.values())


def test_part2_grows_beyond_part1():
    assert part2("125 17") > part1("125 17")