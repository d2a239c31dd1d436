import pytest

from aoc2024.q03 import (
    Mul,
    all_indexes,
    parse_muls,
    parse_number,
    part1,
    part2,
    should_do,
)

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_parse_number_prefix():
    assert parse_number("12,") == "12"


def test_parse_number_none():
    assert parse_number("abc") is None
    assert parse_number("") is None


def test_parse_number_unterminated_drops_last_digit():
    assert parse_number("123") == "12"


def test_parse_muls_single():
    assert parse_muls("mul(2,4)") == [Mul(2, 4, 0)]


@pytest.mark.parametrize(
    "text",
    ["mul(2,4]", "mul[2,4)", "mul(2 ,4)", "mul(,4)", "mul(2,)", "mul(2,4", "mul("],
)
def test_parse_muls_rejects_malformed(text):
    assert parse_muls(text) == []


def test_parse_muls_positions_point_at_mul():
    for m in parse_muls(EXAMPLE1):
        assert EXAMPLE1.startswith(f"mul({m.a},{m.b})", m.pos)


def test_all_indexes_invariants():
    text = "do()xdo()do()y"
    idx = all_indexes(text, "do()")
    assert len(idx) == text.count("do()")
    assert all(text.startswith("do()", i) for i in idx)
    assert idx == sorted(idx)


def test_all_indexes_missing():
    assert all_indexes("abc", "do()") == []


def test_should_do_without_markers():
    assert should_do(5, [], []) is True


def test_should_do_latest_marker_wins():
    assert should_do(10, [0], [5]) is False
    assert should_do(10, [7], [5]) is True
    assert should_do(3, [7], [5]) is True


def test_part1_example():
    assert part1(EXAMPLE1) == 161


def test_part2_example():
    assert part2(EXAMPLE2) == 48


def test_part2_equals_part1_without_markers():
    assert part2(EXAMPLE1.replace("do", "xx")) == part1(EXAMPLE1.replace("do", "xx"))