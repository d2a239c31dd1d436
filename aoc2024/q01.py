"""Day 1: distances and similarity between two location lists."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterator

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, side: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"Error while parsing {side} int: {text}")
    return int(text)


def split_line(line: str) -> tuple[int, int]:
    """Split a line into its left and right numbers."""
    first = line.find(" ")
    last = line.rfind(" ")
    if first == -1:
        raise ValueError(f"Couldn't find a space: '{line}'")
    left = _parse_int(line[:first], "left")
    right = _parse_int(line[last + 1:], "right")
    return left, right


def _pairs(text: str) -> Iterator[tuple[int, int]]:
    for number, line in enumerate(text.split("\n")):
        if not line:
            continue
        try:
            yield split_line(line)
        except ValueError as err:
            raise ValueError(f"Error on line {number}: {err}") from err


def part1(text: str) -> int:
    """Sum of distances between the sorted left and right lists."""
    pairs = list(_pairs(text))
    lefts = sorted(left for left, _ in pairs)
    rights = sorted(right for _, right in pairs)
    return sum(abs(left - right) for left, right in zip(lefts, rights))


def part2(text: str) -> int:
    """Similarity score: each left number times its count on the right."""
    pairs = list(_pairs(text))
    right_counts = Counter(right for _, right in pairs)
    return sum(left * right_counts[left] for left, _ in pairs)