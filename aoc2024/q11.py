"""Day 11: stones that change each time you blink."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping

_INT = re.compile(r"[+-]?[0-9]+")


def parse(text: str) -> list[int]:
    """Parse space separated stone numbers."""
    stones = []
    for part in text.strip().split(" "):
        if not _INT.fullmatch(part):
            raise ValueError(f"invalid number: {part!r}")
        stones.append(int(part))
    return stones


def _change(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> Iterator[int]:
    """Lazily apply one blink to a sequence of stones."""
    for stone in stones:
        yield from _change(stone)


def count_values(values: Iterable[int]) -> Counter[int]:
    """How many times each stone number occurs."""
    return Counter(values)


def blink_counts(counts: Mapping[int, int]) -> Counter[int]:
    """Apply one blink to stones grouped by number."""
    result: Counter[int] = Counter()
    for stone, count in counts.items():
        for new_stone in _change(stone):
            result[new_stone] += count
    return result


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    stones: Iterable[int] = parse(text)
    for _ in range(25):
        stones = blink(stones)
    return sum(1 for _ in stones)


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    counts = count_values(parse(text))
    for _ in range(75):
        counts = blink_counts(counts)
    return sum(counts.values())