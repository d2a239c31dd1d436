"""Day 2: safety of reactor level reports."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

_INT = re.compile(r"[+-]?[0-9]+")


def parse_line(line: str) -> list[int]:
    """Parse a space separated report."""
    levels = []
    for part in line.split(" "):
        if not _INT.fullmatch(part):
            raise ValueError(f"invalid number: {part!r}")
        levels.append(int(part))
    return levels


def is_unsafe(level: Sequence[int]) -> bool:
    """True unless the report is strictly monotonic with steps of 1 to 3."""
    if len(level) < 2:
        return True
    first_diff = level[0] - level[1]
    if first_diff == 0 or abs(first_diff) > 3:
        return True
    ascending = first_diff < 0
    for current, following in zip(level[1:], level[2:]):
        diff = current - following
        if diff == 0 or abs(diff) > 3 or (diff > 0) == ascending:
            return True
    return False


def try_removing_one(level: Sequence[int]) -> bool:
    """True if the report stays unsafe whichever single level is removed."""
    items = list(level)
    return all(is_unsafe(items[:i] + items[i + 1:]) for i in range(len(items)))


def _reports(text: str) -> Iterator[list[int]]:
    for line in text.split("\n"):
        if line:
            yield parse_line(line)


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in _reports(text) if not is_unsafe(report))


def part2(text: str) -> int:
    """Number of reports that are safe, allowing one level to be removed."""
    return sum(
        1
        for report in _reports(text)
        if not is_unsafe(report) or not try_removing_one(report)
    )