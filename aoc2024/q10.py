"""Day 10: hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .vec import Vec2i

Neighbour = tuple[Vec2i, int]


@dataclass
class Grid:
    """Heights by row, and the trailheads (height 0)."""

    values: list[list[int]] = field(default_factory=list)
    heads: list[Vec2i] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def neighbours(self, pos: Vec2i) -> Iterator[Neighbour]:
        """Adjacent cells inside the grid, north, east, south then west."""
        candidates = (
            (pos.y > 0, Vec2i(pos.x, pos.y - 1)),
            (pos.x < self.width - 1, Vec2i(pos.x + 1, pos.y)),
            (pos.y < self.height - 1, Vec2i(pos.x, pos.y + 1)),
            (pos.x > 0, Vec2i(pos.x - 1, pos.y)),
        )
        for inside, neighbour in candidates:
            if inside:
                yield neighbour, self.values[neighbour.y][neighbour.x]


def parse(text: str) -> Grid:
    """Parse a map of single digit heights."""
    lines = text.strip().split("\n")
    grid = Grid(height=len(lines))
    for y, line in enumerate(lines):
        grid.width = len(line)
        row = []
        for x, char in enumerate(line):
            if len(char) != 1 or char not in "0123456789":
                raise ValueError(f"invalid height: {char!r}")
            digit = int(char)
            if digit == 0:
                grid.heads.append(Vec2i(x, y))
            row.append(digit)
        grid.values.append(row)
    return grid


def filter_neighbours(value: int, neighbours: Iterable[Neighbour]) -> Iterator[Neighbour]:
    """Neighbours exactly one higher than value."""
    return ((pos, height) for pos, height in neighbours if height == value + 1)


def _uphill(grid: Grid, pos: Vec2i) -> tuple[int, Iterator[Neighbour]]:
    value = grid.values[pos.y][pos.x]
    return value, filter_neighbours(value, grid.neighbours(pos))


def score_part1(grid: Grid, pos: Vec2i, found: set[Vec2i]) -> None:
    """Add to found every summit reachable from pos."""
    value, steps = _uphill(grid, pos)
    if value == 8:
        found.update(step for step, _ in steps)
        return
    for step, _ in steps:
        score_part1(grid, step, found)


def score_part2(grid: Grid, pos: Vec2i, found: list[Vec2i]) -> None:
    """Append to found the summit of every distinct trail from pos."""
    value, steps = _uphill(grid, pos)
    if value == 8:
        found.extend(step for step, _ in steps)
        return
    for step, _ in steps:
        score_part2(grid, step, found)


def part1(text: str) -> int:
    """Sum over trailheads of the number of reachable summits."""
    grid = parse(text)
    total = 0
    for head in grid.heads:
        found: set[Vec2i] = set()
        score_part1(grid, head, found)
        total += len(found)
    return total


def part2(text: str) -> int:
    """Sum over trailheads of the number of distinct trails."""
    grid = parse(text)
    total = 0
    for head in grid.heads:
        found: list[Vec2i] = []
        score_part2(grid, head, found)
        total += len(found)
    return total