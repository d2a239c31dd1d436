"""Day 6: a guard patrolling a lab, and obstacles that trap it in a loop."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import IntEnum

from .vec import Vec2i


class Direction(IntEnum):
    """Facing of the guard; turning right steps through the members in order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn_right(self) -> Direction:
        return Direction((self + 1) % 4)

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Guard:
    """The guard's position and facing."""

    pos: Vec2i = Vec2i(0, 0)
    direction: Direction = Direction.NORTH


@dataclass(frozen=True)
class Line:
    """A straight leg of the patrol, walked from start to end facing direction."""

    start: Vec2i
    end: Vec2i
    direction: Direction = Direction.NORTH

    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y


@dataclass
class Grid:
    """The lab: the guard and the obstacles, indexed by row and by column.

    ``rows[y]`` holds the sorted x of every obstacle in row y, and
    ``cols[x]`` the sorted y of every obstacle in column x.
    """

    guard: Guard = field(default_factory=Guard)
    rows: dict[int, list[int]] = field(default_factory=dict)
    cols: dict[int, list[int]] = field(default_factory=dict)
    width: int = 0
    height: int = 0

    def append_row(self, y: int, x: int) -> None:
        """Record an obstacle at x in row y."""
        _insert_sorted(self.rows.setdefault(y, []), x)

    def append_col(self, x: int, y: int) -> None:
        """Record an obstacle at y in column x."""
        _insert_sorted(self.cols.setdefault(x, []), y)

    def has_obstacle(self, x: int, y: int) -> bool:
        row = self.rows.get(y, [])
        index = bisect_left(row, x)
        return index < len(row) and row[index] == x

    def clone(self) -> Grid:
        """A copy whose obstacles can be changed without touching this grid."""
        return Grid(
            guard=self.guard,
            rows={y: list(xs) for y, xs in self.rows.items()},
            cols={x: list(ys) for x, ys in self.cols.items()},
            width=self.width,
            height=self.height,
        )


def _insert_sorted(values: list[int], value: int) -> None:
    index = bisect_left(values, value)
    if index == len(values) or values[index] != value:
        values.insert(index, value)


def parse_grid(text: str) -> Grid:
    """Parse the lab map: '#' is an obstacle, '^' the guard facing north."""
    lines = text.strip().split("\n")
    grid = Grid(height=len(lines))
    for y, line in enumerate(lines):
        grid.width = len(line)
        for x, char in enumerate(line):
            if char == "^":
                grid.guard = Guard(Vec2i(x, y), Direction.NORTH)
            elif char == "#":
                grid.append_row(y, x)
                grid.append_col(x, y)
    return grid


def find_closest_north(grid: Grid) -> int:
    """Row of the nearest obstacle above the guard, or -1."""
    col = grid.cols.get(grid.guard.pos.x, [])
    index = bisect_left(col, grid.guard.pos.y)
    return col[index - 1] if index > 0 else -1


def find_closest_south(grid: Grid) -> int:
    """Row of the nearest obstacle below the guard, or -1."""
    col = grid.cols.get(grid.guard.pos.x, [])
    index = bisect_right(col, grid.guard.pos.y)
    return col[index] if index < len(col) else -1


def find_closest_east(grid: Grid) -> int:
    """Column of the nearest obstacle right of the guard, or -1."""
    row = grid.rows.get(grid.guard.pos.y, [])
    index = bisect_right(row, grid.guard.pos.x)
    return row[index] if index < len(row) else -1


def find_closest_west(grid: Grid) -> int:
    """Column of the nearest obstacle left of the guard, or -1."""
    row = grid.rows.get(grid.guard.pos.y, [])
    index = bisect_left(row, grid.guard.pos.x)
    return row[index - 1] if index > 0 else -1


def next_position(grid: Grid) -> Vec2i | None:
    """Where the guard stops in front of an obstacle, or None if it leaves."""
    pos = grid.guard.pos
    direction = grid.guard.direction
    if direction is Direction.NORTH:
        y = find_closest_north(grid)
        return None if y == -1 else Vec2i(pos.x, y + 1)
    if direction is Direction.SOUTH:
        y = find_closest_south(grid)
        return None if y == -1 else Vec2i(pos.x, y - 1)
    if direction is Direction.EAST:
        x = find_closest_east(grid)
        return None if x == -1 else Vec2i(x - 1, pos.y)
    x = find_closest_west(grid)
    return None if x == -1 else Vec2i(x + 1, pos.y)


def count_unique(lines: Sequence[Line]) -> int:
    """Number of distinct cells covered by the lines, both ends included."""
    visited: set[Vec2i] = set()
    for line in lines:
        if line.is_horizontal():
            low, high = sorted((line.start.x, line.end.x))
            visited.update(Vec2i(x, line.start.y) for x in range(low, high + 1))
        else:
            low, high = sorted((line.start.y, line.end.y))
            visited.update(Vec2i(line.start.x, y) for y in range(low, high + 1))
    return len(visited)


def is_visited(lines: Sequence[Line], pos: Vec2i) -> int:
    """Index of the first line starting at pos, or -1."""
    return next((i for i, line in enumerate(lines) if line.start == pos), -1)


def _advance(grid: Grid, pos: Vec2i) -> Grid:
    return replace(grid, guard=Guard(pos, grid.guard.direction.turn_right()))


def is_infinite(grid: Grid) -> bool:
    """Whether the guard's patrol loops forever. The grid is left unchanged."""
    lines: list[Line] = []
    while (pos := next_position(grid)) is not None:
        index = is_visited(lines, pos)
        if index != -1 and lines[index].direction == grid.guard.direction.turn_right():
            return True
        lines.append(Line(grid.guard.pos, pos, grid.guard.direction))
        grid = _advance(grid, pos)
    return False


def part1(text: str) -> int:
    """Number of distinct cells the guard visits before leaving."""
    grid = parse_grid(text)
    lines: list[Line] = []
    while (pos := next_position(grid)) is not None:
        lines.append(Line(grid.guard.pos, pos))
        grid = _advance(grid, pos)

    guard = grid.guard
    exits = {
        Direction.NORTH: Vec2i(guard.pos.x, 0),
        Direction.SOUTH: Vec2i(guard.pos.x, grid.height - 1),
        Direction.EAST: Vec2i(grid.width - 1, guard.pos.y),
        Direction.WEST: Vec2i(0, guard.pos.y),
    }
    lines.append(Line(guard.pos, exits[guard.direction]))
    return count_unique(lines)


def part2(text: str) -> int:
    """Number of cells where one new obstacle traps the guard in a loop."""
    grid = parse_grid(text)
    count = 0
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.has_obstacle(x, y) or grid.guard.pos == Vec2i(x, y):
                continue
            candidate = grid.clone()
            candidate.append_row(y, x)
            candidate.append_col(x, y)
            if is_infinite(candidate):
                count += 1
    return count