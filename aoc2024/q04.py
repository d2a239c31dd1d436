"""Day 4: word search for XMAS."""

from __future__ import annotations

from dataclasses import dataclass

from .vec import Vec2i

_DIRECTIONS = (
    Vec2i(1, 0),
    Vec2i(1, 1),
    Vec2i(0, 1),
    Vec2i(-1, 1),
    Vec2i(-1, 0),
    Vec2i(-1, -1),
    Vec2i(0, -1),
    Vec2i(1, -1),
)


@dataclass
class Grid:
    """A rectangular grid of letters, one string per row."""

    cells: list[str]
    width: int
    height: int

    def is_inside(self, pos: Vec2i) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def at(self, pos: Vec2i) -> str:
        return self.cells[pos.y][pos.x]

    def walk(self, start: Vec2i, direction: Vec2i, count: int) -> str:
        """Read up to count letters from start, stopping at the edge."""
        letters = []
        pos = start
        for _ in range(count):
            if not self.is_inside(pos):
                break
            letters.append(self.at(pos))
            pos = pos + direction
        return "".join(letters)


def parse_grid(text: str) -> Grid:
    """Parse a block of text into a grid."""
    stripped = text.strip()
    if not stripped:
        raise ValueError("empty grid")
    cells = stripped.replace("\r", "").split("\n")
    return Grid(cells=cells, width=len(cells[0]), height=len(cells))


def part1(text: str) -> int:
    """Count XMAS in all eight directions."""
    grid = parse_grid(text)
    return sum(
        1
        for y, row in enumerate(grid.cells)
        for x, cell in enumerate(row)
        if cell == "X"
        for direction in _DIRECTIONS
        if grid.walk(Vec2i(x, y), direction, 4) == "XMAS"
    )


def part2(text: str) -> int:
    """Count MAS crosses centred on an A."""
    grid = parse_grid(text)
    words = ("MAS", "SAM")
    count = 0
    for y, row in enumerate(grid.cells):
        for x, cell in enumerate(row):
            if cell != "A":
                continue
            down_right = grid.walk(Vec2i(x - 1, y - 1), Vec2i(1, 1), 3)
            down_left = grid.walk(Vec2i(x + 1, y - 1), Vec2i(-1, 1), 3)
            if down_right in words and down_left in words:
                count += 1
    return count