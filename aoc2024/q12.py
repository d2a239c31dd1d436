"""Day 12: garden plots, regions and fence prices."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .vec import Vec2i


@dataclass(frozen=True)
class Neighbour:
    """An adjacent plot and the plant growing on it."""

    pos: Vec2i
    id: str


@dataclass
class Gardens:
    """The garden map, one string of plant letters per row."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def neighbours(self, pos: Vec2i) -> list[Neighbour]:
        """Adjacent plots inside the map, north, east, south then west."""
        candidates = (
            (pos.y > 0, Vec2i(pos.x, pos.y - 1)),
            (pos.x < self.width - 1, Vec2i(pos.x + 1, pos.y)),
            (pos.y < self.height - 1, Vec2i(pos.x, pos.y + 1)),
            (pos.x > 0, Vec2i(pos.x - 1, pos.y)),
        )
        return [
            Neighbour(near, self.grid[near.y][near.x])
            for inside, near in candidates
            if inside
        ]


@dataclass
class Group:
    """A region: connected plots growing the same plant."""

    id: str
    items: list[Vec2i] = field(default_factory=list)

    def count_perimeter(self, gardens: Gardens) -> int:
        """Fence length around the region.

        Each side facing another plant counts once. A plot on the left or
        right edge of the map adds one, and one on the top or bottom edge adds
        one, even where both edges of the same axis touch it.
        """
        perimeter = 0
        for pos in self.items:
            perimeter += sum(
                1 for near in gardens.neighbours(pos) if near.id != self.id
            )
            if pos.x == 0 or pos.x == gardens.width - 1:
                perimeter += 1
            if pos.y == 0 or pos.y == gardens.height - 1:
                perimeter += 1
        return perimeter

    def __str__(self) -> str:
        items = " ".join(f"{{X:{p.x} Y:{p.y}}}" for p in self.items)
        return f"{{{self.id} [{items}]}}"


def parse(text: str) -> Gardens:
    """Parse the garden map."""
    lines = text.strip().split("\n")
    gardens = Gardens(height=len(lines))
    for line in lines:
        gardens.width = len(line)
        gardens.grid.append(line)
    return gardens


def grow(gardens: Gardens, ungrouped: set[Vec2i], positions: Iterable[Vec2i]) -> Group:
    """Extend positions to the whole region of the first one.

    Plots added to the region are removed from ungrouped.
    """
    items = list(positions)
    first = items[0]
    plant = gardens.grid[first.y][first.x]
    added = True
    while added:
        added = False
        for pos in list(items):
            for near in gardens.neighbours(pos):
                if near.id != plant or near.pos not in ungrouped:
                    continue
                items.append(near.pos)
                ungrouped.discard(near.pos)
                added = True
    return Group(id=plant, items=items)


def group(gardens: Gardens) -> list[Group]:
    """Split the whole map into regions, starting from the top-left plot."""
    order = [Vec2i(x, y) for y in range(gardens.height) for x in range(gardens.width)]
    ungrouped = set(order)
    groups = []
    for plot in order:
        if plot not in ungrouped:
            continue
        ungrouped.discard(plot)
        groups.append(grow(gardens, ungrouped, [plot]))
    return groups


def part1(text: str) -> int:
    """Total fence price: area times perimeter summed over regions."""
    gardens = parse(text)
    return sum(
        region.count_perimeter(gardens) * len(region.items) for region in group(gardens)
    )


def part2(text: str) -> None:
    """Part two computes no answer; the map is only checked to parse."""
    parse(text)
    return None