"""Small shared value types and sequence helpers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Vec2i:
    """An integer 2D vector, usable as a grid position or a step."""

    x: int
    y: int

    def __add__(self, other: Vec2i) -> Vec2i:
        if not isinstance(other, Vec2i):
            return NotImplemented
        return Vec2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2i) -> Vec2i:
        if not isinstance(other, Vec2i):
            return NotImplemented
        return Vec2i(self.x - other.x, self.y - other.y)


def last_index(items: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """Return the index of the last item matching predicate, or -1."""
    for index, item in reversed(list(enumerate(items))):
        if predicate(item):
            return index
    return -1