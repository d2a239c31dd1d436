"""Day 3: scanning corrupted memory for mul instructions."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_DIGITS = re.compile(r"[0-9]*")
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Mul:
    """A mul(a,b) instruction found at offset pos."""

    a: int
    b: int
    pos: int


def _digits_at(text: str, start: int) -> str | None:
    match = _DIGITS.match(text, start)
    end = match.end()
    # A digit run reaching the end of the text is unterminated; its last digit is not taken.
    if end == len(text):
        end -= 1
    if end <= start:
        return None
    return text[start:end]


def parse_number(text: str) -> str | None:
    """Return the leading digits of text, or None if there are none."""
    return _digits_at(text, 0)


def _number_at(text: str, start: int) -> str | None:
    digits = _digits_at(text, start)
    if digits is None or int(digits) > _INT64_MAX:
        return None
    return digits


def parse_muls(text: str) -> list[Mul]:
    """Find every well formed mul(a,b) instruction in text."""
    found = []
    pos = 0
    while pos < len(text):
        start = text.find("mul(", pos)
        if start == -1:
            break
        pos = start + 4

        first = _number_at(text, pos)
        if first is None:
            continue
        pos += len(first)
        if not text.startswith(",", pos):
            continue
        pos += 1

        second = _number_at(text, pos)
        if second is None:
            continue
        pos += len(second)
        if not text.startswith(")", pos):
            continue

        found.append(Mul(int(first), int(second), start))
    return found


def all_indexes(text: str, sub: str) -> list[int]:
    """Offsets of every non-overlapping occurrence of sub in text."""
    offsets = []
    pos = text.find(sub)
    while pos != -1:
        offsets.append(pos)
        pos = text.find(sub, pos + len(sub))
    return offsets


def should_do(idx: int, do_idx: Sequence[int], dont_idx: Sequence[int]) -> bool:
    """Whether an instruction at idx is enabled by the latest do()/don't()."""
    latest_do = max((i for i in do_idx if i <= idx), default=-1)
    latest_dont = max((i for i in dont_idx if i <= idx), default=-1)
    if latest_do == -1 and latest_dont == -1:
        return True
    return latest_do > latest_dont


def part1(text: str) -> int:
    """Sum of all products."""
    return sum(m.a * m.b for m in parse_muls(text))


def part2(text: str) -> int:
    """Sum of products of enabled instructions."""
    do_idx = all_indexes(text, "do()")
    dont_idx = all_indexes(text, "don't()")
    return sum(
        m.a * m.b for m in parse_muls(text) if should_do(m.pos, do_idx, dont_idx)
    )