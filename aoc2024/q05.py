"""Day 5: page ordering rules for print updates."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key

_INT = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Rule:
    """Page low must be printed before page high."""

    low: int
    high: int


@dataclass
class Manual:
    """Ordering rules and the updates to check against them."""

    rules: list[Rule] = field(default_factory=list)
    updates: list[list[int]] = field(default_factory=list)


def parse_rule(text: str) -> Rule:
    parts = text.split("|")
    if len(parts) < 2:
        raise ValueError(f"invalid rule: {text!r}")
    return Rule(low=_atoi(parts[0]), high=_atoi(parts[1]))


def parse_update(text: str) -> list[int]:
    return [_atoi(part) for part in text.split(",")]


def parse_manual(text: str) -> Manual:
    """Parse rules, a blank line, then updates."""
    manual = Manual()
    in_rules = True
    for line in text.strip().split("\n"):
        if not line:
            in_rules = False
            continue
        if in_rules:
            manual.rules.append(parse_rule(line))
        else:
            manual.updates.append(parse_update(line))
    return manual


def check_rule(update: Sequence[int], rule: Rule) -> bool:
    """Whether the update respects a single rule."""
    positions: dict[int, int] = {}
    for index, page in enumerate(update):
        if page not in (rule.low, rule.high):
            continue
        positions[page] = index
        if rule.low in positions and rule.high in positions:
            if positions[rule.low] > positions[rule.high]:
                return False
    return True


def is_ordered(update: Sequence[int], rules: Sequence[Rule]) -> bool:
    return all(check_rule(update, rule) for rule in rules)


def get_middle(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def rule_index(rules: Sequence[Rule], a: int, b: int) -> int:
    """Index of the first rule relating a and b in either order, or -1."""
    return next(
        (
            index
            for index, rule in enumerate(rules)
            if (rule.low == a and rule.high == b) or (rule.low == b and rule.high == a)
        ),
        -1,
    )


def order_update(update: Sequence[int], rules: Sequence[Rule]) -> list[int]:
    """Sort pages with every rule reversed: later pages come first.

    The middle page is the same as in the correctly ordered update.
    """

    def compare(a: int, b: int) -> int:
        index = rule_index(rules, a, b)
        if index == -1 or rules[index].low == a:
            return 0
        return -1

    return sorted(update, key=cmp_to_key(compare))


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    manual = parse_manual(text)
    return sum(
        get_middle(update)
        for update in manual.updates
        if is_ordered(update, manual.rules)
    )


def part2(text: str) -> int:
    """Sum of middle pages of incorrectly ordered updates after reordering."""
    manual = parse_manual(text)
    return sum(
        get_middle(order_update(update, manual.rules))
        for update in manual.updates
        if not is_ordered(update, manual.rules)
    )