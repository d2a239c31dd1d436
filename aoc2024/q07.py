"""Day 7: calibration equations with missing operators."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

_INT = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    return int(text)


@dataclass(frozen=True)
class Equation:
    """A test value and the operands that should combine to it."""

    result: int
    operands: tuple[int, ...]


class Operation(Enum):
    """A binary operator, evaluated strictly left to right."""

    ADD = "Add"
    MUL = "Mul"
    CONCAT = "Concat"

    def calc(self, a: int, b: int) -> int:
        if self is Operation.ADD:
            return a + b
        if self is Operation.MUL:
            return a * b
        return int(f"{a}{b}")

    def __str__(self) -> str:
        return self.value


def parse(text: str) -> list[Equation]:
    """Parse lines of the form 'result: a b c'."""
    equations = []
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(": ")
        if len(parts) < 2:
            raise ValueError(f"invalid equation: {line!r}")
        result = _atoi(parts[0])
        operands = tuple(_atoi(part) for part in parts[1].split(" "))
        equations.append(Equation(result, operands))
    return equations


def process_operands(
    operands: Sequence[int], operations: Sequence[Operation]
) -> int:
    """Combine operands left to right with the given operations."""
    value = operands[0]
    for operation, operand in zip(operations, operands[1:]):
        value = operation.calc(value, operand)
    return value


def permutation_from_int(seed: int, count: int) -> list[Operation]:
    """Operations read from the bits of seed, lowest first: 0 is add, 1 is mul."""
    return [
        Operation.MUL if (seed >> bit) & 1 else Operation.ADD for bit in range(count)
    ]


@lru_cache(maxsize=None)
def _permutations(count: int) -> tuple[tuple[Operation, ...], ...]:
    return tuple(tuple(permutation_from_int(seed, count)) for seed in range(count))


def generate_operation_permutations(count: int) -> list[list[Operation]]:
    """The permutations for seeds 0 to count - 1, each count operations long."""
    return [list(permutation) for permutation in _permutations(count)]


def has_possible_correct_part1(equation: Equation) -> bool:
    """Whether some mix of add and mul yields the result."""
    if not equation.operands:
        return False
    count = 1 << (len(equation.operands) - 1)
    return any(
        process_operands(equation.operands, permutation) == equation.result
        for permutation in _permutations(count)
    )


def _check(value: int, equation: Equation, operation: Operation, index: int) -> bool:
    new_value = operation.calc(value, equation.operands[index])
    last = len(equation.operands) - 1
    if new_value == equation.result and index == last:
        return True
    if new_value > equation.result or index >= last:
        return False
    return any(_check(new_value, equation, nxt, index + 1) for nxt in Operation)


def has_possible_correct_part2(equation: Equation) -> bool:
    """Whether some mix of add, mul and concatenation yields the result."""
    return any(
        _check(equation.operands[0], equation, operation, 1) for operation in Operation
    )


def part1(text: str) -> int:
    """Sum of results reachable with add and mul."""
    return sum(eq.result for eq in parse(text) if has_possible_correct_part1(eq))


def part2(text: str) -> int:
    """Sum of results reachable with add, mul and concatenation."""
    return sum(eq.result for eq in parse(text) if has_possible_correct_part2(eq))