"""Command line entry point: run one part of one day's puzzle."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from . import q01, q02, q03, q04, q05, q06, q07, q09, q10, q11, q12
from .inputs import get_input_file


@dataclass(frozen=True)
class _Day:
    part1: Callable[[str], object]
    part2: Callable[[str], object]
    label1: str = "Part 1 answer: "
    label2: str = "Part 2 answer: "


_DAYS = {
    "q01": _Day(q01.part1, q01.part2),
    "q02": _Day(q02.part1, q02.part2),
    "q03": _Day(q03.part1, q03.part2),
    "q04": _Day(q04.part1, q04.part2),
    "q05": _Day(q05.part1, q05.part2),
    "q06": _Day(q06.part1, q06.part2, label2="Part 1 answer: "),
    "q07": _Day(q07.part1, q07.part2),
    "q09": _Day(q09.part1, q09.part2, label1=""),
    "q10": _Day(q10.part1, q10.part2),
    "q11": _Day(q11.part1, q11.part2, label2="Part 1 answer: "),
    "q12": _Day(q12.part1, q12.part2),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2024")
    parser.add_argument("--inputs", default=None, help="directory holding the inputs")
    commands = parser.add_subparsers(dest="day")
    for name in _DAYS:
        command = commands.add_parser(name)
        command.add_argument("--part", type=int, default=1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected day and print its answer; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.day is None:
        parser.print_help()
        return 0

    day = _DAYS[args.day]
    solve, label = (day.part1, day.label1) if args.part == 1 else (day.part2, day.label2)
    try:
        text = get_input_file(f"{args.day}/main.txt", args.inputs)
        answer = solve(text)
    except (OSError, ValueError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    if answer is not None:
        print(f"{label}{answer}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())