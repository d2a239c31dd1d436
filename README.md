# aoc2024

Solutions to the Advent of Code 2024 puzzles, days 1–7 and 9–12, as a plain
Python package with a small command-line runner. It has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Puzzle inputs

Inputs are not included. Each day reads `<day>/main.txt` (for example
`q01/main.txt`) from an inputs directory, chosen in this order:

1. the `--inputs DIR` option of the command,
2. the directory named by the `AOC2024_INPUTS` environment variable,
3. `inputs` in the current working directory.

In code, `aoc2024.inputs.get_input_file(path, root=None)` returns a file's
text from the same place.

## Command line

Each day is a sub-command named after it (`q01` … `q07`, `q09` … `q12`;
there is no `q08`). `--part` picks the half of the puzzle; it defaults to `1`,
and any other value runs part 2. `--inputs` goes before the sub-command.

```
aoc2024 q01
aoc2024 q01 --part 2
aoc2024 --inputs path/to/inputs q06 --part 2
```

The answer is printed as `Part 1 answer: N` or `Part 2 answer: N`, with a few
exceptions: `q09` part 1 prints the bare number, and `q06` and `q11` label
their part 2 answers `Part 1 answer:`. With no sub-command the help text is
shown. A missing input file or malformed input prints `Error: ...` to
standard error and exits with status 1.

## Library use

Every day lives in its own module (`aoc2024.q01` … `aoc2024.q12`, plus
`aoc2024.q09_part2`, which holds the whole-file compaction behind
`q09.part2`). Each module exposes `part1(text)` and `part2(text)`, which take
the puzzle input as a string and return the answer. Malformed input raises
`ValueError`. The helpers behind them, such as `q02.is_unsafe`,
`q03.parse_muls`, `q06.is_infinite` and `q11.blink_counts`, can be called
directly too:

```python
from aoc2024 import q02

q02.is_unsafe([7, 6, 4, 2, 1])   # False
q02.is_unsafe([1, 2, 7, 8, 9])   # True
```

Shared pieces live in `aoc2024.vec`: the `Vec2i` grid coordinate, which
supports `+` and `-`, and `last_index(items, predicate)`, which returns the
index of the last matching item or `-1`.

## What it does not do

- Day 8 is not solved; there is no `q08` module or command.
- Day 12 part 2 computes no answer: `q12.part2` only parses the map and
  returns `None`, and `aoc2024 q12 --part 2` prints nothing.