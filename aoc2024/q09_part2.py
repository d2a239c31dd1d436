"""Day 9, part 2: compacting a disk map by moving whole files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .vec import last_index


@dataclass(frozen=True)
class Cell:
    """One disk block: part of a file, or free space (id -1)."""

    id: int
    is_free: bool = False


_FREE = Cell(-1, True)


def _digit(char: str) -> int:
    if char not in "0123456789" or len(char) != 1:
        raise ValueError(f"invalid digit: {char!r}")
    return int(char)


def parse(text: str) -> tuple[list[Cell], int]:
    """Expand a dense disk map into cells; also return the highest file id."""
    cells: list[Cell] = []
    file_id = 0
    for index, char in enumerate(text.strip()):
        count = _digit(char)
        if index % 2 == 0:
            cells.extend([Cell(file_id)] * count)
            file_id += 1
        else:
            cells.extend([_FREE] * count)
    return cells, file_id - 1


def find_space_to_the_left(cells: Sequence[Cell], first: int, last: int) -> int:
    """Start of the leftmost free run before first that fits cells first..last, or -1."""
    size = last - first + 1
    run = 0
    for index, cell in enumerate(cells[:first]):
        if cell.is_free:
            run += 1
            if run >= size:
                return index - size + 1
        else:
            run = 0
    return -1


def find_data_block_start(cells: Sequence[Cell], end_idx: int) -> int:
    """Index where the run of cells sharing the id at end_idx begins."""
    file_id = cells[end_idx].id
    start = end_idx
    for index in range(end_idx, -1, -1):
        if cells[index].id != file_id:
            break
        start = index
    return start


def serialize(cells: Sequence[Cell]) -> str:
    """Render cells as file ids, with '.' for free space."""
    return "".join("." if cell.is_free else str(cell.id) for cell in cells)


def compact(cells: Sequence[Cell], max_id: int) -> list[Cell]:
    """Move each file, highest id first, into the leftmost free run that fits."""
    result = list(cells)
    for file_id in range(max_id, -1, -1):
        last = last_index(result, lambda cell, wanted=file_id: cell.id == wanted)
        if last == -1:
            raise ValueError(f"file {file_id} occupies no blocks")
        first = find_data_block_start(result, last)
        size = last - first + 1
        space = find_space_to_the_left(result, first, last)
        if space == -1:
            continue
        result[space:space + size], result[first:first + size] = (
            result[first:first + size],
            result[space:space + size],
        )
    return result


def checksum(cells: Sequence[Cell]) -> int:
    """Sum of position times file id over all file cells."""
    return sum(index * cell.id for index, cell in enumerate(cells) if not cell.is_free)


def run(text: str) -> int:
    """Checksum after compacting the disk map by whole files."""
    cells, max_id = parse(text)
    return checksum(compact(cells, max_id))