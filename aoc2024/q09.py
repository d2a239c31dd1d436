"""Day 9: compacting a disk map by moving single blocks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from . import q09_part2
from .vec import last_index


@dataclass(frozen=True)
class Block:
    """A run of disk blocks from start to end, holding file id or free space."""

    id: int
    start: int
    end: int
    is_free: bool = False

    def size(self) -> int:
        return abs(self.end - self.start)

    def __str__(self) -> str:
        if self.is_free:
            return "." * self.size()
        return str(self.id) * self.size()


def expand_space(text: str) -> tuple[list[Block], int]:
    """Expand a dense disk map into blocks; also return the number of files."""
    blocks: list[Block] = []
    file_id = 0
    cursor = 0
    for index, char in enumerate(text.strip()):
        if len(char) != 1 or char not in "0123456789":
            raise ValueError(f"invalid digit: {char!r}")
        count = int(char)
        if index % 2 == 0:
            blocks.append(Block(file_id, cursor, cursor + count))
            file_id += 1
        else:
            blocks.append(Block(0, cursor, cursor + count, is_free=True))
        cursor += count
    return blocks, file_id


def _mergeable(block: Block, following: Block) -> bool:
    return block.is_free == following.is_free and (
        block.is_free or block.id == following.id
    )


def cleanup_blocks(blocks: Sequence[Block]) -> list[Block]:
    """Drop empty blocks after the first and merge neighbours of the same kind."""
    if not blocks:
        return []
    if len(blocks) == 1:
        only = blocks[0]
        return [] if only.start == only.end else [only]

    merged = [blocks[-1]]
    for block in reversed(blocks[:-1]):
        following = merged[-1]
        if following.start == following.end:
            merged[-1] = block
            continue
        if _mergeable(block, following):
            merged[-1] = replace(block, end=following.end)
        else:
            merged.append(block)
    merged.reverse()
    return merged


def _first_free(blocks: Sequence[Block]) -> int:
    return next((i for i, block in enumerate(blocks) if block.is_free), -1)


def compact_part1(blocks: Sequence[Block]) -> list[Block]:
    """Fill the leftmost free space from the rightmost file until none is left of it."""
    result = list(blocks)
    free_idx = _first_free(result)
    data_idx = last_index(result, lambda block: not block.is_free)

    while free_idx != -1 and data_idx != -1 and free_idx < data_idx:
        free, data = result[free_idx], result[data_idx]
        moved = min(free.size(), data.size())
        new_full = Block(data.id, free.start, free.start + moved)
        result[free_idx] = replace(free, start=free.start + moved)
        result[data_idx] = replace(data, end=data.end - moved)
        tail = result[-1].end
        new_empty = Block(0, tail, tail + moved, is_free=True)

        result = result[:free_idx] + [new_full] + result[free_idx:] + [new_empty]
        result = cleanup_blocks(result)
        free_idx = _first_free(result)
        data_idx = last_index(result, lambda block: not block.is_free)

    return result


def block_checksum(block: Block) -> int:
    """Sum of position times file id over the block; zero for free space."""
    if block.is_free:
        return 0
    return sum(position * block.id for position in range(block.start, block.end))


def checksum_part1(blocks: Sequence[Block]) -> int:
    return sum(block_checksum(block) for block in blocks)


def serialize_blocks(blocks: Sequence[Block]) -> str:
    """Render blocks as file ids, with '.' for free space."""
    return "".join(str(block) for block in blocks)


def part1(text: str) -> int:
    """Checksum after compacting block by block."""
    blocks, _ = expand_space(text.strip())
    blocks = cleanup_blocks(compact_part1(blocks))
    return checksum_part1(blocks)


def part2(text: str) -> int:
    """Checksum after compacting by whole files."""
    return q09_part2.run(text)