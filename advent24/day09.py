"""Day 9: compacting an amphipod's disk map."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from advent24.inputs import DEFAULT_INPUT, read_input

# A block holds the id of the file it belongs to, or None when it is free.
Block = "int | None"


def parse_disk_map(text: str) -> list[int]:
    """Return the digits of the dense disk map, ignoring surrounding whitespace."""
    digits = text.strip()
    if not all(char in "0123456789" for char in digits):
        raise ValueError(f"disk map must hold only digits: {digits!r}")
    return [int(char) for char in digits]


def expand(disk_map: Sequence[int]) -> list[int | None]:
    """Lay out the blocks: file lengths and free lengths alternate, ids count up."""
    blocks: list[int | None] = []
    for index, length in enumerate(disk_map):
        file_id, is_free = divmod(index, 2)
        blocks.extend([None if is_free else file_id] * length)
    return blocks


def compact_blocks(blocks: Sequence[int | None]) -> list[int]:
    """Move file blocks one at a time from the end into the leftmost free space."""
    files = [block for block in blocks if block is not None]
    free = [index for index, block in enumerate(blocks) if block is None]
    for index in free:
        if len(files) - 1 < index:
            break
        files.insert(index, files.pop())
    return files


def _file_extents(blocks: Sequence[int | None]) -> dict[int, tuple[int, int]]:
    extents: dict[int, tuple[int, int]] = {}
    for index, block in enumerate(blocks):
        if block is None:
            continue
        start, size = extents.get(block, (index, 0))
        extents[block] = (start, size + 1)
    return extents


def compact_files(blocks: Sequence[int | None]) -> list[int | None]:
    """Move whole files, highest id first, into the leftmost free span that fits.

    A file only moves left of where it stands; files that fit nowhere stay put.
    """
    disk = list(blocks)
    extents = _file_extents(disk)
    for file_id in sorted(extents, reverse=True):
        start, size = extents[file_id]
        target: int | None = None
        run_start: int | None = None
        run_length = 0
        for index, block in enumerate(disk):
            if block == file_id:
                break
            if block is None:
                if run_start is None:
                    run_start = index
                run_length += 1
                if run_length >= size:
                    target = run_start
                    break
            else:
                run_start = None
                run_length = 0
        if target is not None:
            for offset in range(size):
                disk[target + offset] = disk[start + offset]
                disk[start + offset] = None
    return disk


def checksum(blocks: Sequence[int | None]) -> int:
    """Sum each block's position times its file id, skipping free blocks."""
    return sum(index * block for index, block in enumerate(blocks) if block is not None)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    blocks = expand(parse_disk_map(read_input(path)))
    print(checksum(compact_blocks(blocks)))
    print(checksum(compact_files(blocks)))


if __name__ == "__main__":
    main()