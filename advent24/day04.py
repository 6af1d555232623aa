"""Day 4: word search for XMAS and crossed MAS."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from advent24.inputs import DEFAULT_INPUT, read_input

_DIRECTIONS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]
# Corners read as top-left, top-right, centre, bottom-left, bottom-right.
_X_PATTERNS = frozenset({"MMASS", "MSAMS", "SSAMM", "SMASM"})

Grid = Sequence[str]


def parse_grid(text: str) -> list[str]:
    """Split the puzzle text into rows of letters."""
    return text.split("\n")


def _at(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _cells(grid: Grid):
    for row, line in enumerate(grid):
        for col in range(len(line)):
            yield row, col


def count_xmas(grid: Grid) -> int:
    """Count XMAS in all eight directions, overlaps included."""
    return sum(
        1
        for row, col in _cells(grid)
        for dr, dc in _DIRECTIONS
        if all(
            _at(grid, row + k * dr, col + k * dc) == letter
            for k, letter in enumerate("XMAS")
        )
    )


def count_x_mas(grid: Grid) -> int:
    """Count 3x3 crosses made of two diagonal MAS words."""
    return sum(
        1
        for row, col in _cells(grid)
        if "".join(
            _at(grid, row + dr, col + dc)
            for dr, dc in ((0, 0), (0, 2), (1, 1), (2, 0), (2, 2))
        )
        in _X_PATTERNS
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    grid = parse_grid(read_input(path))
    print(count_xmas(grid))
    print(count_x_mas(grid))


if __name__ == "__main__":
    main()