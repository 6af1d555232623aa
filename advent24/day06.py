"""Day 6: a patrolling guard and the obstructions that trap it in a loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum

from advent24.inputs import DEFAULT_INPUT, read_input

BORDER = "/"
OBSTRUCTION = "O"
_BLOCKED = frozenset({"#", OBSTRUCTION})

Grid = Sequence[str]


class Direction(Enum):
    """The way the guard faces, named by the map's arrow characters."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    def turn_right(self) -> Direction:
        """Return the direction after a quarter turn clockwise."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}
_GUARD_CHARS = frozenset(direction.value for direction in Direction)


@dataclass(frozen=True)
class Guard:
    """The guard's position on the padded grid and the way it faces."""

    row: int
    col: int
    direction: Direction


def parse_room(text: str) -> list[str]:
    """Return the non-blank map rows surrounded by a border of ``/``."""
    rows = [f"{BORDER}{line}{BORDER}" for line in text.split("\n") if line.strip()]
    if not rows:
        raise ValueError("the map is empty")
    border = BORDER * len(rows[0])
    return [border, *rows, border]


def find_guard(grid: Grid) -> Guard:
    """Locate the first guard arrow in row-major order."""
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _GUARD_CHARS:
                return Guard(row, col, Direction(char))
    raise ValueError("the map holds no guard")


def _step(grid: Grid, guard: Guard) -> Guard | None:
    """Advance the guard once; None when it walks off the map."""
    dr, dc = guard.direction.delta
    ahead = grid[guard.row + dr][guard.col + dc]
    if ahead == BORDER:
        return None
    if ahead in _BLOCKED:
        return replace(guard, direction=guard.direction.turn_right())
    return replace(guard, row=guard.row + dr, col=guard.col + dc)


def patrol(grid: Grid, guard: Guard) -> set[tuple[int, int]]:
    """Return every cell the guard stands on before leaving the map.

    Raises ``ValueError`` when the guard is caught in a loop and never leaves.
    """
    states: set[Guard] = set()
    visited: set[tuple[int, int]] = set()
    current: Guard | None = guard
    while current is not None:
        if current in states:
            raise ValueError("the guard never leaves the map")
        states.add(current)
        visited.add((current.row, current.col))
        current = _step(grid, current)
    return visited


def loops(grid: Grid, guard: Guard) -> bool:
    """True when the guard repeats a position and direction instead of leaving."""
    seen: set[Guard] = set()
    current = guard
    while True:
        moved = _step(grid, current)
        if moved is None:
            return False
        if moved in seen:
            return True
        seen.add(moved)
        current = moved


def _with_obstruction(grid: Grid, row: int, col: int) -> list[str]:
    rows = list(grid)
    line = rows[row]
    rows[row] = line[:col] + OBSTRUCTION + line[col + 1:]
    return rows


def count_visited(text: str) -> int:
    """Count the distinct cells the guard visits."""
    grid = parse_room(text)
    return len(patrol(grid, find_guard(grid)))


def count_loop_positions(text: str) -> int:
    """Count the cells where one new obstruction would trap the guard."""
    grid = parse_room(text)
    guard = find_guard(grid)
    start = (guard.row, guard.col)
    return sum(
        1
        for row, col in patrol(grid, guard)
        if (row, col) != start and loops(_with_obstruction(grid, row, col), guard)
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else DEFAULT_INPUT
    text = read_input(path)
    print(count_visited(text))
    print(count_loop_positions(text))


if __name__ == "__main__":
    main()