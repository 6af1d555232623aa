"""Solvers for days 1 to 11 of a 2024 advent-style puzzle calendar."""

__version__ = "0.1.0"
__all__ = [
    "inputs",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
]