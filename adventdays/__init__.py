"""Solvers for nine daily programming puzzles, with shared grid and parsing helpers."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "util",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
]