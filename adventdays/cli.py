"""Command line entry point that runs the solver for one day."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from adventdays import day01, day02, day03, day04, day05, day06, day07, day08, day09

_DAYS: dict[int, Callable[[Sequence[str] | None], int]] = {
    1: day01.main,
    2: day02.main,
    3: day03.main,
    4: day04.main,
    5: day05.main,
    6: day06.main,
    7: day07.main,
    8: day08.main,
    9: day09.main,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver for the chosen day on an input file."""
    parser = argparse.ArgumentParser(
        prog="adventdays", description="Solve one day's puzzle."
    )
    parser.add_argument("day", type=int, choices=sorted(_DAYS))
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    return _DAYS[args.day]([args.input])