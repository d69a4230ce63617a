"""Day 4: Ceres Search - word search in a letter grid."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import product

from adventdays.util import Direction, StringsMatrix, read_lines

# Each leg of the X: the direction to read "MAS" and the offset of its start
# relative to the centre "A".
_LEGS = (
    (Direction.SE, -1, -1),
    (Direction.NE, 1, -1),
    (Direction.SW, -1, 1),
    (Direction.NW, 1, 1),
)


def xmas_search(matrix: StringsMatrix) -> int:
    """Count the places where two diagonal "MAS" words cross on an "A"."""
    occurrences = 0
    for row, col in product(range(matrix.height), range(matrix.width)):
        if matrix.grid.get((row, col)) != "A":
            continue
        legs = sum(
            1
            for direction, row_offset, col_offset in _LEGS
            if matrix.search_direction(
                direction, "MAS", row + row_offset, col + col_offset
            )
        )
        if legs >= 2:
            occurrences += 1
    return occurrences


def part_one(lines: Iterable[str]) -> int:
    """Number of times XMAS appears in any direction."""
    return StringsMatrix(lines).word_search("XMAS")


def part_two(lines: Iterable[str]) -> int:
    """Number of X-shaped MAS crossings."""
    return xmas_search(StringsMatrix(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day04", description="Ceres Search")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    matrix = StringsMatrix(lines)
    print()
    print(matrix.render())
    print()
    print(f"Xmas found {matrix.word_search('XMAS')} times")
    print(f"'X-MAS' found: {xmas_search(matrix)}")
    return 0