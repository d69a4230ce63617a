"""Shared helpers: input reading, strict integer parsing and a character grid."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from enum import Enum
from itertools import product
from os import PathLike

Coord = tuple[int, int]

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read a whole text file and return its lines without line endings."""
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def silent_atoi(text: str) -> int:
    """Parse a plain decimal integer, raising ValueError on anything else."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def sum_slice(values: Iterable[int]) -> int:
    """Return the sum of the values."""
    return sum(values)


def product_slice(values: Iterable[int]) -> int:
    """Return the product of the values."""
    return math.prod(values)


def reverse_string(word: str) -> str:
    """Return the word reversed."""
    return word[::-1]


def remove_spaces(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return " ".join(text.split())


class Direction(Enum):
    """The eight compass directions as (row step, column step)."""

    N = (-1, 0)
    NE = (-1, 1)
    E = (0, 1)
    SE = (1, 1)
    S = (1, 0)
    SW = (1, -1)
    W = (0, -1)
    NW = (-1, -1)

    def step(self, coord: Coord) -> Coord:
        """Return the coordinate one step from coord in this direction."""
        row_step, col_step = self.value
        return coord[0] + row_step, coord[1] + col_step


class StringsMatrix:
    """A grid of single characters addressed by (row, column)."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows = list(lines)
        self.grid: dict[Coord, str] = {
            (row, col): char
            for row, line in enumerate(rows)
            for col, char in enumerate(line)
        }
        self.height = len(rows)
        self.width = next((len(line) for line in rows if line), 0)

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "\n".join(
            "".join(self.grid.get((row, col), "") for col in range(self.width))
            for row in range(self.height)
        )

    def in_matrix(self, coord: Coord) -> bool:
        """Tell whether coord lies on the grid."""
        return coord in self.grid

    def word_search(self, word: str) -> int:
        """Count occurrences of word in all eight directions."""
        if not word:
            raise ValueError("cannot search for an empty word")
        first = word[0]
        occurrences = 0
        for row, col in product(range(self.height), range(self.width)):
            if self.grid.get((row, col)) != first:
                continue
            occurrences += sum(
                1
                for direction in Direction
                if self.search_direction(direction, word, row, col)
            )
        return occurrences

    def search_direction(
        self, direction: Direction, word: str, row: int, col: int
    ) -> bool:
        """Tell whether word is spelled from (row, col) going in direction."""
        coord = (row, col)
        for letter in word:
            if self.grid.get(coord) != letter:
                return False
            coord = direction.step(coord)
        return True