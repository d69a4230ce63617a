"""Day 8: Resonant Collinearity - locating antinodes of antenna pairs."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Sequence
from itertools import combinations

from adventdays.util import Coord, StringsMatrix, read_lines

EMPTY = "."
ANTINODE = "#"


def possible_pairs(coords: Sequence[Coord]) -> list[tuple[Coord, Coord]]:
    """Return every unordered pair of coordinates, in input order."""
    return list(combinations(coords, 2))


class AntennaMap:
    """A city map of antennas grouped by their frequency."""

    def __init__(self, lines: Iterable[str]) -> None:
        rows = list(lines)
        self.matrix = StringsMatrix(rows)
        self.antennas: dict[str, list[Coord]] = {}
        for row, line in enumerate(rows):
            for col, char in enumerate(line):
                if char != EMPTY:
                    self.antennas.setdefault(char, []).append((row, col))

    def _ray(self, origin: Coord, step: Coord) -> Iterable[Coord]:
        row, col = origin
        while True:
            row, col = row + step[0], col + step[1]
            if not self.matrix.in_matrix((row, col)):
                return
            yield row, col

    def antinodes(self, resonant: bool = False) -> set[Coord]:
        """Return the antinode positions on the map.

        Without resonance each pair of same-frequency antennas makes one
        antinode beyond each antenna, at the pair's distance. With resonance
        the antennas themselves and every point further along the line in
        steps of that distance count.
        """
        nodes: set[Coord] = set()
        for coords in self.antennas.values():
            for first, second in possible_pairs(coords):
                forward = (first[0] - second[0], first[1] - second[1])
                backward = (-forward[0], -forward[1])
                if resonant:
                    nodes.update((first, second))
                    nodes.update(self._ray(second, backward))
                    nodes.update(self._ray(first, forward))
                    continue
                for origin, step in ((second, backward), (first, forward)):
                    target = (origin[0] + step[0], origin[1] + step[1])
                    if self.matrix.in_matrix(target):
                        nodes.add(target)
        return nodes

    def render(self) -> str:
        """Return the map as text."""
        return self.matrix.render()

    def render_antinodes(self, nodes: Iterable[Coord]) -> str:
        """Return the map with antinodes marked '#' and everything else '.'."""
        marked = set(nodes)
        return "\n".join(
            "".join(
                ANTINODE if (row, col) in marked else EMPTY
                for col in range(self.matrix.width)
            )
            for row in range(self.matrix.height)
        )


def part_one(lines: Iterable[str]) -> int:
    """Number of distinct antinode positions."""
    return len(AntennaMap(lines).antinodes())


def part_two(lines: Iterable[str]) -> int:
    """Number of distinct antinode positions with resonant harmonics."""
    return len(AntennaMap(lines).antinodes(resonant=True))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day08", description="Resonant Collinearity")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    started = time.perf_counter()
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    antenna_map = AntennaMap(lines)
    print()
    print(antenna_map.render())
    print()
    for resonant in (False, True):
        nodes = antenna_map.antinodes(resonant=resonant)
        print(f"{len(nodes)} Antinodes")
        print()
        print(antenna_map.render_antinodes(nodes))
        print()
    elapsed = time.perf_counter() - started
    print(f"Program took {elapsed:.3f}s", file=sys.stderr)
    return 0