"""Day 6: Guard Gallivant - following a patrolling guard around a lab."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from adventdays.util import Coord, Direction, StringsMatrix, read_lines

OBSTACLE = "#"
EMPTY = "."

_FACING = {
    "^": Direction.N,
    ">": Direction.E,
    "v": Direction.S,
    "<": Direction.W,
}

_TURN_RIGHT = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
}


@dataclass
class GuardWalk:
    """The outcome of one patrol.

    ``visited`` maps every cell the guard stepped onto to the directions it
    was facing when it did; ``loop`` tells whether the patrol never ends.
    """

    visited: dict[Coord, set[Direction]] = field(default_factory=dict)
    loop: bool = False


class GuardMap:
    """The lab map with its obstacles and the guard's starting pose."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.matrix = StringsMatrix(lines)
        self.obstacles: set[Coord] = set()
        start: tuple[Coord, Direction] | None = None
        for coord, char in self.matrix.grid.items():
            if char == OBSTACLE:
                self.obstacles.add(coord)
            elif char in _FACING:
                start = (coord, _FACING[char])
        if start is None:
            raise ValueError("the map holds no guard")
        self.start, self.start_direction = start

    def walk(self, extra_obstacle: Coord | None = None) -> GuardWalk:
        """Patrol from the start until the guard leaves the map or loops.

        The guard moves straight ahead and turns right in front of an
        obstacle. The starting cell counts as visited only when re-entered.
        """
        obstacles = self.obstacles
        if extra_obstacle is not None:
            obstacles = obstacles | {extra_obstacle}
        result = GuardWalk()
        position, direction = self.start, self.start_direction
        turns = 0
        while True:
            ahead = direction.step(position)
            if not self.matrix.in_matrix(ahead):
                return result
            if ahead in obstacles:
                direction = _TURN_RIGHT[direction]
                turns += 1
                if turns == len(_TURN_RIGHT):
                    result.loop = True
                    return result
                continue
            turns = 0
            seen = result.visited.setdefault(ahead, set())
            if direction in seen:
                result.loop = True
                return result
            seen.add(direction)
            position = ahead

    def visited(self) -> set[Coord]:
        """Cells the guard steps onto during an undisturbed patrol."""
        return set(self.walk().visited)

    def looping_spots(self) -> set[Coord]:
        """Empty cells on the patrol route where a new obstacle causes a loop."""
        candidates = [
            coord for coord in self.visited() if self.matrix.grid[coord] == EMPTY
        ]
        return {coord for coord in candidates if self.walk(coord).loop}


def part_one(lines: Iterable[str]) -> int:
    """Number of distinct cells the guard visits."""
    return len(GuardMap(lines).visited())


def part_two(lines: Iterable[str]) -> int:
    """Number of cells where one new obstacle traps the guard in a loop."""
    return len(GuardMap(lines).looping_spots())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day06", description="Guard Gallivant")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    started = time.perf_counter()
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    guard_map = GuardMap(lines)
    print()
    print(guard_map.matrix.render())
    print()
    print(f"Places visited: {len(guard_map.visited())}")
    print(f"{len(guard_map.looping_spots())} places to create a loop")
    elapsed = time.perf_counter() - started
    print(f"Program took {elapsed:.3f}s", file=sys.stderr)
    return 0