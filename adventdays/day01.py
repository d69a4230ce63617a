"""Day 1: Historian Hysteria - comparing two location lists."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence

from adventdays.util import read_lines, silent_atoi


def parse_lists(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split each line into its left and right number."""
    list_a: list[int] = []
    list_b: list[int] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers on line: {line!r}")
        list_a.append(silent_atoi(fields[0]))
        list_b.append(silent_atoi(fields[1]))
    return list_a, list_b


def total_distance(list_a: Sequence[int], list_b: Sequence[int]) -> int:
    """Sum the absolute differences of the lists, pair by pair."""
    return sum(abs(a - b) for a, b in zip(list_a, list_b, strict=True))


def similarity_score(list_a: Iterable[int], list_b: Iterable[int]) -> int:
    """Sum each left number times how often it appears in the right list."""
    counts = Counter(list_b)
    return sum(number * counts[number] for number in list_a)


def part_one(lines: Iterable[str]) -> int:
    """Total distance between the sorted lists."""
    list_a, list_b = parse_lists(lines)
    return total_distance(sorted(list_a), sorted(list_b))


def part_two(lines: Iterable[str]) -> int:
    """Similarity score of the lists."""
    list_a, list_b = parse_lists(lines)
    return similarity_score(list_a, list_b)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day01", description="Historian Hysteria")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"Distance: {part_one(lines)}")
    print(f"Sum: {part_two(lines)}")
    return 0