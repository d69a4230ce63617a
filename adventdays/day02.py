"""Day 2: Red-Nosed Reports - checking level reports for safety."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise

from adventdays.util import read_lines, silent_atoi

INCREASING = "in"
DECREASING = "de"


@dataclass
class Report:
    """One report: its levels, its direction and whether it is unsafe."""

    values: list[int]
    crease: str | None
    unsafe: bool


def is_unsafe(values: Sequence[int], crease: str | None) -> bool:
    """Tell whether any step goes the wrong way or changes by more than three."""
    if crease is None:
        return len(values) > 1
    for first, second in pairwise(values):
        change = first - second if crease == DECREASING else second - first
        if change > 3 or change <= 0:
            return True
    return False


def is_unsafe_with_dampener(values: Sequence[int], crease: str | None) -> bool:
    """Tell whether the report stays unsafe even after dropping any one level."""
    if not is_unsafe(values, crease):
        return False
    return all(
        is_unsafe([*values[:skip], *values[skip + 1 :]], crease)
        for skip in range(len(values))
    )


def _majority_crease(values: Sequence[int]) -> str:
    increases = sum(1 for a, b in pairwise(values) if a < b)
    decreases = sum(1 for a, b in pairwise(values) if a > b)
    return DECREASING if decreases > increases else INCREASING


def parse_reports(lines: Iterable[str], dampened: bool = False) -> list[Report]:
    """Read reports and judge each one, with or without the dampener."""
    reports = []
    for line in lines:
        values = [silent_atoi(field) for field in line.split()]
        if dampened:
            crease = _majority_crease(values)
            reports.append(
                Report(values, crease, is_unsafe_with_dampener(values, crease))
            )
            continue
        if len(values) < 2:
            raise ValueError(f"report needs at least two levels: {line!r}")
        if values[0] > values[1]:
            crease = DECREASING
        elif values[0] < values[1]:
            crease = INCREASING
        else:
            reports.append(Report(values, None, True))
            continue
        reports.append(Report(values, crease, is_unsafe(values, crease)))
    return reports


def count_safe_reports(reports: Iterable[Report]) -> int:
    """Count the reports that are not unsafe."""
    return sum(1 for report in reports if not report.unsafe)


def part_one(lines: Iterable[str]) -> int:
    """Number of safe reports."""
    return count_safe_reports(parse_reports(lines))


def part_two(lines: Iterable[str]) -> int:
    """Number of safe reports when one bad level may be removed."""
    return count_safe_reports(parse_reports(lines, dampened=True))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day02", description="Red-Nosed Reports")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"{part_one(lines)} safe reports")
    print(f"{part_two(lines)} safe reports")
    return 0