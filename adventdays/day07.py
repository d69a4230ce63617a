"""Day 7: Bridge Repair - finding operators that make equations hold."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adventdays.util import read_lines, silent_atoi


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that should combine into it."""

    test_value: int
    parts: tuple[int, ...]


def parse_equations(lines: Iterable[str]) -> list[Equation]:
    """Read lines of the form ``value: n1 n2 ...``."""
    equations = []
    for line in lines:
        head, sep, tail = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line: {line!r}")
        equations.append(
            Equation(silent_atoi(head), tuple(silent_atoi(n) for n in tail.split()))
        )
    return equations


def _concat(left: int, right: int) -> int:
    return silent_atoi(f"{left}{right}")


def _candidates(calc: int, part: int, concatenate: bool) -> Iterable[int]:
    yield calc + part
    yield calc * part
    if concatenate:
        yield _concat(calc, part)


def _search(target: int, calc: int, rest: Sequence[int], concatenate: bool) -> bool:
    part, remaining = rest[0], rest[1:]
    for value in _candidates(calc, part, concatenate):
        if remaining:
            if _search(target, value, remaining, concatenate):
                return True
        elif value == target:
            return True
    return False


def can_solve(equation: Equation, concatenate: bool = False) -> bool:
    """Tell whether +, * (and optionally ||) between the parts reach the value.

    Operators are evaluated left to right.
    """
    parts = equation.parts
    if not parts:
        if concatenate:
            return equation.test_value == 0
        raise ValueError("equation has no numbers")
    if len(parts) == 1:
        return _search(equation.test_value, 0, parts, concatenate)
    return _search(equation.test_value, parts[0], parts[1:], concatenate)


def sum_solvable(equations: Iterable[Equation], concatenate: bool = False) -> int:
    """Sum the test values of the equations that can be made true."""
    return sum(
        equation.test_value
        for equation in equations
        if can_solve(equation, concatenate)
    )


def part_one(lines: Iterable[str]) -> int:
    """Calibration result using + and *."""
    return sum_solvable(parse_equations(lines))


def part_two(lines: Iterable[str]) -> int:
    """Calibration result using +, * and concatenation."""
    return sum_solvable(parse_equations(lines), concatenate=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day07", description="Bridge Repair")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"Sum of the possible missingops: {part_one(lines)}")
    print(f"Sum of the possible missingops with concatenation: {part_two(lines)}")
    return 0