"""Day 3: Mull It Over - recovering multiplications from corrupted memory."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from adventdays.util import read_lines, silent_atoi

_MUL_OPEN = "mul("
_DO = "do()"
_DONT = "don't()"


@dataclass(frozen=True)
class Instruction:
    """A single mul(a,b) instruction."""

    a: int
    b: int


def _parse_operands(fragment: str) -> Instruction | None:
    operands = fragment.split(")")[0].split(",")
    if len(operands) != 2:
        return None
    try:
        return Instruction(silent_atoi(operands[0]), silent_atoi(operands[1]))
    except ValueError:
        return None


def parse_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Find every well-formed mul(a,b) in the lines."""
    instructions = []
    for line in lines:
        for fragment in line.split(_MUL_OPEN):
            instruction = _parse_operands(fragment)
            if instruction is not None:
                instructions.append(instruction)
    return instructions


def enabled_sections(lines: Iterable[str]) -> list[str]:
    """Return the parts of memory where instructions are enabled.

    The lines are joined with commas and treated as one stream that starts
    enabled; don't() disables and do() re-enables.
    """
    first, *disabled = ",".join(lines).split(_DONT)
    sections = [first]
    for part in disabled:
        sections.extend(part.split(_DO)[1:])
    return sections


def total_product(instructions: Iterable[Instruction]) -> int:
    """Sum the products of all instructions."""
    return sum(instruction.a * instruction.b for instruction in instructions)


def part_one(lines: Iterable[str]) -> int:
    """Sum of all multiplications."""
    return total_product(parse_instructions(lines))


def part_two(lines: Iterable[str]) -> int:
    """Sum of the multiplications that are enabled."""
    return total_product(parse_instructions(enabled_sections(lines)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description="Mull It Over")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"The total product is: {part_one(lines)}")
    print(f"The enabled total product is: {part_two(lines)}")
    return 0