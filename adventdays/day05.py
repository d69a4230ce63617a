"""Day 5: Print Queue - checking and repairing page orderings."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from adventdays.util import read_lines, silent_atoi

Update = list[int]


@dataclass
class ManualUpdate:
    """Ordering rules and the updates they apply to.

    ``after`` maps a page to the pages that must come after it.
    """

    after: dict[int, set[int]] = field(default_factory=dict)
    updates: list[Update] = field(default_factory=list)

    def find_violation(self, update: Sequence[int]) -> tuple[int, int] | None:
        """Return (earlier, later) positions of the first broken rule, if any.

        The page at ``earlier`` stands before the page at ``later`` although
        a rule says it must come after it.
        """
        for pos, page in enumerate(update):
            must_follow = self.after.get(page, set())
            for earlier in range(pos - 1, -1, -1):
                if update[earlier] in must_follow:
                    return earlier, pos
        return None

    def validate(self, update: Sequence[int]) -> bool:
        """Tell whether the update breaks no rule."""
        return self.find_violation(update) is None

    def correct_updates(self) -> list[Update]:
        """Return the updates already in a valid order."""
        return [update for update in self.updates if self.validate(update)]

    def wrong_updates(self) -> list[Update]:
        """Return the updates that break at least one rule."""
        return [update for update in self.updates if not self.validate(update)]

    def fix(self, update: Sequence[int]) -> Update:
        """Reorder the update until no rule is broken.

        Each offending page is moved to just behind the page it must follow.
        """
        current = list(update)
        while (violation := self.find_violation(current)) is not None:
            one, two = violation
            current = [
                *current[:one],
                *current[one + 1 : two + 1],
                current[one],
                *current[two + 1 :],
            ]
        return current


def load_manuals(lines: Iterable[str]) -> ManualUpdate:
    """Read the rules, a blank line, then the comma-separated updates."""
    rows = list(lines)
    manual = ManualUpdate()
    start = 0
    for number, line in enumerate(rows):
        if line == "":
            start = number + 1
            break
        fields = line.split("|")
        if len(fields) < 2:
            raise ValueError(f"malformed rule: {line!r}")
        first, second = silent_atoi(fields[0]), silent_atoi(fields[1])
        manual.after.setdefault(first, set()).add(second)
    manual.updates = [
        [silent_atoi(page) for page in line.split(",")] for line in rows[start:]
    ]
    return manual


def sum_middles(updates: Iterable[Sequence[int]]) -> int:
    """Sum the middle page of every update."""
    return sum(update[len(update) // 2] for update in updates)


def part_one(lines: Iterable[str]) -> int:
    """Sum of the middle pages of the correctly ordered updates."""
    return sum_middles(load_manuals(lines).correct_updates())


def part_two(lines: Iterable[str]) -> int:
    """Sum of the middle pages of the repaired wrongly ordered updates."""
    manual = load_manuals(lines)
    return sum_middles(manual.fix(update) for update in manual.wrong_updates())


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description="Print Queue")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"The sum: {part_one(lines)}")
    print(f"The corrected sum: {part_two(lines)}")
    return 0