"""Day 9: Disk Fragmenter - compacting files on a block disk."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from itertools import groupby

from adventdays.util import read_lines, silent_atoi

FREE_MARK = "."


class Disk:
    """A disk laid out from a dense map of alternating file and gap lengths.

    ``blocks`` holds one entry per block: the id of the file stored there,
    or None for a free block.
    """

    def __init__(self, disk_map: str) -> None:
        self.blocks: list[int | None] = []
        self._files: dict[int, tuple[int, int]] = {}
        for index, char in enumerate(disk_map.strip()):
            length = silent_atoi(char)
            if index % 2 == 0:
                file_id = index // 2
                self._files[file_id] = (len(self.blocks), length)
                self.blocks.extend([file_id] * length)
            else:
                self.blocks.extend([None] * length)

    def compact_blocks(self) -> None:
        """Move single blocks from the end of the disk into the leftmost gaps."""
        blocks = self.blocks
        seek = len(blocks) - 1
        while seek >= 0 and blocks[seek] is None:
            seek -= 1
        pos = 0
        while pos < seek:
            if blocks[pos] is None:
                blocks[pos], blocks[seek] = blocks[seek], None
                seek -= 1
                while seek >= 0 and blocks[seek] is None:
                    seek -= 1
            pos += 1

    def _free_spans(self) -> Iterator[tuple[int, int]]:
        """Yield (start, length) of every run of free blocks, left to right."""
        for is_free, run in groupby(
            enumerate(self.blocks), key=lambda item: item[1] is None
        ):
            if is_free:
                positions = [pos for pos, _ in run]
                yield positions[0], len(positions)

    def compact_files(self) -> None:
        """Move whole files, highest id first, into the leftmost gap that fits.

        A file only moves to the left and each file is tried once.
        """
        for file_id in sorted(self._files, reverse=True):
            start, length = self._files[file_id]
            if length == 0:
                continue
            for span_start, span_length in self._free_spans():
                if span_length < length or span_start > start:
                    continue
                self.blocks[start : start + length] = [None] * length
                self.blocks[span_start : span_start + length] = [file_id] * length
                self._files[file_id] = (span_start, length)
                break

    def checksum(self) -> int:
        """Sum of each block position times the file id stored there."""
        return sum(
            pos * file_id
            for pos, file_id in enumerate(self.blocks)
            if file_id is not None
        )

    def render(self) -> str:
        """Return the blocks as text: file ids, with '.' for free blocks."""
        return "".join(
            FREE_MARK if file_id is None else str(file_id) for file_id in self.blocks
        )


def _disk_from_lines(lines: Iterable[str]) -> Disk:
    first = next(iter(lines), None)
    if first is None:
        raise ValueError("no disk map in input")
    return Disk(first)


def part_one(lines: Iterable[str]) -> int:
    """Checksum after compacting block by block."""
    disk = _disk_from_lines(lines)
    disk.compact_blocks()
    return disk.checksum()


def part_two(lines: Iterable[str]) -> int:
    """Checksum after compacting whole files."""
    disk = _disk_from_lines(lines)
    disk.compact_files()
    return disk.checksum()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day09", description="Disk Fragmenter")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv)
    started = time.perf_counter()
    try:
        lines = read_lines(args.input)
    except OSError as exc:
        raise SystemExit(f"No input: {exc}") from exc
    print(f"Checksum calculated: {part_one(lines)}")
    print(f"Checksum calculated: {part_two(lines)}")
    elapsed = time.perf_counter() - started
    print(f"Program took {elapsed:.3f}s", file=sys.stderr)
    return 0