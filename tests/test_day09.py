from collections import Counter

import pytest

from adventdays.day09 import Disk, main, part_one, part_two

EXAMPLE = "2333133121414131402"


def _file_counts(disk: Disk) -> Counter:
    return Counter(block for block in disk.blocks if block is not None)


def test_part_one_example():
    assert part_one([EXAMPLE]) == 1928


def test_part_two_example():
    assert part_two([EXAMPLE]) == 2858


def test_compact_files_example_layout():
    disk = Disk(EXAMPLE)
    disk.compact_files()
    assert disk.render() == "00992111777.44.333....5555.6666.....8888.."


def test_build_length_matches_digit_sum():
    disk = Disk("12345")
    assert len(disk.blocks) == sum(int(c) for c in "12345")
    assert disk.render().count(".") == 2 + 4
    assert len(disk.render()) == len(disk.blocks)


def test_build_file_sizes_follow_map():
    disk = Disk("12345")
    counts = _file_counts(disk)
    assert counts[0] == 1
    assert counts[1] == 3
    assert counts[2] == 5


def test_compact_blocks_leaves_free_space_at_end():
    disk = Disk(EXAMPLE)
    before = _file_counts(disk)
    disk.compact_blocks()
    used = [b for b in disk.blocks if b is not None]
    free = len(disk.blocks) - len(used)
    assert disk.blocks == used + [None] * free
    assert _file_counts(disk) == before


def test_compact_files_keeps_files_whole_and_never_moves_right():
    disk = Disk(EXAMPLE)
    original_starts = {
        fid: disk.blocks.index(fid) for fid in set(_file_counts(disk))
    }
    before = _file_counts(disk)
    disk.compact_files()
    assert _file_counts(disk) == before
    for fid, size in before.items():
        start = disk.blocks.index(fid)
        assert disk.blocks[start : start + size] == [fid] * size
        assert start <= original_starts[fid]


def test_compacting_does_not_change_total_length():
    disk = Disk(EXAMPLE)
    length = len(disk.blocks)
    disk.compact_files()
    assert len(disk.blocks) == length


def test_zero_length_file_is_skipped():
    disk = Disk("1203")
    before = disk.render()
    disk.compact_files()
    assert disk.render() == before


def test_single_file_checksum_is_zero():
    disk = Disk("3")
    disk.compact_blocks()
    assert disk.checksum() == 0


def test_invalid_character_raises():
    with pytest.raises(ValueError):
        Disk("12a4")


def test_no_input_raises():
    with pytest.raises(ValueError):
        part_one([])


def test_main_prints_both_checksums(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Checksum calculated: {part_one([EXAMPLE])}",
        f"Checksum calculated: {part_two([EXAMPLE])}",
    ]


def test_main_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])