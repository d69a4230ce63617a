import pytest

from adventdays.day02 import (
    DECREASING,
    INCREASING,
    Report,
    count_safe_reports,
    is_unsafe,
    is_unsafe_with_dampener,
    main,
    parse_reports,
    part_one,
    part_two,
)

EXAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


def test_part_one_example():
    assert part_one(EXAMPLE) == 2


def test_part_two_example():
    assert part_two(EXAMPLE) == 4


def test_is_unsafe_rules():
    assert not is_unsafe([1, 2, 3], INCREASING)
    assert is_unsafe([1, 2, 3], DECREASING)
    assert is_unsafe([1, 5], INCREASING)
    assert is_unsafe([4, 4], INCREASING)


def test_is_unsafe_mirror():
    for line in EXAMPLE:
        values = [int(v) for v in line.split()]
        assert is_unsafe(values, INCREASING) == is_unsafe(values[::-1], DECREASING)


def test_is_unsafe_without_direction():
    assert is_unsafe([3, 3, 4], None)
    assert not is_unsafe([3], None)


def test_dampener_never_worse():
    for line in EXAMPLE:
        values = [int(v) for v in line.split()]
        for crease in (INCREASING, DECREASING):
            if not is_unsafe(values, crease):
                assert not is_unsafe_with_dampener(values, crease)


def test_dampener_rescues_single_bad_level():
    assert is_unsafe([1, 3, 2, 4, 5], INCREASING)
    assert not is_unsafe_with_dampener([1, 3, 2, 4, 5], INCREASING)


def test_parse_reports_equal_start():
    (report,) = parse_reports(["5 5 6"])
    assert report == Report([5, 5, 6], None, True)


def test_parse_reports_direction():
    first, second = parse_reports(["7 6 4", "1 2 3"])
    assert first.crease == DECREASING
    assert second.crease == INCREASING


def test_parse_reports_too_short():
    with pytest.raises(ValueError):
        parse_reports(["7"])


def test_parse_reports_dampened_single_level_safe():
    (report,) = parse_reports(["7"], dampened=True)
    assert not report.unsafe


def test_dampened_majority_direction():
    (report,) = parse_reports(["1 3 2 4 5"], dampened=True)
    assert report.crease == INCREASING


def test_safe_reports_stay_safe_when_dampened():
    plain = parse_reports(EXAMPLE)
    damped = parse_reports(EXAMPLE, dampened=True)
    for before, after in zip(plain, damped):
        if not before.unsafe:
            assert not after.unsafe


def test_count_safe_reports_matches_flags():
    reports = parse_reports(EXAMPLE)
    assert count_safe_reports(reports) == len([r for r in reports if not r.unsafe])


def test_bad_number_raises():
    with pytest.raises(ValueError):
        parse_reports(["1 two 3"])


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"{part_one(EXAMPLE)} safe reports",
        f"{part_two(EXAMPLE)} safe reports",
    ]


def test_main_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.txt")])