from adventdays.day03 import (
    Instruction,
    enabled_sections,
    parse_instructions,
    part_one,
    part_two,
    total_product,
)

EXAMPLE_ONE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_TWO = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_parse_instructions_example():
    assert parse_instructions([EXAMPLE_ONE]) == [
        Instruction(2, 4),
        Instruction(5, 5),
        Instruction(11, 8),
        Instruction(8, 5),
    ]


def test_part_one_example():
    assert part_one([EXAMPLE_ONE]) == 161


def test_part_two_example():
    assert part_two([EXAMPLE_TWO]) == 48


def test_part_two_keeps_only_enabled_instructions():
    assert parse_instructions(enabled_sections([EXAMPLE_TWO])) == [
        Instruction(2, 4),
        Instruction(8, 5),
    ]


def test_rejects_spaces_and_extra_operands():
    assert parse_instructions(["mul( 3,4)mul(1,2,3)mul(7,x)"]) == []


def test_accepts_signed_operands():
    assert parse_instructions(["mul(-3,+4)"]) == [Instruction(-3, 4)]


def test_enabled_sections_without_switches_joins_lines():
    assert enabled_sections(["abc", "def"]) == ["abc,def"]


def test_enabled_sections_across_lines():
    sections = enabled_sections(["mul(1,2)don't()", "mul(3,4)do()mul(5,6)"])
    assert sections == ["mul(1,2)", "mul(5,6)"]
    assert parse_instructions(sections) == [Instruction(1, 2), Instruction(5, 6)]


def test_joined_stream_can_span_lines():
    lines = ["mul(1", "2)"]
    assert parse_instructions(lines) == []
    assert parse_instructions(enabled_sections(lines)) == [Instruction(1, 2)]


def test_total_product_empty():
    assert total_product([]) == 0


def test_part_two_never_exceeds_part_one_without_negatives():
    assert part_two([EXAMPLE_TWO]) <= part_one([EXAMPLE_TWO])
    assert part_two([EXAMPLE_ONE]) == part_one([EXAMPLE_ONE])