import pytest

from aoc2025.day02 import generate, part_1, part_2

EXAMPLE = (
    "11-22,95-115,998-1012,1188511880-1188511890,222220-222224,"
    "1698522-1698528,446443-446449,38593856-38593862,565653-565659,"
    "824824821-824824827,2121212118-2121212124"
)


def test_generate_parses_ranges():
    ranges = generate(EXAMPLE)
    assert ranges[0] == (11, 22)
    assert ranges[-1] == (2121212118, 2121212124)
    assert len(ranges) == 11


def test_part_1_example():
    assert part_1(generate(EXAMPLE)) == 1227775554


def test_part_2_example():
    assert part_2(generate(EXAMPLE)) == 4174379265


def test_generate_rejects_missing_dash():
    with pytest.raises(ValueError):
        generate("1122")