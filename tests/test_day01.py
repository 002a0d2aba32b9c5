import pytest

from aoc2025.day01 import part_1, part_2

EXAMPLE = """L68
L30
R48
L5
R60
L55
L1
L99
R14
L82"""


def test_part_1_example():
    assert part_1(EXAMPLE) == 3


def test_part_2_example():
    assert part_2(EXAMPLE) == 6


def test_part_2_counts_at_least_part_1():
    assert part_2(EXAMPLE) >= part_1(EXAMPLE)


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        part_1("Lxx")