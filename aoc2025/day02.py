"""Day 2: finding identifiers made of repeated digit patterns."""

from __future__ import annotations


def generate(text: str) -> list[tuple[int, int]]:
    """Parse comma separated ``start-end`` ranges."""
    ranges = []
    for part in text.split(","):
        start, sep, end = part.partition("-")
        if not sep:
            raise ValueError(f"invalid range: {part!r}")
        ranges.append((int(start), int(end)))
    return ranges


def _is_doubled(number: int) -> bool:
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def _is_repeated(number: int) -> bool:
    digits = str(number)
    size = len(digits)
    return any(
        size % width == 0 and digits == digits[:width] * (size // width)
        for width in range(1, size // 2 + 1)
    )


def part_1(ranges: list[tuple[int, int]]) -> int:
    """Sum numbers whose digits are one pattern written twice."""
    return sum(
        n for start, end in ranges for n in range(start, end + 1) if _is_doubled(n)
    )


def part_2(ranges: list[tuple[int, int]]) -> int:
    """Sum numbers whose digits are one pattern written at least twice."""
    return sum(
        n for start, end in ranges for n in range(start, end + 1) if _is_repeated(n)
    )