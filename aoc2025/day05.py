"""Day 5: checking ingredients against ranges of fresh identifiers."""

from __future__ import annotations


def parse(text: str) -> tuple[list[range], list[int]]:
    """Split the input into inclusive fresh ranges and ingredient identifiers."""
    fresh_part, sep, ingredient_part = text.partition("\n\n")
    if not sep:
        raise ValueError("input has no blank line between ranges and ingredients")
    ranges = []
    for line in fresh_part.splitlines():
        start, dash, end = line.partition("-")
        if not dash:
            raise ValueError(f"invalid range: {line!r}")
        ranges.append(range(int(start), int(end) + 1))
    ingredients = [int(line) for line in ingredient_part.splitlines()]
    return ranges, ingredients


def part_1(text: str) -> int:
    """Count ingredients that fall inside at least one fresh range."""
    ranges, ingredients = parse(text)
    return sum(1 for item in ingredients if any(item in r for r in ranges))


def _sorted_by_start(ranges: list[range]) -> list[range]:
    return sorted(ranges, key=lambda r: r.start)


def part_2_brute(parsed: tuple[list[range], list[int]]) -> int:
    """Count distinct fresh identifiers above zero by walking every range."""
    ranges, _ = parsed
    count = 0
    highest = 0
    for fresh in _sorted_by_start(ranges):
        for ingredient in fresh:
            if ingredient > highest:
                count += 1
                highest = ingredient
    return count


def part_2_optimized(text: str) -> int:
    """Count distinct fresh identifiers above zero by merging sorted ranges."""
    ranges, _ = parse(text)
    count = 0
    highest = 0
    for fresh in _sorted_by_start(ranges):
        start, end = fresh.start, fresh.stop - 1
        if start <= highest:
            if end > highest:
                count += end - highest
                highest = end
        else:
            count += end - start + 1
            highest = end
    return count