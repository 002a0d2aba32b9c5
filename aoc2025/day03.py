"""Day 3: picking the largest joltage from banks of batteries."""

from __future__ import annotations


def _best_joltage(digits: list[int], count: int) -> int:
    chosen = [0] * count
    for start in range(len(digits) - count + 1):
        window = digits[start : start + count]
        for i, (candidate, current) in enumerate(zip(window, chosen)):
            if candidate > current:
                chosen = chosen[:i] + window[i:]
                break
    if len(digits) < count:
        return 0
    value = 0
    for digit in chosen:
        value = value * 10 + digit
    return value


def _banks(text: str) -> list[list[int]]:
    return [[int(c) for c in line] for line in text.splitlines()]


def part_1(text: str) -> int:
    """Sum the largest two digit joltage of every bank."""
    return sum(_best_joltage(bank, 2) for bank in _banks(text))


def part_2(text: str) -> int:
    """Sum the largest twelve digit joltage of every bank."""
    return sum(_best_joltage(bank, 12) for bank in _banks(text))