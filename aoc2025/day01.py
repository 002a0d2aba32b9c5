"""Day 1: turning a dial with 100 positions."""

from __future__ import annotations

from collections.abc import Iterator


def _rotations(text: str) -> Iterator[tuple[str, int]]:
    for line in text.splitlines():
        yield line[:1], int(line[1:])


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def part_1(text: str) -> int:
    """Count how many rotations leave the dial exactly at zero."""
    dial = 50
    hits = 0
    for direction, amount in _rotations(text):
        dial = _truncated_mod(dial - amount if direction == "L" else dial + amount, 100)
        if dial == 0:
            hits += 1
    return hits


def part_2(text: str) -> int:
    """Count every time the dial passes through or lands on zero."""
    dial = 50
    total = 0
    for direction, amount in _rotations(text):
        step = -amount if direction == "L" else amount
        new = dial + step
        total += int(new <= 0 and dial != 0) + abs(new) // 100
        dial = new % 100
    return total