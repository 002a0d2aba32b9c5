"""Day 6: reading a worksheet of vertical arithmetic problems."""

from __future__ import annotations

from itertools import takewhile
from math import prod

_DIGITS = "0123456789"


def _as_number(token: str) -> int | None:
    body = token[1:] if token.startswith("+") else token
    if body and all(c in _DIGITS for c in body):
        return int(body)
    return None


def part_1(text: str) -> int:
    """Sum the results of problems written as whitespace separated columns."""
    rows = [line.split() for line in text.splitlines()]
    total = 0
    for column in range(len(rows[0])):
        numbers = []
        op = ""
        for row in rows:
            token = row[column]
            if token in ("+", "*"):
                op = token
            elif (number := _as_number(token)) is not None:
                numbers.append(number)
        if op == "+":
            total += sum(numbers)
        elif op == "*":
            total += prod(numbers)
        else:
            raise ValueError("Invalid row op")
    return total


def part_2(text: str) -> int:
    """Sum the results of problems whose numbers are read down each character column."""
    columns: list[int] = []
    total = 0
    for line in text.splitlines():
        for index, char in enumerate(line):
            if len(columns) == index:
                columns.append(0)
            if char in _DIGITS:
                columns[index] = columns[index] * 10 + int(char)
            elif char == "+":
                total += sum(takewhile(lambda n: n != 0, columns[index:]))
            elif char == "*":
                total += prod(takewhile(lambda n: n != 0, columns[index:]))
    return total