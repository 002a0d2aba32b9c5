"""Day 4: removing reachable paper rolls from a warehouse floor."""

from __future__ import annotations

from enum import Enum

from aoc2025.shared import Grid

_SYMBOLS = {"@": "PAPER_ROLL", ".": "EMPTY"}


class Warehouse(Enum):
    """Contents of one warehouse cell."""

    PAPER_ROLL = "@"
    EMPTY = "."


def parse(text: str) -> Grid[Warehouse]:
    """Parse a map of ``@`` and ``.`` characters."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty warehouse map")
    content = []
    for line in lines:
        for char in line:
            try:
                content.append(Warehouse(char))
            except ValueError:
                raise ValueError(f"Invalid warehouse character: {char}") from None
    return Grid(width=len(content) // len(lines), height=len(lines), content=content)


def _roll_neighbour_counts(grid: Grid[Warehouse]) -> dict[tuple[int, int], int]:
    return {
        (x, y): grid.count_all_neighbours(x, y, Warehouse.PAPER_ROLL)
        for x in range(grid.width)
        for y in range(grid.height)
        if grid[(x, y)] != Warehouse.EMPTY
    }


def part_1(grid: Grid[Warehouse]) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    return sum(1 for n in _roll_neighbour_counts(grid).values() if n < 4)


def part_2(grid: Grid[Warehouse]) -> int:
    """Count all rolls that can be removed by repeatedly taking accessible ones."""
    state = _roll_neighbour_counts(grid)
    removed_total = 0
    while True:
        removed = [pos for pos, n in state.items() if n < 4]
        if not removed:
            return removed_total
        removed_total += len(removed)
        for pos in removed:
            del state[pos]
        for x, y in removed:
            for dx in (-1, 0, 1):
                for dy in (-1, 0, 1):
                    neighbour = (x + dx, y + dy)
                    if (dx, dy) != (0, 0) and neighbour in state:
                        state[neighbour] -= 1