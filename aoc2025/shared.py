"""Shared helpers used by several puzzle days."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_OFFSETS = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass
class Grid(Generic[T]):
    """A rectangular grid stored row by row, indexed by ``(x, y)``."""

    width: int
    height: int
    content: list[T] = field(default_factory=list)

    def __getitem__(self, pos: tuple[int, int]) -> T:
        x, y = pos
        index = y * self.width + x
        if not 0 <= index < len(self.content):
            raise IndexError(f"position {pos} is outside the grid")
        return self.content[index]

    def count_all_neighbours(self, x: int, y: int, neighbour_kind: T) -> int:
        """Count the up to eight cells around ``(x, y)`` equal to ``neighbour_kind``."""
        return sum(
            1
            for dx, dy in _OFFSETS
            if 0 <= x + dx < self.width
            and 0 <= y + dy < self.height
            and self[(x + dx, y + dy)] == neighbour_kind
        )