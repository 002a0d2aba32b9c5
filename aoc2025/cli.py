"""Command line entry point that solves a chosen puzzle day."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from aoc2025 import day01, day02, day03, day04, day05, day06

_Solver = tuple[Callable[[str], Any], Callable[[Any], Any], Callable[[Any], Any]]


def _identity(text: str) -> str:
    return text


_DAYS: dict[int, _Solver] = {
    1: (_identity, day01.part_1, day01.part_2),
    2: (day02.generate, day02.part_1, day02.part_2),
    3: (_identity, day03.part_1, day03.part_2),
    4: (day04.parse, day04.part_1, day04.part_2),
    5: (_identity, day05.part_1, day05.part_2_optimized),
    6: (_identity, day06.part_1, day06.part_2),
}


def run_day(day: int, text: str) -> tuple[Any, Any]:
    """Solve both parts of ``day`` for the given puzzle input."""
    try:
        prepare, first, second = _DAYS[day]
    except KeyError:
        raise ValueError(f"no solution for day {day}") from None
    data = prepare(text)
    return first(data), second(data)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve the 2025 puzzles.")
    parser.add_argument("day", type=int, choices=sorted(_DAYS), help="day to solve")
    parser.add_argument(
        "-i",
        "--input",
        help="input file, '-' for standard input (default: input/2025/dayNN.txt)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver for the day named on the command line."""
    args = _build_parser().parse_args(argv)
    source = args.input or f"input/2025/day{args.day:02}.txt"
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text()
    except OSError as exc:
        print(f"cannot read {source}: {exc}", file=sys.stderr)
        return 1
    first, second = run_day(args.day, text.rstrip("\r\n"))
    print(f"day{args.day:02} part 1: {first}")
    print(f"day{args.day:02} part 2: {second}")
    return 0


if __name__ == "__main__":
    sys.exit(main())