"""Advent of Code 2025 puzzle solutions for days 1 to 6, with a command-line runner."""

__version__ = "0.1.0"
__all__ = ["shared", "day01", "day02", "day03", "day04", "day05", "day06", "cli"]