[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2025"
version = "0.1.0"
description = "Solutions to the 2025 Advent of Code puzzles, days 1 to 6"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2025 = "aoc2025.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2025"]

[tool.pytest.ini_options]
addopts = "-ra"
