"""Puzzle drivers, one ``dayN`` module per puzzle, each exposing ``main(args)``."""

from typing import List, Sequence

from aoc2019.errors import PuzzleInputError


def expect_args(args: Sequence[str], count: int, message: str) -> None:
    if len(args) != count:
        raise PuzzleInputError(message)


def read_lines(path: str) -> List[str]:
    """Return the non-empty lines of a puzzle input file."""
    with open(path) as f:
        return [line.strip() for line in f if line.strip()]
