"""Day 4: count password candidates in a range that satisfy the digit rules."""

from itertools import groupby
from typing import Iterable, List, Optional, Sequence, Tuple

from aoc2019.errors import PuzzleInputError
from . import expect_args

PASSWORD_LENGTH = 6


def is_sorted(items: Sequence) -> bool:
    return all(p <= c for p, c in zip(items, items[1:]))


def has_repetitions(items: Sequence) -> bool:
    return any(p == c for p, c in zip(items, items[1:]))


def has_pairs(items: Sequence) -> bool:
    """True if some run of equal adjacent items has length exactly two."""
    return any(len(list(run)) == 2 for _, run in groupby(items))


def is_valid_a(password: str) -> bool:
    return (
        len(password) == PASSWORD_LENGTH
        and is_sorted(password)
        and has_repetitions(password)
    )


def solve(candidates: Iterable[int]) -> Tuple[int, Optional[int]]:
    num_a = 0
    num_b = 0
    for password in map(str, candidates):
        if not is_valid_a(password):
            continue
        num_a += 1
        if has_pairs(password):
            num_b += 1
    return num_a, num_b


def main(args: List[str]) -> Tuple[int, Optional[int]]:
    expect_args(args, 2, "Expected start and end")
    try:
        start, end = int(args[0]), int(args[1])
    except ValueError:
        raise PuzzleInputError(f"Range bounds must be integers, got {args[0]!r} and {args[1]!r}") from None
    return solve(range(start, end + 1))
