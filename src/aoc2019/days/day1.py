"""Day 1: fuel required to launch each module, with and without fuel mass."""

from typing import List, Optional, Tuple

from aoc2019.errors import PuzzleInputError
from . import expect_args, read_lines


def fuel_required(mass: int) -> int:
    return max(mass // 3 - 2, 0)


def fuel_load_required(mass: int) -> int:
    """Fuel for the mass, plus fuel for that fuel, until nothing more is needed."""
    total = 0
    current = mass
    while current != 0:
        current = fuel_required(current)
        total += current
    return total


def parse_masses(lines: List[str]) -> List[int]:
    try:
        return [int(line) for line in lines]
    except ValueError as e:
        raise PuzzleInputError(f"Module mass must be an integer: {e}") from None


def main(args: List[str]) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    masses = parse_masses(read_lines(args[0]))
    return (
        sum(fuel_required(mass) for mass in masses),
        sum(fuel_load_required(mass) for mass in masses),
    )
