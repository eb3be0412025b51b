"""Day 3: closest crossing of two wires, by distance and by combined steps."""

from typing import Dict, List, Optional, Tuple

from aoc2019.coord import Coord, Path, parse_path
from aoc2019.errors import NoSolution, PuzzleInputError
from . import expect_args, read_lines


def solve(wire_a: Path, wire_b: Path) -> Tuple[int, Optional[int]]:
    steps_a: Dict[Coord, int] = {}
    for steps, coord in enumerate(wire_a.walk(), start=1):
        steps_a.setdefault(coord, steps)

    distances = []
    combined_steps = []
    for steps_b, coord in enumerate(wire_b.walk(), start=1):
        if coord in steps_a:
            distances.append(coord.distance_from_origin())
            combined_steps.append(steps_a[coord] + steps_b)

    if not distances:
        raise NoSolution("The wires never cross")
    return min(distances), min(combined_steps)


def main(args: List[str]) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    lines = read_lines(args[0])
    if len(lines) < 2:
        raise PuzzleInputError(f"Expected two wires, got {len(lines)}")
    return solve(parse_path(lines[0]), parse_path(lines[1]))
