"""Day 6: orbit map checksums and orbital transfers between two objects."""

from typing import Dict, Iterator, List, Optional, Tuple

from aoc2019.config import DEFAULT_CONFIG, PuzzleConfig
from aoc2019.errors import NoSolution, PuzzleInputError
from . import expect_args, read_lines

# satellite -> the object it orbits
Orbits = Dict[str, str]


def parse_orbits(lines: List[str]) -> Orbits:
    orbits: Orbits = {}
    for line in lines:
        parts = line.split(")")
        if len(parts) == 1:
            raise PuzzleInputError(f"No orbit separator found in {line!r}")
        if len(parts) > 2:
            raise PuzzleInputError(f"More than one orbit separator in {line!r}")
        mass, satellite = parts
        orbits[satellite] = mass
    return orbits


def iter_parents(orbits: Orbits, start: str) -> Iterator[str]:
    """Yield the object ``start`` orbits, then what that orbits, up to the root."""
    current = start
    while current in orbits:
        current = orbits[current]
        yield current


def total_orbits(orbits: Orbits) -> int:
    return sum(sum(1 for _ in iter_parents(orbits, body)) for body in orbits)


def min_transfers(orbits: Orbits, a: str, b: str) -> int:
    a_parents = {parent: dist for dist, parent in enumerate(iter_parents(orbits, a))}

    for b_dist, b_parent in enumerate(iter_parents(orbits, b)):
        if b_parent in a_parents:
            return a_parents[b_parent] + b_dist

    raise NoSolution(f"{a} and {b} do not orbit a common object")


def main(args: List[str], config: PuzzleConfig = DEFAULT_CONFIG) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    orbits = parse_orbits(read_lines(args[0]))
    return (
        total_orbits(orbits),
        min_transfers(orbits, config.orbit_origin, config.orbit_destination),
    )
