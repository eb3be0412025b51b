"""2D grid coordinates and paths made of straight unit-step runs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Union

from .errors import PuzzleInputError

# =============================================================================
# Coordinates
# =============================================================================

@dataclass(frozen=True)
class Coord:
    x: int
    y: int

    @classmethod
    def origin(cls) -> Coord:
        return cls(0, 0)

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    @staticmethod
    def distance(a: Coord, b: Coord) -> int:
        """Manhattan distance between two coordinates."""
        relative = a - b
        return abs(relative.x) + abs(relative.y)

    def distance_from_origin(self) -> int:
        return Coord.distance(self, Coord.origin())

    def offset(self, direction: Direction) -> Coord:
        match direction:
            case Up(length=n):
                return self + Coord(0, n)
            case Right(length=n):
                return self + Coord(n, 0)
            case Down(length=n):
                return self + Coord(0, -n)
            case Left(length=n):
                return self + Coord(-n, 0)
            case _:
                raise ValueError(f"Unknown direction: {direction}")


# =============================================================================
# Directions
# =============================================================================

@dataclass(frozen=True)
class Up:
    length: int


@dataclass(frozen=True)
class Right:
    length: int


@dataclass(frozen=True)
class Down:
    length: int


@dataclass(frozen=True)
class Left:
    length: int


Direction = Union[Up, Right, Down, Left]

_DIRECTIONS = {"U": Up, "R": Right, "D": Down, "L": Left}


def resize(direction: Direction, length: int) -> Direction:
    """Same heading, different length."""
    return replace(direction, length=length)


def parse_direction(text: str) -> Direction:
    """
    Parse a single run such as ``U123``.

    Raises:
        PuzzleInputError: On a short token, unknown heading or bad length
    """
    if len(text) < 2:
        raise PuzzleInputError(f"String must be at least two characters, got {len(text)}")

    heading, length = text[0], text[1:]
    if heading not in _DIRECTIONS:
        raise PuzzleInputError(f"Unexpected direction {heading!r}")
    if not (length.isascii() and length.isdigit()):
        raise PuzzleInputError(f"Invalid length {length!r} in {text!r}")
    return _DIRECTIONS[heading](int(length))


# =============================================================================
# Paths
# =============================================================================

@dataclass(frozen=True)
class Path:
    directions: List[Direction]

    def walk(self) -> Iterator[Coord]:
        return self.walk_from(Coord.origin())

    def walk_from(self, origin: Coord) -> Iterator[Coord]:
        """Yield every coordinate stepped on after leaving ``origin``."""
        current = origin
        for direction in self.directions:
            for i in range(1, direction.length + 1):
                yield current.offset(resize(direction, i))
            current = current.offset(direction)


def parse_path(text: str) -> Path:
    """Parse comma-separated runs such as ``U1,D2,R10``."""
    return Path([parse_direction(token) for token in text.strip().split(",")])
