"""
Tests for grid coordinates and wire paths.

Run with: uv run pytest tests/test_coord.py
"""

import pytest

from aoc2019.coord import (
    Coord, Path, Up, Right, Down, Left,
    parse_direction, parse_path, resize,
)
from aoc2019.errors import PuzzleInputError


def test_arithmetic():
    assert Coord(1, 3) + Coord(2, 4) == Coord(3, 7)
    assert Coord(1, 3) - Coord(2, 4) == Coord(-1, -1)


def test_distance():
    a = Coord(3, 4)
    b = Coord(1, 1)

    assert a.distance_from_origin() == 7
    assert b.distance_from_origin() == 2
    assert Coord.distance(a, b) == 5
    assert Coord.distance(b, a) == 5


def test_offset():
    assert Coord.origin().offset(Up(100)) == Coord(0, 100)
    assert Coord.origin().offset(Right(100)) == Coord(100, 0)
    assert Coord.origin().offset(Down(100)) == Coord(0, -100)
    assert Coord.origin().offset(Left(100)) == Coord(-100, 0)
    assert resize(Left(3), 9) == Left(9)


def test_walk():
    print("Path Walking Tests")
    print("=" * 50)

    steps = list(Path([Up(1000)]).walk())
    assert len(steps) == 1000
    assert steps[-1] == Coord(0, 1000)
    print("✓ Straight run visits every unit step")

    square = list(Path([Up(1), Left(1), Down(1), Right(1)]).walk())
    assert len(square) == 4
    assert square[-1] == Coord.origin()
    print("✓ Closed loop ends at the origin")

    assert list(Path([Up(10), Left(10), Down(5), Right(5)]).walk())[-1] == Coord(-5, 5)
    assert list(Path([Right(2)]).walk_from(Coord(5, 5))) == [Coord(6, 5), Coord(7, 5)]
    assert list(Path([]).walk()) == []
    print("✓ Walk from an arbitrary origin")


def test_parse_direction():
    assert parse_direction("U123") == Up(123)
    assert parse_direction("R456") == Right(456)
    assert parse_direction("D789") == Down(789)
    assert parse_direction("L1") == Left(1)

    for bad in ["U", "", "X12", "U1a", "U-1"]:
        with pytest.raises(PuzzleInputError):
            parse_direction(bad)


def test_parse_path():
    assert parse_path("U1,D2,R10") == Path([Up(1), Down(2), Right(10)])
    assert parse_path("L5\n") == Path([Left(5)])
