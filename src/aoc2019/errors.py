"""Exception hierarchy shared by the interpreter and the puzzle drivers."""


class AocException(Exception):
    """Base exception for all aoc2019 errors."""
    pass


class PuzzleInputError(AocException):
    """Raised when a puzzle input or command-line argument cannot be used."""
    pass


class NoSolution(AocException):
    """Raised when a search over the puzzle space finds no answer."""
    pass
