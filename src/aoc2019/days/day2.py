"""Day 2: patch the noun and verb of an Intcode program and search for a result."""

from typing import List, Optional, Tuple

from aoc2019.config import DEFAULT_CONFIG, PuzzleConfig
from aoc2019.errors import NoSolution, PuzzleInputError
from aoc2019.intcode import Halted, Interpreter
from . import expect_args

NOUN_VERB_RANGE = range(0, 100)


def adjust_and_compute(computer: Interpreter, noun: int, verb: int) -> int:
    """Run a copy of ``computer`` with addresses 1 and 2 patched; return address 0."""
    computer = computer.copy()
    computer.put(1, noun)
    computer.put(2, verb)
    state = computer.run()
    if not isinstance(state, Halted):
        raise PuzzleInputError("Program tried to do IO, but it's not supported today")
    return state.result


def find_noun_verb(computer: Interpreter, target: int) -> Tuple[int, int]:
    for noun in NOUN_VERB_RANGE:
        for verb in NOUN_VERB_RANGE:
            if adjust_and_compute(computer, noun, verb) == target:
                return noun, verb

    raise NoSolution(f"Unable to find a noun and verb that produce {target}")


def main(args: List[str], config: PuzzleConfig = DEFAULT_CONFIG) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    computer = Interpreter.from_path(args[0])
    noun, verb = find_noun_verb(computer, config.gravity_target)
    return (
        adjust_and_compute(computer, config.gravity_noun, config.gravity_verb),
        100 * noun + verb,
    )
