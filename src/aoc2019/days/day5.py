"""Day 5: run the diagnostic program for a system ID and read its final output."""

from typing import List, Optional, Tuple

from aoc2019.config import DEFAULT_CONFIG, PuzzleConfig
from aoc2019.errors import PuzzleInputError
from aoc2019.intcode import AwaitingInput, Halted, HasOutput, Interpreter
from . import expect_args


def compute(computer: Interpreter, value: int) -> int:
    """
    Feed ``value`` as the only input and return the last value output.

    Raises:
        PuzzleInputError: If the program asks for a second input or never outputs
    """
    pending: Optional[int] = value
    output: Optional[int] = None
    state = computer.copy().run()

    while not isinstance(state, Halted):
        match state:
            case AwaitingInput():
                if pending is None:
                    raise PuzzleInputError("Input value already consumed")
                state = state.resume(pending)
                pending = None
            case HasOutput():
                output = state.get()
                state = state.resume()

    if output is None:
        raise PuzzleInputError("No output produced by computer")
    return output


def main(args: List[str], config: PuzzleConfig = DEFAULT_CONFIG) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    computer = Interpreter.from_path(args[0])
    return (
        compute(computer, config.air_conditioner_id),
        compute(computer, config.thermal_radiator_id),
    )
