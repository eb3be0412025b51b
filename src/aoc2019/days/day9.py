"""Day 9: run the BOOST program in test mode and in sensor boost mode."""

from typing import List, Optional, Tuple

from aoc2019.config import DEFAULT_CONFIG, PuzzleConfig
from aoc2019.errors import PuzzleInputError
from aoc2019.intcode import Interpreter, run_with_inputs
from . import expect_args


def boost(computer: Interpreter, mode: int) -> int:
    """Return the BOOST keycode; any earlier outputs name malfunctioning opcodes."""
    outputs = run_with_inputs(computer.copy(), [mode])
    if not outputs:
        raise PuzzleInputError("No output produced by computer")
    if len(outputs) > 1:
        raise PuzzleInputError(f"Malfunctioning opcodes reported: {outputs[:-1]}")
    return outputs[-1]


def main(args: List[str], config: PuzzleConfig = DEFAULT_CONFIG) -> Tuple[int, Optional[int]]:
    expect_args(args, 1, "Expected path to input")
    computer = Interpreter.from_path(args[0])
    return (
        boost(computer, config.boost_test_mode),
        boost(computer, config.boost_sensor_mode),
    )
