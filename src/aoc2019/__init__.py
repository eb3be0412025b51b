"""aoc2019: an Intcode interpreter and Advent of Code 2019 puzzle drivers."""

from .errors import AocException, PuzzleInputError, NoSolution

from .intcode import (
    # Opcodes
    OP_ADD, OP_MUL, OP_INPUT, OP_OUTPUT, OP_JUMP_IF_TRUE, OP_JUMP_IF_FALSE,
    OP_LESS_THAN, OP_EQUALS, OP_ADJUST_BASE, OP_HALT,
    # Decoding & Memory
    Mode, Opcode, Memory,
    # Exceptions
    IntcodeException, MalformedProgram, InvalidOpcode, InvalidAddressingMode,
    ImmediateWriteTarget, NegativeAddress, OutOfRangeJump, MachineConsumed,
    InputExhausted,
    # Execution
    Interpreter, ExecutionState, AwaitingInput, HasOutput, Halted,
    CONTINUE, parse_program, run_with_inputs,
)

from .coord import Coord, Path, Up, Right, Down, Left, parse_direction, parse_path

from .registry import (
    get_available_days,
    get_solution,
)

__version__ = "0.1.0"
