"""
Intcode interpreter.

A program is a sequence of signed integers loaded into a sparse memory. The
interpreter decodes the instruction word at the program counter, executes it
and repeats until it has to stop: when it needs an input value, when it has
produced an output value, or when it halts. The first two cases return a
paused state that owns the machine and can be resumed exactly once.

    state = Interpreter.from_path("day5.txt").run()
    while not isinstance(state, Halted):
        match state:
            case AwaitingInput():
                state = state.resume(1)
            case HasOutput(value=value):
                print(value)
                state = state.resume()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import itertools
import logging
import os
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import AocException

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

OP_ADD = 1
OP_MUL = 2
OP_INPUT = 3
OP_OUTPUT = 4
OP_JUMP_IF_TRUE = 5
OP_JUMP_IF_FALSE = 6
OP_LESS_THAN = 7
OP_EQUALS = 8
OP_ADJUST_BASE = 9
OP_HALT = 99

_TOKEN = re.compile(r"[+-]?[0-9]+")

# =============================================================================
# Exceptions
# =============================================================================

class IntcodeException(AocException):
    """Base exception for all interpreter errors."""
    pass


class MalformedProgram(IntcodeException):
    """Raised when program text is empty or contains a non-integer token."""
    pass


class InvalidOpcode(IntcodeException):
    """Raised when an instruction word does not name a known instruction."""
    pass


class InvalidAddressingMode(IntcodeException):
    """Raised when a parameter mode digit is not 0, 1 or 2."""
    pass


class ImmediateWriteTarget(IntcodeException):
    """Raised when an output parameter is decoded in immediate mode."""
    pass


class NegativeAddress(IntcodeException):
    """Raised when a direct, relative or jump address resolves below zero."""
    pass


class OutOfRangeJump(IntcodeException):
    """Raised by bounded machines when a jump leaves the loaded memory."""
    pass


class MachineConsumed(IntcodeException):
    """Raised when a machine or paused state is driven a second time."""
    pass


class InputExhausted(IntcodeException):
    """Raised when a program asks for more input than its caller supplied."""
    pass


# =============================================================================
# Opcode decoding
# =============================================================================

class Mode(Enum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


@dataclass(frozen=True)
class Opcode:
    """An instruction word split into its code and parameter modes."""
    raw: int

    def __post_init__(self):
        if self.raw < 0:
            raise InvalidOpcode(f"Instruction word must not be negative, got {self.raw}")

    @property
    def code(self) -> int:
        return self.raw % 100

    def param_mode(self, i: int) -> Mode:
        digit = (self.raw // 10 ** (i + 2)) % 10
        try:
            return Mode(digit)
        except ValueError:
            raise InvalidAddressingMode(
                f"Invalid parameter mode {digit} for parameter {i} of {self.raw}"
            ) from None

    def param_modes(self) -> Iterator[Mode]:
        """Modes for parameters 0, 1, 2, ... without end; missing digits are POSITION."""
        for i in itertools.count():
            yield self.param_mode(i)


# =============================================================================
# Memory
# =============================================================================

class Memory:
    """Sparse address -> value mapping where unwritten addresses read as zero."""

    def __init__(self, cells: Optional[Mapping[int, int]] = None):
        self._cells: Dict[int, int] = dict(cells or {})
        self._extent = max(self._cells, default=-1) + 1

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Memory:
        return cls(dict(enumerate(values)))

    @property
    def extent(self) -> int:
        """One past the highest address that was loaded or written."""
        return self._extent

    def get(self, address: int) -> int:
        return self._cells.get(address, 0)

    def put(self, address: int, value: int) -> None:
        self._cells[address] = value
        if address >= self._extent:
            self._extent = address + 1

    def copy(self) -> Memory:
        return Memory(self._cells)

    def snapshot(self) -> List[int]:
        return [self.get(address) for address in range(self._extent)]

    def __getitem__(self, address: int) -> int:
        return self.get(address)

    def __len__(self) -> int:
        return self._extent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented
        return self._nonzero() == other._nonzero()

    def _nonzero(self) -> Dict[int, int]:
        return {address: value for address, value in self._cells.items() if value != 0}

    def __repr__(self) -> str:
        return f"Memory({self.snapshot()!r})"


# =============================================================================
# Program loading
# =============================================================================

def parse_program(text: str) -> List[int]:
    """
    Parse program source: one line of comma-separated signed integers.

    Raises:
        MalformedProgram: If the program is empty or a token is not an integer
    """
    text = text.rstrip()
    if not text:
        raise MalformedProgram("Program is too short (expected at least 1 element, got 0)")

    values = []
    for i, token in enumerate(text.split(",")):
        if not _TOKEN.fullmatch(token):
            raise MalformedProgram(f"Invalid integer {token!r} at position {i}")
        values.append(int(token))
    return values


# =============================================================================
# Execution states
# =============================================================================

class _Paused:
    """Shared once-only resume guard for the suspended states."""

    def _claim(self) -> Interpreter:
        if self._resumed:
            raise MachineConsumed(f"{type(self).__name__} has already been resumed")
        self._resumed = True
        return self.machine


@dataclass(eq=False)
class AwaitingInput(_Paused):
    """The machine needs a value; it will be written to ``destination``."""
    destination: int
    machine: Interpreter = field(repr=False)
    _resumed: bool = field(default=False, init=False, repr=False)

    def resume(self, value: int) -> ExecutionState:
        machine = self._claim()
        machine.memory.put(self.destination, value)
        return machine._run()


@dataclass(eq=False)
class HasOutput(_Paused):
    """The machine produced ``value`` and is ready to continue."""
    value: int
    machine: Interpreter = field(repr=False)
    _resumed: bool = field(default=False, init=False, repr=False)

    def get(self) -> int:
        return self.value

    def resume(self) -> ExecutionState:
        return self._claim()._run()


@dataclass(frozen=True, eq=False)
class Halted:
    """The machine executed a halt instruction."""
    memory: Memory

    @property
    def result(self) -> int:
        """Value at address 0, the declared result of most programs."""
        return self.memory.get(0)


class Continue:
    """Outcome of a step that neither suspends nor halts."""

    def __repr__(self) -> str:
        return "CONTINUE"


CONTINUE = Continue()

ExecutionState = Union[AwaitingInput, HasOutput, Halted]
Outcome = Union[Continue, AwaitingInput, HasOutput, Halted]

# =============================================================================
# Interpreter
# =============================================================================

class Interpreter:
    """
    Owns a memory, a program counter and a relative base.

    A machine is started once with ``run()``; after that it is driven through
    the returned states. Use ``copy()`` to run the same program several times.

    Args:
        memory: Initial memory contents
        bounded_jumps: Reject jumps to addresses at or past ``memory.extent``
            instead of letting memory grow lazily
    """

    def __init__(self, memory: Memory, bounded_jumps: bool = False):
        self.memory = memory
        self.bounded_jumps = bounded_jumps
        self._pc = 0
        self._relative_base = 0
        self._started = False

    @classmethod
    def from_iter(cls, values: Iterable[int], bounded_jumps: bool = False) -> Interpreter:
        memory = Memory.from_values(values)
        if memory.extent == 0:
            raise MalformedProgram("Program is too short (expected at least 1 element, got 0)")
        return cls(memory, bounded_jumps=bounded_jumps)

    @classmethod
    def from_string(cls, text: str, bounded_jumps: bool = False) -> Interpreter:
        return cls.from_iter(parse_program(text), bounded_jumps=bounded_jumps)

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike], bounded_jumps: bool = False) -> Interpreter:
        with open(path) as f:
            return cls.from_string(f.read(), bounded_jumps=bounded_jumps)

    @property
    def pc(self) -> int:
        return self._pc

    @property
    def relative_base(self) -> int:
        return self._relative_base

    def get(self, address: int) -> int:
        return self.memory.get(self._address(address))

    def put(self, address: int, value: int) -> None:
        self.memory.put(self._address(address), value)

    def copy(self) -> Interpreter:
        """Return an independent machine with the same memory, pc and relative base."""
        duplicate = Interpreter(self.memory.copy(), bounded_jumps=self.bounded_jumps)
        duplicate._pc = self._pc
        duplicate._relative_base = self._relative_base
        return duplicate

    # -------------------------------------------------------------------------
    # Parameter access
    # -------------------------------------------------------------------------

    @staticmethod
    def _address(value: int) -> int:
        if value < 0:
            raise NegativeAddress(f"Address must not be negative, got {value}")
        return value

    def read_opcode(self) -> Opcode:
        return Opcode(self.read_input_param(Mode.IMMEDIATE))

    def read_input_param(self, mode: Mode) -> int:
        operand = self.memory.get(self._pc)
        match mode:
            case Mode.POSITION:
                value = self.memory.get(self._address(operand))
            case Mode.IMMEDIATE:
                value = operand
            case Mode.RELATIVE:
                value = self.memory.get(self._address(self._relative_base + operand))
        self._pc += 1
        return value

    def read_output_param(self, mode: Mode) -> int:
        operand = self.memory.get(self._pc)
        match mode:
            case Mode.POSITION:
                address = self._address(operand)
            case Mode.IMMEDIATE:
                raise ImmediateWriteTarget(
                    f"Output parameter at address {self._pc} must not be in immediate mode"
                )
            case Mode.RELATIVE:
                address = self._address(self._relative_base + operand)
        self._pc += 1
        return address

    def read_params(self, op: Opcode, roles: str) -> Tuple[int, ...]:
        """
        Read one parameter per character of ``roles``.

        Args:
            op: Decoded instruction supplying the parameter modes
            roles: ``"i"`` for a value to read, ``"o"`` for an address to write

        Returns:
            Tuple of values and addresses in parameter order
        """
        readers = {"i": self.read_input_param, "o": self.read_output_param}
        return tuple(readers[role](mode) for role, mode in zip(roles, op.param_modes()))

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def _jump(self, target: int) -> None:
        self._address(target)
        if self.bounded_jumps and target >= self.memory.extent:
            raise OutOfRangeJump(
                f"Jump target {target} is outside memory of extent {self.memory.extent}"
            )
        self._pc = target

    def step(self) -> Outcome:
        """
        Execute the instruction at pc and report whether the run must stop.

        A step that suspends or halts hands the machine to the returned state,
        the same as ``run()`` does.

        Raises:
            MachineConsumed: If this machine was already run, or stopped on an earlier step
        """
        if self._started:
            raise MachineConsumed("Interpreter has already stopped; drive it through its state")
        outcome = self._step()
        if outcome is not CONTINUE:
            self._started = True
        return outcome

    def _step(self) -> Outcome:
        """Decode and execute one instruction without the once-only guard."""
        address = self._pc
        op = self.read_opcode()
        code = op.code

        match code:
            case _ if code == OP_ADD:
                a, b, out = self.read_params(op, "iio")
                self.memory.put(out, a + b)

            case _ if code == OP_MUL:
                a, b, out = self.read_params(op, "iio")
                self.memory.put(out, a * b)

            case _ if code == OP_INPUT:
                (destination,) = self.read_params(op, "o")
                logger.debug("Awaiting input for address %d (pc=%d)", destination, self._pc)
                return AwaitingInput(destination, self)

            case _ if code == OP_OUTPUT:
                (value,) = self.read_params(op, "i")
                logger.debug("Output %d (pc=%d)", value, self._pc)
                return HasOutput(value, self)

            case _ if code in (OP_JUMP_IF_TRUE, OP_JUMP_IF_FALSE):
                condition, target = self.read_params(op, "ii")
                if (condition != 0) == (code == OP_JUMP_IF_TRUE):
                    self._jump(target)

            case _ if code == OP_LESS_THAN:
                a, b, out = self.read_params(op, "iio")
                self.memory.put(out, 1 if a < b else 0)

            case _ if code == OP_EQUALS:
                a, b, out = self.read_params(op, "iio")
                self.memory.put(out, 1 if a == b else 0)

            case _ if code == OP_ADJUST_BASE:
                (offset,) = self.read_params(op, "i")
                self._relative_base += offset

            case _ if code == OP_HALT:
                logger.debug("Halted at address %d", address)
                return Halted(self.memory)

            case _:
                raise InvalidOpcode(f"Got invalid opcode {code} at address {address}")

        return CONTINUE

    def _run(self) -> ExecutionState:
        while True:
            outcome = self._step()
            if outcome is not CONTINUE:
                return outcome

    def run(self) -> ExecutionState:
        """
        Run until the machine needs input, has output, or halts.

        Raises:
            MachineConsumed: If this machine was already started
            IntcodeException: On any decode or execution error
        """
        if self._started:
            raise MachineConsumed("Interpreter has already been run; copy() it to run again")
        self._started = True
        return self._run()

    def __repr__(self) -> str:
        return (
            f"Interpreter(pc={self._pc}, relative_base={self._relative_base}, "
            f"extent={self.memory.extent})"
        )


# =============================================================================
# Caller protocol
# =============================================================================

def run_with_inputs(interpreter: Interpreter, inputs: Iterable[int]) -> List[int]:
    """
    Drive a machine to completion.

    Args:
        interpreter: Machine that has not been run yet
        inputs: Values supplied in order, one per input request

    Returns:
        Every output value, in the order produced

    Raises:
        InputExhausted: If the program asks for more input than supplied
    """
    pending = iter(inputs)
    consumed = 0
    outputs: List[int] = []
    state = interpreter.run()

    while True:
        match state:
            case AwaitingInput():
                try:
                    value = next(pending)
                except StopIteration:
                    raise InputExhausted(
                        f"Program requested input #{consumed + 1} but only {consumed} were supplied"
                    ) from None
                consumed += 1
                state = state.resume(value)
            case HasOutput(value=value):
                outputs.append(value)
                state = state.resume()
            case Halted():
                return outputs
