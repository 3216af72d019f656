"""
The tape machine.

VirtualMachine owns the tape, the memory pointer, the loaded Program and
the program counter. It only ever executes one instruction per call; the
loop that drives it to the end lives with the caller (runner, debugger,
CLI), which is where step budgets and timeouts belong.
"""

from typing import List, Optional

from brainfoam.cells import BYTE_MASK, Byte
from brainfoam.config import DEFAULT_TAPE_SIZE, EofPolicy, Settings, TapePolicy
from brainfoam.devices import BufferedIO, IODevice
from brainfoam.errors import PointerOutOfBounds
from brainfoam.instruction import Instruction
from brainfoam.program import Program


class VirtualMachine:
    """Single-step interpreter over a fixed-size tape of Byte cells."""

    def __init__(
        self,
        tape_size: int = DEFAULT_TAPE_SIZE,
        device: Optional[IODevice] = None,
        tape_policy: TapePolicy = TapePolicy.STRICT,
        eof_policy: EofPolicy = EofPolicy.UNCHANGED,
    ):
        if tape_size < 1:
            raise ValueError(f"tape_size must be positive, got {tape_size}")
        self._tape: List[Byte] = [Byte() for _ in range(tape_size)]
        self._memory_pointer = 0
        self._program = Program()
        self._program_counter = 0
        self.device: IODevice = device if device is not None else BufferedIO()
        self.tape_policy = TapePolicy(tape_policy)
        self.eof_policy = EofPolicy(eof_policy)

    @classmethod
    def from_settings(cls, settings: Settings, device: Optional[IODevice] = None) -> 'VirtualMachine':
        return cls(
            tape_size=settings.tape_size,
            device=device,
            tape_policy=settings.tape_policy,
            eof_policy=settings.eof_policy,
        )

    def load(self, program: Program) -> None:
        """
        Replace the loaded program and rewind the program counter.

        The tape and memory pointer are left alone, so programs can be
        chained over the same memory.
        """
        self._program = program
        self._program_counter = 0

    @property
    def program(self) -> Program:
        return self._program

    @property
    def memory_pointer(self) -> int:
        return self._memory_pointer

    @property
    def program_counter(self) -> int:
        return self._program_counter

    def length(self) -> int:
        """Number of cells on the tape."""
        return len(self._tape)

    def is_halted(self) -> bool:
        return self._program_counter >= len(self._program)

    def get_instruction(self) -> Optional[Instruction]:
        return self._program.get_instruction(self._program_counter)

    def cell(self, index: Optional[int] = None) -> Byte:
        """Copy of the cell at index (default: under the memory pointer)."""
        if index is None:
            index = self._memory_pointer
        return self._tape[index].copy()

    def cell_values(self, start: int = 0, end: Optional[int] = None) -> List[int]:
        return [c.to_integer() for c in self._tape[start:end]]

    def execute_instruction(self) -> Instruction:
        """
        Execute the instruction under the program counter and advance.

        Past the end of the program this is a no-op and the counter stays at
        the program length. Returns the instruction that was executed.
        """
        instruction = self.get_instruction()
        if instruction is None:
            return Instruction.NO_OP

        next_counter = self._program_counter + 1

        if instruction is Instruction.INCREMENT_POINTER:
            self._move_pointer(1)
        elif instruction is Instruction.DECREMENT_POINTER:
            self._move_pointer(-1)
        elif instruction is Instruction.INCREMENT_VALUE:
            self._update_cell(Byte.increment)
        elif instruction is Instruction.DECREMENT_VALUE:
            self._update_cell(Byte.decrement)
        elif instruction is Instruction.OUTPUT_VALUE:
            self.device.write_byte(self._tape[self._memory_pointer].to_integer())
        elif instruction is Instruction.INPUT_VALUE:
            self._input_value()
        elif instruction is Instruction.JUMP_FORWARD:
            if self._tape[self._memory_pointer].is_zero():
                # Land on the instruction after the matching ']'
                next_counter = self._program.jump_target(self._program_counter) + 1
        elif instruction is Instruction.JUMP_BACKWARD:
            if not self._tape[self._memory_pointer].is_zero():
                # Land on the matching '[' so the condition is checked again
                next_counter = self._program.jump_target(self._program_counter)

        self._program_counter = next_counter
        return instruction

    def _move_pointer(self, delta: int) -> None:
        target = self._memory_pointer + delta
        if not 0 <= target < len(self._tape):
            if self.tape_policy is TapePolicy.WRAP:
                target %= len(self._tape)
            else:
                raise PointerOutOfBounds(self._memory_pointer, target, len(self._tape))
        self._memory_pointer = target

    def _update_cell(self, operation) -> None:
        # Cells are values: mutate a copy and write it back to the same slot
        cell = self._tape[self._memory_pointer].copy()
        operation(cell)
        self._tape[self._memory_pointer] = cell

    def _input_value(self) -> None:
        value = self.device.read_byte()
        if value is None:
            if self.eof_policy is EofPolicy.UNCHANGED:
                return
            value = 0 if self.eof_policy is EofPolicy.ZERO else BYTE_MASK
        self._tape[self._memory_pointer] = Byte.from_integer(value)
