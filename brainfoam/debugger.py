"""
Step-by-step debugger.

Single-steps a program on a VirtualMachine, displaying the program with the
current instruction marked, the input stream, a window of the tape around
the memory pointer and the output produced so far.
"""

from typing import Optional, Union

import numpy as np

from brainfoam.devices import BufferedIO
from brainfoam.errors import BrainfoamError
from brainfoam.instruction import Instruction
from brainfoam.machine import VirtualMachine
from brainfoam.program import Program

DESCRIPTIONS = {
    Instruction.INCREMENT_POINTER: "Move pointer right",
    Instruction.DECREMENT_POINTER: "Move pointer left",
    Instruction.INCREMENT_VALUE: "Increment cell",
    Instruction.DECREMENT_VALUE: "Decrement cell",
    Instruction.OUTPUT_VALUE: "Output cell",
    Instruction.INPUT_VALUE: "Read input",
    Instruction.JUMP_FORWARD: "Loop start",
    Instruction.JUMP_BACKWARD: "Loop end",
}


class Debugger:
    """Runs programs one instruction at a time and prints machine state."""

    def __init__(self, memory_size: int = 30, show_memory_range: int = 10, max_steps: int = 100):
        self.memory_size = memory_size
        self.show_memory_range = max(1, show_memory_range)
        self.max_steps = max_steps
        self.step_count = 0
        self.machine: Optional[VirtualMachine] = None
        self.io: Optional[BufferedIO] = None

    def debug_run(self, code: Union[str, Program], input_data: Union[bytes, str] = b"") -> str:
        """Execute code with step-by-step display. Returns the output text."""
        program = code if isinstance(code, Program) else Program.from_source(code)
        self.io = BufferedIO(input_data)
        self.machine = VirtualMachine(self.memory_size, device=self.io)
        self.machine.load(program)
        self.step_count = 0

        print("🐛 BRAINFOAM DEBUGGER")
        print(f"Program: {program.to_source()}")
        print(f"Input: {self.io.input_data!r} (as bytes: {list(self.io.input_data)})")
        print("=" * 80)
        self.show_state("INITIAL")

        while not self.machine.is_halted() and self.step_count < self.max_steps:
            position = self.machine.program_counter
            instruction = self.machine.get_instruction()
            self.step_count += 1
            print(f"\nStep {self.step_count}: Execute '{instruction.symbol}' at position {position}")
            try:
                self.machine.execute_instruction()
            except BrainfoamError as e:
                print(f"  ❌ {e}")
                raise
            print(f"  {self.describe(instruction, position)}")
            self.show_state(f"AFTER STEP {self.step_count}")

        if not self.machine.is_halted():
            print(f"\n⚠️ Execution stopped after {self.max_steps} steps (possible infinite loop)")

        output = self.io.output_text
        print("\n🎯 FINAL RESULT:")
        print(f"Output: {output!r} → {self.io.output}")
        return output

    def describe(self, instruction: Instruction, position: int) -> str:
        """One-line account of what the step at position just did."""
        machine = self.machine
        pointer = machine.memory_pointer
        value = machine.cell().to_integer()
        label = DESCRIPTIONS.get(instruction, "No-op")

        if instruction in (Instruction.INCREMENT_POINTER, Instruction.DECREMENT_POINTER):
            return f"{label} → position {pointer}"
        if instruction in (Instruction.INCREMENT_VALUE, Instruction.DECREMENT_VALUE):
            return f"{label} cell[{pointer}] → {value}"
        if instruction is Instruction.OUTPUT_VALUE:
            return f"{label} cell[{pointer}] = {value} → {chr(value)!r}"
        if instruction is Instruction.INPUT_VALUE:
            return f"{label} → cell[{pointer}] = {value}"
        if instruction.is_jump():
            jumped = machine.program_counter != position + 1
            if instruction is Instruction.JUMP_FORWARD:
                if jumped:
                    return f"{label}: cell[{pointer}] = 0, jump to position {machine.program_counter}"
                return f"{label}: cell[{pointer}] ≠ 0, enter loop"
            if jumped:
                return f"{label}: cell[{pointer}] ≠ 0, jump back to position {machine.program_counter}"
            return f"{label}: cell[{pointer}] = 0, exit loop"
        return label

    def memory_window(self) -> np.ndarray:
        """Addresses of the tape cells shown around the pointer."""
        length = self.machine.length()
        start = max(0, self.machine.memory_pointer - self.show_memory_range // 2)
        end = min(length, start + self.show_memory_range)
        # Adjust start if we're near the end
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)
        return np.arange(start, end)

    def show_state(self, label: str) -> None:
        """Show current state of memory, pointer, and program."""
        machine = self.machine
        print(f"\n{label}:")

        program_display = ""
        for i, instruction in enumerate(machine.program):
            if i == machine.program_counter:
                program_display += f"[{instruction.symbol}]"
            else:
                program_display += instruction.symbol
        print(f"Program:  {program_display}")

        input_display = ""
        for i, byte in enumerate(self.io.input_data):
            char = chr(byte)
            input_display += f"[{char}]" if i == self.io.input_index else char
        if self.io.input_index >= len(self.io.input_data):
            input_display += "[EOF]"
        print(f"Input:    {input_display}")

        addresses = self.memory_window()
        values = machine.cell_values(int(addresses[0]), int(addresses[-1]) + 1)
        print("Memory:   [" + "|".join(f"{v:3d}" for v in values) + "]")
        print("Pointer:   " + " ".join(" ^ " if a == machine.memory_pointer else "   " for a in addresses))
        print("Address:   " + " ".join(f"{int(a):3d}" for a in addresses))

        if self.io.output:
            print(f"Output:   {self.io.output_text!r} → {self.io.output}")
        else:
            print("Output:   (empty)")
