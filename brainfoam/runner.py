"""
Host driver: run a program to completion under an optional step budget.

This is the loop the machine deliberately leaves to its callers. A budget
keeps runaway loops from hanging the host; by default running out of budget
is reported on the result (hit_step_limit) rather than raised.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from brainfoam.config import Settings, load_settings
from brainfoam.devices import BufferedIO, IODevice
from brainfoam.errors import BrainfoamError, StepLimitExceeded
from brainfoam.machine import VirtualMachine
from brainfoam.program import Program


@dataclass
class RunResult:
    output: bytes
    steps: int
    hit_step_limit: bool
    memory_pointer: int
    program_counter: int
    tape: np.ndarray

    @property
    def text(self) -> str:
        return self.output.decode("latin-1")

    @property
    def halted(self) -> bool:
        return not self.hit_step_limit


def tape_snapshot(machine: VirtualMachine) -> np.ndarray:
    """Copy the machine's tape into a uint8 array."""
    return np.array(machine.cell_values(), dtype=np.uint8)


def drive(machine: VirtualMachine, step_limit: Optional[int] = None, strict_limit: bool = False) -> int:
    """Step machine until it halts. Returns the number of steps executed."""
    steps = 0
    while not machine.is_halted():
        if step_limit is not None and steps >= step_limit:
            if strict_limit:
                raise StepLimitExceeded(step_limit)
            break
        machine.execute_instruction()
        steps += 1
    return steps


def run_program(
    program: Program,
    input_data: Union[bytes, str] = b"",
    *,
    settings: Optional[Settings] = None,
    step_limit: Optional[int] = None,
    machine: Optional[VirtualMachine] = None,
    device: Optional[IODevice] = None,
    strict_limit: bool = False,
) -> RunResult:
    """
    Load program into a machine and drive it to halt.

    A fresh machine is built from settings unless one is passed in, in which
    case its tape and pointer carry over. input_data is ignored when an
    explicit device is given; output is then collected only if that device is
    a BufferedIO, otherwise it stays with the device and RunResult.output is
    empty. step_limit overrides settings.step_limit.
    """
    settings = settings or load_settings()
    if step_limit is None:
        step_limit = settings.step_limit

    if device is None:
        device = BufferedIO(input_data)
    buffer = device if isinstance(device, BufferedIO) else None

    if machine is None:
        machine = VirtualMachine.from_settings(settings, device)
    else:
        machine.device = device

    machine.load(program)
    steps = drive(machine, step_limit=step_limit, strict_limit=strict_limit)

    return RunResult(
        output=buffer.output_bytes if buffer is not None else b"",
        steps=steps,
        hit_step_limit=not machine.is_halted(),
        memory_pointer=machine.memory_pointer,
        program_counter=machine.program_counter,
        tape=tape_snapshot(machine),
    )


def run_source(code: str, input_data: Union[bytes, str] = b"", **kwargs) -> RunResult:
    """Parse code and run it; see run_program for keyword arguments."""
    return run_program(Program.from_source(code), input_data, **kwargs)


def run_once(code: str, x: int, step_limit: int = 5000, tape_size: int = 256) -> Optional[int]:
    """Execute code as a byte function: feed x, return the first output byte.

    Returns None when the program produces no output or fails.
    """
    settings = Settings(tape_size=tape_size, step_limit=step_limit)
    try:
        result = run_source(code, bytes([x & 0xFF]), settings=settings)
    except BrainfoamError:
        return None
    return result.output[0] if result.output else None
