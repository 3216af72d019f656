"""Brainfoam: a Brainfuck interpreter built on a bit-composed tape machine."""

from brainfoam.cells import Bit, Byte, Nybble
from brainfoam.config import EofPolicy, Settings, TapePolicy, load_settings
from brainfoam.devices import BufferedIO, IODevice, StreamIO
from brainfoam.errors import (
    BrainfoamError,
    ConfigError,
    MalformedProgram,
    PointerOutOfBounds,
    StepLimitExceeded,
)
from brainfoam.instruction import Instruction
from brainfoam.machine import VirtualMachine
from brainfoam.parser import parse
from brainfoam.program import Program
from brainfoam.runner import RunResult, run_once, run_program, run_source

__all__ = [
    "Bit",
    "BrainfoamError",
    "BufferedIO",
    "Byte",
    "ConfigError",
    "EofPolicy",
    "IODevice",
    "Instruction",
    "MalformedProgram",
    "Nybble",
    "PointerOutOfBounds",
    "Program",
    "RunResult",
    "Settings",
    "StepLimitExceeded",
    "StreamIO",
    "TapePolicy",
    "VirtualMachine",
    "load_settings",
    "parse",
    "run_once",
    "run_program",
    "run_source",
]
