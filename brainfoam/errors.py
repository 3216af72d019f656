"""Exceptions raised by the brainfoam interpreter."""

from typing import Optional


class BrainfoamError(Exception):
    """Base class for every error the interpreter raises."""


class MalformedProgram(BrainfoamError):
    """Raised when a program's brackets cannot be fully paired."""

    def __init__(self, message: str, *, position: Optional[int] = None, bracket: Optional[str] = None):
        self.position = position
        self.bracket = bracket
        prefix = ""
        if position is not None:
            prefix = f"position {position}: "
        super().__init__(prefix + message)


class PointerOutOfBounds(BrainfoamError):
    """Raised when the memory pointer would leave the tape."""

    def __init__(self, pointer: int, attempted: int, tape_length: int):
        self.pointer = pointer
        self.attempted = attempted
        self.tape_length = tape_length
        super().__init__(
            f"memory pointer moved from {pointer} to {attempted}, outside tape of {tape_length} cells"
        )


class StepLimitExceeded(BrainfoamError):
    """Raised when execution exceeds the configured step budget."""

    def __init__(self, steps: int):
        self.steps = steps
        super().__init__(f"program exceeded step limit of {steps}")


class ConfigError(BrainfoamError):
    pass
