"""The instruction set: eight opcodes plus a no-op."""

from enum import Enum


class Instruction(str, Enum):
    INCREMENT_POINTER = ">"
    DECREMENT_POINTER = "<"
    INCREMENT_VALUE = "+"
    DECREMENT_VALUE = "-"
    OUTPUT_VALUE = "."
    INPUT_VALUE = ","
    JUMP_FORWARD = "["
    JUMP_BACKWARD = "]"
    NO_OP = ""

    @classmethod
    def from_char(cls, char: str) -> 'Instruction':
        """Classify one source character; anything unrecognised is a NO_OP."""
        if len(char) == 1 and char in COMMANDS:
            return cls(char)
        return cls.NO_OP

    @property
    def symbol(self) -> str:
        return self.value

    def is_jump(self) -> bool:
        return self in (Instruction.JUMP_FORWARD, Instruction.JUMP_BACKWARD)


# Valid source characters, in the usual listing order
COMMANDS = "><+-.,[]"
