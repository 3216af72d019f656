"""Turn source text into an instruction list."""

from typing import List

from brainfoam.instruction import COMMANDS, Instruction


def strip_comments(source: str) -> str:
    """Keep only valid commands; everything else is a comment."""
    return ''.join(c for c in source if c in COMMANDS)


def parse(source: str) -> List[Instruction]:
    """Classify each character of source, dropping comments."""
    instructions = []
    for char in source:
        instruction = Instruction.from_char(char)
        if instruction is not Instruction.NO_OP:
            instructions.append(instruction)
    return instructions
