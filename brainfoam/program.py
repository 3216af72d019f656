"""
Programs and their jump tables.

A Program is an immutable instruction sequence. Bracket pairs are resolved
once, at construction, so the machine can take a loop branch in O(1).
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from brainfoam.errors import MalformedProgram
from brainfoam.instruction import Instruction
from brainfoam.parser import parse


def build_jump_table(instructions: List[Instruction]) -> Dict[int, int]:
    """Build a table mapping bracket positions for efficient jumping."""
    jump_table: Dict[int, int] = {}
    stack: List[int] = []

    for i, instruction in enumerate(instructions):
        if instruction is Instruction.JUMP_FORWARD:
            stack.append(i)
        elif instruction is Instruction.JUMP_BACKWARD:
            if not stack:
                raise MalformedProgram("unmatched ']'", position=i, bracket="]")
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        raise MalformedProgram("unmatched '['", position=stack[-1], bracket="[")

    return jump_table


class Program:
    """An ordered, read-only sequence of instructions plus its jump table."""

    def __init__(self, instructions: Iterable[Instruction] = ()):
        instructions = tuple(Instruction(i) for i in instructions)
        # Raises before anything is assigned, so a malformed program never exists
        jump_table = build_jump_table(list(instructions))
        self._instructions: Tuple[Instruction, ...] = instructions
        self._jump_table = MappingProxyType(jump_table)

    @classmethod
    def from_source(cls, source: str) -> 'Program':
        return cls(parse(source))

    def get_instruction(self, index: int) -> Optional[Instruction]:
        """Return the instruction at index, or None at or past the end."""
        if 0 <= index < len(self._instructions):
            return self._instructions[index]
        return None

    def jump_target(self, index: int) -> int:
        """Matching bracket position for the bracket at index."""
        try:
            return self._jump_table[index]
        except KeyError:
            raise KeyError(f"no bracket at position {index}") from None

    @property
    def jump_table(self) -> Mapping[int, int]:
        return self._jump_table

    def length(self) -> int:
        return len(self._instructions)

    def loop_count(self) -> int:
        return len(self._jump_table) // 2

    def to_source(self) -> str:
        return ''.join(i.symbol for i in self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self._instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __eq__(self, other):
        if not isinstance(other, Program):
            return NotImplemented
        return self._instructions == other._instructions

    def __hash__(self) -> int:
        return hash(self._instructions)

    def __repr__(self) -> str:
        return f"Program({self.to_source()!r})"
