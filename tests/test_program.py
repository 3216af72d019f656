from __future__ import annotations

import pytest

from brainfoam.errors import MalformedProgram
from brainfoam.instruction import Instruction
from brainfoam.parser import parse, strip_comments
from brainfoam.program import Program


def test_parser_drops_comments():
    assert parse("a+b-c") == [Instruction.INCREMENT_VALUE, Instruction.DECREMENT_VALUE]
    assert strip_comments("hello [world]. ") == "[]."


def test_from_char_classifies_every_command():
    assert [Instruction.from_char(c) for c in "><+-.,[]"] == [
        Instruction.INCREMENT_POINTER,
        Instruction.DECREMENT_POINTER,
        Instruction.INCREMENT_VALUE,
        Instruction.DECREMENT_VALUE,
        Instruction.OUTPUT_VALUE,
        Instruction.INPUT_VALUE,
        Instruction.JUMP_FORWARD,
        Instruction.JUMP_BACKWARD,
    ]
    assert Instruction.from_char("x") is Instruction.NO_OP
    assert Instruction.from_char("") is Instruction.NO_OP
    assert Instruction.from_char("><") is Instruction.NO_OP


def test_jump_table_nested():
    program = Program.from_source("[[]]")
    assert dict(program.jump_table) == {0: 3, 3: 0, 1: 2, 2: 1}


def test_jump_table_simple():
    program = Program.from_source("[]")
    assert program.jump_target(0) == 1
    assert program.jump_target(1) == 0


def test_jump_table_with_gaps():
    program = Program.from_source("+[>[-]<-]")
    assert program.jump_target(1) == 8
    assert program.jump_target(3) == 5
    assert program.loop_count() == 2


@pytest.mark.parametrize("source,position,bracket", [
    ("[", 0, "["),
    ("]", 0, "]"),
    ("+[[]", 1, "["),
    ("[]]", 2, "]"),
])
def test_malformed_programs_are_rejected(source, position, bracket):
    with pytest.raises(MalformedProgram) as exc:
        Program.from_source(source)
    assert exc.value.position == position
    assert exc.value.bracket == bracket


def test_deep_nesting_does_not_recurse():
    depth = 50000
    program = Program.from_source("[" * depth + "]" * depth)
    assert program.jump_target(0) == 2 * depth - 1
    assert program.jump_target(depth - 1) == depth


def test_get_instruction_past_end_is_none():
    program = Program.from_source("+-")
    assert program.get_instruction(0) is Instruction.INCREMENT_VALUE
    assert program.get_instruction(2) is None
    assert program.get_instruction(-1) is None
    assert program.length() == 2
    assert len(program) == 2


def test_program_is_read_only():
    program = Program.from_source("[]")
    with pytest.raises(TypeError):
        program.jump_table[0] = 5


def test_program_accepts_symbols_and_round_trips_source():
    program = Program([">", Instruction.INCREMENT_VALUE, "."])
    assert program.to_source() == ">+."
    assert program == Program.from_source("> + .")
    assert list(program)[0] is Instruction.INCREMENT_POINTER


def test_jump_target_on_non_bracket():
    with pytest.raises(KeyError):
        Program.from_source("+").jump_target(0)


def test_is_jump():
    assert [i.is_jump() for i in Program.from_source("[+]")] == [True, False, True]
