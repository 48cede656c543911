"""Day 8: Handheld Halting."""

import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day08
from puzzles.day08 import Instruction, RunResult

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def program():
    return day08.parse_input(load_puzzle_input(DATA_DIR / "day08_test_input.txt"))


def test_parse():
    assert Instruction.parse("acc -99") == Instruction(operation='acc', argument=-99)
    assert Instruction.parse("nop +0") == Instruction(operation='nop', argument=0)
    assert Instruction.parse("jmp +4") == Instruction(operation='jmp', argument=4)


def test_bad_instruction():
    with pytest.raises(ValueError, match="Unrecognized operation code"):
        Instruction.parse("mul +2")
    with pytest.raises(ValueError, match="Bad argument"):
        Instruction.parse("acc two")


def test_part_one(program):
    assert day08.run(program) == RunResult(accumulator=5, terminated=False)
    assert day08.part_one(program) == 5


def test_part_two(program):
    assert day08.repair(program) == RunResult(accumulator=8, terminated=True)
    assert day08.part_two(program) == 8


def test_unrepairable():
    assert day08.part_two(day08.parse_input("acc +1\njmp -1\njmp -2\n")) is None
