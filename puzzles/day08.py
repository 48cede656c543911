"""
Day 8: Handheld Halting.

A program terminates when the instruction pointer lands just past the last
instruction. Executing any instruction twice means an infinite loop.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from core.puzzle_input import lines

OPERATIONS = ('nop', 'acc', 'jmp')
SWAPS = {'nop': 'jmp', 'jmp': 'nop'}


@dataclass(frozen=True)
class Instruction:
    operation: str
    argument: int

    @classmethod
    def parse(cls, line: str) -> 'Instruction':
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Expected an operation and an argument: {line!r}")
        operation, argument = parts
        if operation not in OPERATIONS:
            raise ValueError(f"Unrecognized operation code: {operation!r}")
        try:
            return cls(operation=operation, argument=int(argument))
        except ValueError:
            raise ValueError(f"Bad argument: {argument!r}") from None


@dataclass(frozen=True)
class RunResult:
    accumulator: int
    terminated: bool


def parse_input(puzzle_input: str) -> List[Instruction]:
    return [Instruction.parse(line) for line in lines(puzzle_input)]


def run(program: Sequence[Instruction]) -> RunResult:
    """Execute until termination, a repeated instruction, or a jump outside the program."""
    accumulator = 0
    pointer = 0
    executed = set()

    while 0 <= pointer < len(program) and pointer not in executed:
        executed.add(pointer)
        instruction = program[pointer]
        if instruction.operation == 'acc':
            accumulator += instruction.argument
            pointer += 1
        elif instruction.operation == 'jmp':
            pointer += instruction.argument
        else:
            pointer += 1

    return RunResult(accumulator=accumulator, terminated=pointer == len(program))


def repair(program: Sequence[Instruction]) -> Optional[RunResult]:
    """Swap one jmp/nop so the program terminates."""
    for i, instruction in enumerate(program):
        if instruction.operation not in SWAPS:
            continue
        patched = list(program)
        patched[i] = replace(instruction, operation=SWAPS[instruction.operation])
        result = run(patched)
        if result.terminated:
            return result
    return None


def part_one(program: Sequence[Instruction]) -> int:
    """Accumulator just before any instruction runs a second time."""
    return run(program).accumulator


def part_two(program: Sequence[Instruction]) -> Optional[int]:
    result = repair(program)
    return None if result is None else result.accumulator
