"""
Day 14: Docking Data.

A 36-bit mask is split into three integers: bits forced to 1, bits forced
to 0 and floating bits. Version 1 masks values; version 2 masks addresses,
with every floating bit taking both values.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple, Union

from core.puzzle_input import lines

BITS = 36

MASK_LINE = re.compile(r"^mask = ([01X]+)$")
MEM_LINE = re.compile(r"^mem\[([0-9]+)\] = ([0-9]+)$")


@dataclass(frozen=True)
class Bitmask:
    ones: int
    zeros: int
    floating: int

    @classmethod
    def parse(cls, text: str) -> 'Bitmask':
        if len(text) != BITS or set(text) - {'0', '1', 'X'}:
            raise ValueError(f"Bad bitmask: {text!r}")
        return cls(ones=int(text.replace('X', '0'), 2),
                   zeros=int(text.replace('X', '1'), 2) ^ ((1 << BITS) - 1),
                   floating=int(text.replace('1', '0').replace('X', '1'), 2))

    def apply(self, value: int) -> int:
        return (value | self.ones) & ~self.zeros

    def addresses(self, address: int) -> Iterator[int]:
        """Every address produced by the floating bits (1 bits set, 0 bits unchanged)."""
        base = (address | self.ones) & ~self.floating
        subset = self.floating
        while True:
            yield base | subset
            if subset == 0:
                return
            subset = (subset - 1) & self.floating


@dataclass(frozen=True)
class MemWrite:
    address: int
    value: int


Instruction = Union[Bitmask, MemWrite]


def parse_instruction(line: str) -> Instruction:
    mask = MASK_LINE.match(line.strip())
    if mask:
        return Bitmask.parse(mask.group(1))
    write = MEM_LINE.match(line.strip())
    if write:
        return MemWrite(address=int(write.group(1)), value=int(write.group(2)))
    raise ValueError(f"Bad instruction: {line!r}")


def parse_input(puzzle_input: str) -> List[Instruction]:
    return [parse_instruction(line) for line in lines(puzzle_input)]


def _masked_writes(program: Sequence[Instruction]) -> Iterator[Tuple[Bitmask, MemWrite]]:
    mask = None
    for instruction in program:
        if isinstance(instruction, Bitmask):
            mask = instruction
        elif mask is None:
            raise ValueError("Memory write before any mask")
        else:
            yield mask, instruction


def run_value_masks(program: Sequence[Instruction]) -> Dict[int, int]:
    memory = {}
    for mask, write in _masked_writes(program):
        memory[write.address] = mask.apply(write.value)
    return memory


def run_address_masks(program: Sequence[Instruction]) -> Dict[int, int]:
    memory = {}
    for mask, write in _masked_writes(program):
        for address in mask.addresses(write.address):
            memory[address] = write.value
    return memory


def part_one(program: Sequence[Instruction]) -> int:
    return sum(run_value_masks(program).values())


def part_two(program: Sequence[Instruction]) -> int:
    return sum(run_address_masks(program).values())
