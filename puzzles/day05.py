"""
Day 5: Binary Boarding.

A boarding pass is binary space partitioning: F/B halve the 128 rows and
L/R halve the 8 columns, so the code is a 10-bit number with F/L = 0 and
B/R = 1.
"""

import re
from dataclasses import dataclass
from typing import List, Sequence

from core.puzzle_input import lines

SEAT_CODE = re.compile(r"^[FB]{7}[LR]{3}$")
BITS = str.maketrans('FBLR', '0101')


@dataclass(frozen=True)
class BoardingPass:
    row: int
    column: int

    @classmethod
    def parse(cls, code: str) -> 'BoardingPass':
        code = code.strip()
        if not SEAT_CODE.match(code):
            raise ValueError(f"Bad boarding pass: {code!r}")
        return cls(row=int(code[:7].translate(BITS), 2),
                   column=int(code[7:].translate(BITS), 2))

    @property
    def seat_id(self) -> int:
        return self.row * 8 + self.column


def parse_input(puzzle_input: str) -> List[BoardingPass]:
    return [BoardingPass.parse(line) for line in lines(puzzle_input)]


def find_missing_seat(seat_ids: Sequence[int]) -> int:
    """
    The one id absent from an otherwise contiguous run.

    Raises:
        ValueError: If no two consecutive taken ids are two apart
    """
    ordered = sorted(seat_ids)
    for prev, seat_id in zip(ordered, ordered[1:]):
        if seat_id == prev + 2:
            return seat_id - 1
    raise ValueError("Couldn't find a missing seat ID")


def part_one(passes: Sequence[BoardingPass]) -> int:
    return max(boarding_pass.seat_id for boarding_pass in passes)


def part_two(passes: Sequence[BoardingPass]) -> int:
    return find_missing_seat([boarding_pass.seat_id for boarding_pass in passes])
