"""
Day 12: Rain Risk.

Both parts are the same walk with a direction vector: in part one the
vector is the ship's heading (1, 0) and cardinal moves shift the ship; in
part two it is the waypoint (10, 1) and cardinal moves shift the waypoint.
Coordinates are (east, north).
"""

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from core.puzzle_input import lines

INSTRUCTION = re.compile(r"^([NSEWLRF])([0-9]+)$")

CARDINALS = {
    'N': (0, 1),
    'S': (0, -1),
    'E': (1, 0),
    'W': (-1, 0),
}

Vector = Tuple[int, int]


@dataclass(frozen=True)
class Instruction:
    action: str
    value: int

    @classmethod
    def parse(cls, line: str) -> 'Instruction':
        match = INSTRUCTION.match(line.strip())
        if match is None:
            raise ValueError(f"Didn't match instruction: {line!r}")
        action, value = match.group(1), int(match.group(2))
        if action in 'LR' and value % 90:
            raise ValueError(f"Turns must be multiples of 90 degrees: {line!r}")
        return cls(action=action, value=value)


def rotate(vector: Vector, quarter_turns: int) -> Vector:
    """Rotate clockwise by 90 degrees `quarter_turns` times (negative = counter-clockwise)."""
    x, y = vector
    for _ in range(quarter_turns % 4):
        x, y = y, -x
    return x, y


def navigate(instructions: Sequence[Instruction], vector: Vector, move_vector: bool) -> Vector:
    """Final ship position."""
    ship_x, ship_y = 0, 0
    vx, vy = vector

    for instruction in instructions:
        action, value = instruction.action, instruction.value
        if action in CARDINALS:
            dx, dy = CARDINALS[action]
            if move_vector:
                vx, vy = vx + dx * value, vy + dy * value
            else:
                ship_x, ship_y = ship_x + dx * value, ship_y + dy * value
        elif action == 'R':
            vx, vy = rotate((vx, vy), value // 90)
        elif action == 'L':
            vx, vy = rotate((vx, vy), -(value // 90))
        else:
            ship_x, ship_y = ship_x + vx * value, ship_y + vy * value

    return ship_x, ship_y


def manhattan(position: Vector) -> int:
    return abs(position[0]) + abs(position[1])


def parse_input(puzzle_input: str) -> List[Instruction]:
    return [Instruction.parse(line) for line in lines(puzzle_input)]


def part_one(instructions: Sequence[Instruction]) -> int:
    return manhattan(navigate(instructions, (1, 0), move_vector=False))


def part_two(instructions: Sequence[Instruction]) -> int:
    return manhattan(navigate(instructions, (10, 1), move_vector=True))
