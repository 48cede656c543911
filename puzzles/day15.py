"""
Day 15: Rambunctious Recitation.

`last_seen[n]` holds the turn n was last spoken (0 = never). A flat list is
used rather than a dict since every spoken number is below the turn count.
"""

from typing import List, Sequence

PART_ONE_TURN = 2020
PART_TWO_TURN = 30_000_000


def parse_input(puzzle_input: str) -> List[int]:
    numbers = []
    for entry in puzzle_input.strip().split(','):
        if not entry.strip().isdigit():
            raise ValueError(f"Bad starting number: {entry!r}")
        numbers.append(int(entry))
    return numbers


def number_spoken(starting: Sequence[int], turn: int) -> int:
    """The number spoken on the given 1-based turn."""
    if not starting:
        raise ValueError("Need at least one starting number")
    if turn <= len(starting):
        return starting[turn - 1]

    last_seen = [0] * max(turn, max(starting) + 1)
    for spoken_on, number in enumerate(starting[:-1], start=1):
        last_seen[number] = spoken_on

    current = starting[-1]
    for previous_turn in range(len(starting), turn):
        seen_on = last_seen[current]
        last_seen[current] = previous_turn
        current = previous_turn - seen_on if seen_on else 0
    return current


def part_one(starting: Sequence[int]) -> int:
    return number_spoken(starting, PART_ONE_TURN)


def part_two(starting: Sequence[int]) -> int:
    return number_spoken(starting, PART_TWO_TURN)
