"""Day 1: Report Repair."""

from typing import List, Optional, Sequence, Tuple

from core.puzzle_input import integers

TARGET = 2020


def parse_input(puzzle_input: str) -> List[int]:
    return integers(puzzle_input)


def find_pair(entries: Sequence[int], target: int = TARGET) -> Optional[Tuple[int, int]]:
    """First two entries (at different positions) that sum to target."""
    seen = set()
    for entry in entries:
        if target - entry in seen:
            return target - entry, entry
        seen.add(entry)
    return None


def find_triple(entries: Sequence[int], target: int = TARGET) -> Optional[Tuple[int, int, int]]:
    for i, entry in enumerate(entries):
        pair = find_pair(entries[i + 1:], target - entry)
        if pair is not None:
            return (entry,) + pair
    return None


def part_one(entries: Sequence[int]) -> Optional[int]:
    pair = find_pair(entries)
    return None if pair is None else pair[0] * pair[1]


def part_two(entries: Sequence[int]) -> Optional[int]:
    triple = find_triple(entries)
    if triple is None:
        return None
    a, b, c = triple
    return a * b * c
