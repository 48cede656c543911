"""Day 9: Encoding Error."""

from itertools import combinations
from typing import List, Optional, Sequence

from core.puzzle_input import integers

PREAMBLE = 25


def parse_input(puzzle_input: str) -> List[int]:
    return integers(puzzle_input)


def is_valid(window: Sequence[int], number: int) -> bool:
    """Some two different entries of the window sum to number."""
    return any(a + b == number for a, b in combinations(window, 2))


def first_invalid(numbers: Sequence[int], preamble: int = PREAMBLE) -> Optional[int]:
    for i in range(preamble, len(numbers)):
        if not is_valid(numbers[i - preamble:i], numbers[i]):
            return numbers[i]
    return None


def encryption_weakness(numbers: Sequence[int], preamble: int = PREAMBLE) -> Optional[int]:
    """
    Smallest plus largest of a contiguous run (at least two long) summing to
    the first invalid number.

    Uses a sliding window, so the numbers must be positive.
    """
    target = first_invalid(numbers, preamble)
    if target is None:
        return None

    start = 0
    total = 0
    for end, number in enumerate(numbers):
        total += number
        while total > target and start < end:
            total -= numbers[start]
            start += 1
        if total == target and end > start:
            span = numbers[start:end + 1]
            return min(span) + max(span)
    return None


def part_one(numbers: Sequence[int], preamble: int = PREAMBLE) -> Optional[int]:
    return first_invalid(numbers, preamble)


def part_two(numbers: Sequence[int], preamble: int = PREAMBLE) -> Optional[int]:
    return encryption_weakness(numbers, preamble)
