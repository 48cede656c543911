"""Day 10: Adapter Array."""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from core.puzzle_input import integers


@dataclass(frozen=True)
class Differences:
    one_jolt: int = 0
    three_jolt: int = 0


def parse_input(puzzle_input: str) -> List[int]:
    return integers(puzzle_input)


def _chain(adapters: Sequence[int]) -> List[int]:
    """Outlet, sorted adapters, device."""
    ordered = sorted(adapters)
    device = (ordered[-1] if ordered else 0) + 3
    return [0] + ordered + [device]


def get_differences(adapters: Sequence[int]) -> Differences:
    """
    Count 1-jolt and 3-jolt steps when every adapter is used.

    Raises:
        ValueError: If two consecutive ratings differ by anything else
    """
    counts = {1: 0, 3: 0}
    chain = _chain(adapters)
    for prev, rating in zip(chain, chain[1:]):
        difference = rating - prev
        if difference not in counts:
            raise ValueError(f"Unsupported difference: {difference} ({prev} -> {rating})")
        counts[difference] += 1
    return Differences(one_jolt=counts[1], three_jolt=counts[3])


def count_arrangements(adapters: Sequence[int]) -> int:
    """Distinct adapter chains from the outlet to the device."""
    chain = _chain(adapters)
    ways: Dict[int, int] = {0: 1}
    for rating in chain[1:]:
        ways[rating] = sum(ways.get(rating - step, 0) for step in (1, 2, 3))
    return ways[chain[-1]]


def part_one(adapters: Sequence[int]) -> int:
    differences = get_differences(adapters)
    return differences.one_jolt * differences.three_jolt


def part_two(adapters: Sequence[int]) -> int:
    return count_arrangements(adapters)
