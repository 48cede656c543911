"""
Day 13: Shuttle Search.

Part two needs the earliest t where bus i departs at t + i. Each bus is
sieved in turn, stepping by the lcm of the buses already aligned.
"""

from dataclasses import dataclass
from math import gcd
from typing import Optional, Tuple

from core.puzzle_input import lines


@dataclass(frozen=True)
class Schedule:
    timestamp: int
    buses: Tuple[Optional[int], ...]


def parse_buses(text: str) -> Tuple[Optional[int], ...]:
    """'7,13,x,x,59' -> (7, 13, None, None, 59)"""
    buses = []
    for entry in text.strip().split(','):
        if entry == 'x':
            buses.append(None)
        elif entry.isdigit() and int(entry) > 0:
            buses.append(int(entry))
        else:
            raise ValueError(f"Bad bus id: {entry!r}")
    return tuple(buses)


def parse_input(puzzle_input: str) -> Schedule:
    input_lines = lines(puzzle_input)
    if len(input_lines) != 2:
        raise ValueError("Input must be exactly two lines long")
    try:
        timestamp = int(input_lines[0])
    except ValueError:
        raise ValueError(f"Bad timestamp: {input_lines[0]!r}") from None
    return Schedule(timestamp=timestamp, buses=parse_buses(input_lines[1]))


def earliest_bus(schedule: Schedule) -> Tuple[int, int]:
    """(bus id, minutes to wait) for the first bus leaving at or after the timestamp."""
    waits = [(-schedule.timestamp % bus, bus) for bus in schedule.buses if bus is not None]
    if not waits:
        raise ValueError("Schedule has no buses")
    wait, bus = min(waits)
    return bus, wait


def earliest_aligned_timestamp(buses: Tuple[Optional[int], ...]) -> int:
    timestamp = 0
    step = 1
    for offset, bus in enumerate(buses):
        if bus is None:
            continue
        while (timestamp + offset) % bus:
            timestamp += step
        step = step * bus // gcd(step, bus)
    return timestamp


def part_one(schedule: Schedule) -> int:
    bus, wait = earliest_bus(schedule)
    return bus * wait


def part_two(schedule: Schedule) -> int:
    return earliest_aligned_timestamp(schedule.buses)
