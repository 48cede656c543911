"""Day 6: Custom Customs."""

from typing import List

from core.puzzle_input import lines, sections

Group = List[str]


def parse_input(puzzle_input: str) -> List[Group]:
    """Blank-line separated groups; one line of answered questions per person."""
    return [[line.strip() for line in group] for group in sections(lines(puzzle_input))]


def anyone_answered(group: Group) -> set:
    return set().union(*group)


def everyone_answered(group: Group) -> set:
    return set(group[0]).intersection(*group[1:])


def part_one(groups: List[Group]) -> int:
    return sum(len(anyone_answered(group)) for group in groups)


def part_two(groups: List[Group]) -> int:
    return sum(len(everyone_answered(group)) for group in groups)
