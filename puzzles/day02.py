"""Day 2: Password Philosophy."""

import re
from dataclasses import dataclass
from typing import List, Sequence

from core.puzzle_input import lines

PASSWORD_LINE = re.compile(r"^([0-9]+)-([0-9]+) ([a-z]): ([a-z]+)$")


@dataclass(frozen=True)
class PasswordEntry:
    low: int
    high: int
    letter: str
    password: str

    @classmethod
    def parse(cls, line: str) -> 'PasswordEntry':
        match = PASSWORD_LINE.match(line.strip())
        if match is None:
            raise ValueError(f"Can't parse line: {line!r}")
        return cls(low=int(match.group(1)), high=int(match.group(2)),
                   letter=match.group(3), password=match.group(4))

    def is_valid_count(self) -> bool:
        """The letter appears between low and high times."""
        return self.low <= self.password.count(self.letter) <= self.high

    def is_valid_position(self) -> bool:
        """Exactly one of the 1-based positions low and high holds the letter."""
        first = self.password[self.low - 1:self.low] == self.letter
        second = self.password[self.high - 1:self.high] == self.letter
        return first != second


def parse_input(puzzle_input: str) -> List[PasswordEntry]:
    return [PasswordEntry.parse(line) for line in lines(puzzle_input)]


def part_one(entries: Sequence[PasswordEntry]) -> int:
    return sum(1 for entry in entries if entry.is_valid_count())


def part_two(entries: Sequence[PasswordEntry]) -> int:
    return sum(1 for entry in entries if entry.is_valid_position())
