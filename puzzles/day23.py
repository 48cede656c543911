"""
Day 23: Crab Cups.

The circle is a successor list: `next_cup[label]` is the label clockwise of
`label` (index 0 is unused). A move is a constant number of list updates,
which keeps ten million moves over a million cups feasible.
"""

from typing import Iterator, List, Sequence

PART_ONE_MOVES = 100
PART_TWO_CUPS = 1_000_000
PART_TWO_MOVES = 10_000_000


def parse_input(puzzle_input: str) -> List[int]:
    text = puzzle_input.strip()
    if not text.isdigit():
        raise ValueError(f"Cup labels must be digits: {text!r}")
    return [int(char) for char in text]


class CupCircle:
    def __init__(self, labels: Sequence[int]):
        if len(labels) < 5:
            raise ValueError("Need at least 5 cups")
        if sorted(labels) != list(range(1, len(labels) + 1)):
            raise ValueError("Cup labels must be 1..n, each exactly once")

        self.highest = len(labels)
        self.current = labels[0]
        self.next_cup = [0] * (len(labels) + 1)
        for label, following in zip(labels, list(labels[1:]) + [labels[0]]):
            self.next_cup[label] = following

    @classmethod
    def expanded(cls, labels: Sequence[int], total: int = PART_TWO_CUPS) -> 'CupCircle':
        """The given labels followed by every label up to total."""
        return cls(list(labels) + list(range(len(labels) + 1, total + 1)))

    def play(self, moves: int):
        next_cup = self.next_cup
        highest = self.highest
        current = self.current

        for _ in range(moves):
            first = next_cup[current]
            second = next_cup[first]
            third = next_cup[second]
            next_cup[current] = next_cup[third]

            destination = current - 1 or highest
            while destination == first or destination == second or destination == third:
                destination = destination - 1 or highest

            next_cup[third] = next_cup[destination]
            next_cup[destination] = first
            current = next_cup[current]

        self.current = current

    def after_one(self) -> Iterator[int]:
        """Labels clockwise from cup 1, excluding it."""
        label = self.next_cup[1]
        while label != 1:
            yield label
            label = self.next_cup[label]

    def labels_after_one(self) -> str:
        return ''.join(str(label) for label in self.after_one())


def part_one(labels: Sequence[int], moves: int = PART_ONE_MOVES) -> str:
    circle = CupCircle(labels)
    circle.play(moves)
    return circle.labels_after_one()


def part_two(labels: Sequence[int], moves: int = PART_TWO_MOVES) -> int:
    """Product of the two cups clockwise of cup 1."""
    circle = CupCircle.expanded(labels)
    circle.play(moves)
    first = circle.next_cup[1]
    return first * circle.next_cup[first]
