"""Day 15: Rambunctious Recitation."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day15


def test_parse_input():
    assert day15.parse_input("0,3,6\n") == [0, 3, 6]
    with pytest.raises(ValueError, match="Bad starting number"):
        day15.parse_input("0,x,6")


def test_first_turns():
    spoken = [day15.number_spoken([0, 3, 6], turn) for turn in range(1, 11)]
    assert spoken == [0, 3, 6, 0, 3, 3, 1, 0, 4, 0]


@pytest.mark.parametrize("starting, expected", [
    ([0, 3, 6], 436),
    ([1, 3, 2], 1),
    ([2, 1, 3], 10),
    ([1, 2, 3], 27),
    ([2, 3, 1], 78),
    ([3, 2, 1], 438),
    ([3, 1, 2], 1836),
])
def test_part_one(starting, expected):
    assert day15.part_one(starting) == expected


@pytest.mark.slow
def test_part_two():
    assert day15.part_two([0, 3, 6]) == 175594
