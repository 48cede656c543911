"""Day 23: Crab Cups."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day23
from puzzles.day23 import CupCircle

SAMPLE = day23.parse_input("389125467\n")


def test_parse():
    circle = CupCircle(SAMPLE)
    assert circle.current == 3
    assert circle.highest == 9
    assert circle.labels_after_one() == "25467389"


def test_move():
    circle = CupCircle(SAMPLE)
    circle.play(1)
    assert circle.current == 2
    assert circle.labels_after_one() == "54673289"


def test_part_one():
    circle = CupCircle(SAMPLE)
    circle.play(10)
    assert circle.labels_after_one() == "92658374"
    assert day23.part_one(SAMPLE) == "67384529"


def test_expand():
    circle = CupCircle.expanded(SAMPLE)
    assert circle.highest == 1_000_000
    assert len(set(circle.after_one())) == 999_999


def test_bad_labels():
    with pytest.raises(ValueError, match="at least 5 cups"):
        CupCircle([1, 2, 3])
    with pytest.raises(ValueError, match="each exactly once"):
        CupCircle([1, 2, 3, 4, 4])
    with pytest.raises(ValueError, match="must be digits"):
        day23.parse_input("38912x467")


@pytest.mark.slow
def test_part_two():
    assert day23.part_two(SAMPLE) == 149245887792
