"""Day 10: Adapter Array."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day10
from puzzles.day10 import Differences

SMALL = [16, 10, 15, 5, 1, 11, 7, 19, 6, 12, 4]
LARGE = [28, 33, 18, 42, 31, 14, 46, 20, 48, 47, 24, 23, 49, 45, 19, 38, 39, 11, 1, 32, 25,
         35, 8, 17, 7, 9, 4, 2, 34, 10, 3]


def test_parse_input():
    assert day10.parse_input("16\n10\n15\n") == [16, 10, 15]


def test_differences():
    assert day10.get_differences(SMALL) == Differences(one_jolt=7, three_jolt=5)
    assert day10.get_differences(LARGE) == Differences(one_jolt=22, three_jolt=10)


def test_part_one():
    assert day10.part_one(SMALL) == 35
    assert day10.part_one(LARGE) == 220


def test_unsupported_difference():
    with pytest.raises(ValueError, match="Unsupported difference: 2"):
        day10.get_differences([1, 3])


def test_part_two():
    assert day10.part_two(SMALL) == 8
    assert day10.part_two(LARGE) == 19208
