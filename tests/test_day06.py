"""Day 6: Custom Customs."""

import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day06

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def groups():
    return day06.parse_input(load_puzzle_input(DATA_DIR / "day06_test_input.txt"))


def test_parse(groups):
    assert len(groups) == 5
    assert groups[1] == ['a', 'b', 'c']


def test_part_one(groups):
    assert day06.part_one(groups) == 11


def test_part_two(groups):
    assert [len(day06.everyone_answered(group)) for group in groups] == [3, 0, 1, 1, 1]
    assert day06.part_two(groups) == 6
