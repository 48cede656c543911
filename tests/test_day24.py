"""Day 24: Lobby Layout."""

import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day24

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def paths():
    return day24.parse_input(load_puzzle_input(DATA_DIR / "day24_test_input.txt"))


def test_parse_path():
    assert day24.parse_path("esenee") == ['e', 'se', 'ne', 'e']
    with pytest.raises(ValueError, match="Bad tile path"):
        day24.parse_path("esnw")


def test_locate():
    assert day24.locate(day24.parse_path("esew")) == day24.STEPS['se']
    assert day24.locate(day24.parse_path("nwwswee")) == (0, 0)


def test_part_one(paths):
    assert len(paths) == 20
    assert day24.part_one(paths) == 10


@pytest.mark.parametrize("days, expected", [(1, 15), (2, 12), (10, 37), (100, 2208)])
def test_part_two(paths, days, expected):
    assert day24.part_two(paths, days) == expected


def test_lone_tile_turns_white():
    assert day24.living_art({(0, 0)}, days=1) == 0
