"""Day 17: Conway Cubes."""

import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day17

SAMPLE = ".#.\n..#\n###\n"


def test_parse():
    slice_2d = day17.parse_input(SAMPLE)
    assert slice_2d.shape == (3, 3)
    assert int(slice_2d.sum()) == 5


def test_initial_state_dimensions():
    slice_2d = day17.parse_input(SAMPLE)
    assert day17.initial_state(slice_2d, 3).shape == (1, 3, 3)
    assert day17.initial_state(slice_2d, 4).shape == (1, 1, 3, 3)


def test_first_cycle():
    active = day17.cycle(day17.initial_state(day17.parse_input(SAMPLE), 3))
    assert active.shape == (3, 5, 5)
    assert int(np.count_nonzero(active)) == 11


def test_part_one():
    assert day17.part_one(day17.parse_input(SAMPLE)) == 112


def test_part_two():
    assert day17.part_two(day17.parse_input(SAMPLE)) == 848


def test_ragged_slice_rejected():
    with pytest.raises(ValueError, match="Row 2 has 2 cells, expected 3"):
        day17.parse_input(".#.\n.#\n###\n")


def test_bad_character_rejected():
    with pytest.raises(ValueError, match="unrecognized characters"):
        day17.parse_input(".#.\n.x.\n###\n")
