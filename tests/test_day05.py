"""Day 5: Binary Boarding."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day05
from puzzles.day05 import BoardingPass


def test_parse():
    boarding_pass = BoardingPass.parse("FBFBBFFRLR")
    assert (boarding_pass.row, boarding_pass.column) == (44, 5)
    assert boarding_pass.seat_id == 357


def test_cases():
    assert BoardingPass.parse("BFFFBBFRRR") == BoardingPass(row=70, column=7)
    assert BoardingPass.parse("FFFBBBFRRR") == BoardingPass(row=14, column=7)
    assert BoardingPass.parse("BBFFBBFRLL") == BoardingPass(row=102, column=4)
    assert BoardingPass.parse("BBFFBBFRLL").seat_id == 820


def test_bad_code():
    with pytest.raises(ValueError, match="Bad boarding pass"):
        BoardingPass.parse("FBFBBFFRLX")


def test_part_one():
    passes = day05.parse_input("BFFFBBFRRR\nFFFBBBFRRR\nBBFFBBFRLL\n")
    assert day05.part_one(passes) == 820


def test_find_missing_seat():
    assert day05.find_missing_seat([7, 3, 4, 6]) == 5
    with pytest.raises(ValueError, match="missing seat"):
        day05.find_missing_seat([3, 4, 5])


def test_part_two():
    passes = [BoardingPass(row=1, column=column) for column in range(8) if column != 3]
    assert day05.part_two(passes) == 11
