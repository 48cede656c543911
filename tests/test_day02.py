"""Day 2: Password Philosophy."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day02
from puzzles.day02 import PasswordEntry

SAMPLE = "1-3 a: abcde\n1-3 b: cdefg\n2-9 c: ccccccccc\n"


def test_parse_line():
    assert PasswordEntry.parse("1-3 a: abcde") == PasswordEntry(
        low=1, high=3, letter='a', password='abcde')


def test_bad_line():
    with pytest.raises(ValueError, match="Can't parse line"):
        PasswordEntry.parse("1-3 a abcde")


def test_count_policy():
    assert PasswordEntry.parse("1-3 a: abcde").is_valid_count()
    assert not PasswordEntry.parse("1-3 b: cdefg").is_valid_count()


def test_position_policy():
    assert PasswordEntry.parse("1-3 a: abcde").is_valid_position()
    assert not PasswordEntry.parse("2-9 c: ccccccccc").is_valid_position()


def test_part_one():
    assert day02.part_one(day02.parse_input(SAMPLE)) == 2


def test_part_two():
    assert day02.part_two(day02.parse_input(SAMPLE)) == 1
