"""Day 25: Combo Breaker."""

import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from puzzles import day25

CARD_KEY = 5764801
DOOR_KEY = 17807724


def test_parse_input():
    assert day25.parse_input(f"{CARD_KEY}\n{DOOR_KEY}\n") == (CARD_KEY, DOOR_KEY)
    with pytest.raises(ValueError, match="Expected 2 public keys"):
        day25.parse_input("1\n")


def test_transform():
    assert day25.transform(7, 8) == CARD_KEY
    assert day25.transform(DOOR_KEY, 8) == 14897079
    assert day25.transform(CARD_KEY, 11) == 14897079


def test_discover_loop_size():
    assert day25.discover_loop_size(CARD_KEY) == 8
    assert day25.discover_loop_size(DOOR_KEY) == 11


def test_part_one():
    assert day25.part_one((CARD_KEY, DOOR_KEY)) == 14897079
    assert day25.encryption_key(DOOR_KEY, CARD_KEY) == 14897079


def test_key_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        day25.discover_loop_size(0)
