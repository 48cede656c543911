"""Day 22: Crab Combat."""

import sys
import os
from collections import deque
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day22
from puzzles.day22 import Decks

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def decks():
    return day22.parse_input(load_puzzle_input(DATA_DIR / "day22_test_input.txt"))


def test_parse(decks):
    assert decks == Decks(player1=(9, 2, 6, 3, 1), player2=(5, 8, 4, 7, 10))


def test_round(decks):
    deck1, deck2 = deque(decks.player1), deque(decks.player2)
    assert day22.play_round(deck1, deck2) == 1
    assert list(deck1) == [2, 6, 3, 1, 9, 5]
    assert list(deck2) == [8, 4, 7, 10]


def test_part_one(decks):
    winner, deck = day22.play_combat(decks)
    assert winner == 2
    assert list(deck) == [3, 2, 10, 6, 8, 5, 9, 4, 7, 1]
    assert day22.part_one(decks) == 306


def test_part_two(decks):
    winner, deck = day22.play_recursive_combat(deque(decks.player1), deque(decks.player2))
    assert winner == 2
    assert list(deck) == [7, 5, 6, 2, 4, 1, 10, 8, 9, 3]
    assert day22.part_two(decks) == 291


def test_repeated_state_ends_game():
    winner, _ = day22.play_recursive_combat(deque([43, 19]), deque([2, 29, 14]))
    assert winner == 1


def test_missing_player():
    with pytest.raises(ValueError, match="Expected 'Player 2:'"):
        day22.parse_input("Player 1:\n1\n\nPlayer 3:\n2\n")
