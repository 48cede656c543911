"""Day 7: Handy Haversacks."""

import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day07

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def rules():
    return day07.parse_input(load_puzzle_input(DATA_DIR / "day07_test_input.txt"))


def test_parse_rule():
    assert day07.parse_rule("light red bags contain 1 bright white bag, 2 muted yellow bags.") == (
        "light red", {"bright white": 1, "muted yellow": 2})
    assert day07.parse_rule("faded blue bags contain no other bags.") == ("faded blue", {})


def test_bad_rule():
    with pytest.raises(ValueError, match="Didn't match bag contents"):
        day07.parse_rule("light red bags contain some bright white bags.")


def test_part_one(rules):
    assert day07.containers_of(rules, "shiny gold") == {
        "bright white", "muted yellow", "dark orange", "light red"}
    assert day07.part_one(rules) == 4


def test_part_two(rules):
    assert day07.bags_inside(rules, "faded blue") == 0
    assert day07.bags_inside(rules, "dark olive") == 7
    assert day07.part_two(rules) == 32


def test_part_two_deep_nesting():
    rules = day07.parse_input(load_puzzle_input(DATA_DIR / "day07_test_input_2.txt"))
    assert day07.part_two(rules) == 126


def test_unknown_colour():
    with pytest.raises(ValueError, match="No rule for 'shiny gold' bags"):
        day07.bags_inside({}, "shiny gold")
