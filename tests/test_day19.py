"""Day 19: Monster Messages."""

import sys
import os
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import load_puzzle_input
from puzzles import day19

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def first_input():
    return day19.parse_input(load_puzzle_input(DATA_DIR / "day19_test_input.txt"))


@pytest.fixture
def second_input():
    return day19.parse_input(load_puzzle_input(DATA_DIR / "day19_test_input_2.txt"))


def test_parse_rule():
    assert day19.parse_rule('"a"') == "a"
    assert day19.parse_rule("2 3 | 3 2") == ((2, 3), (3, 2))
    assert day19.parse_rule("1 | 14") == ((1,), (14,))
    with pytest.raises(ValueError, match="Bad rule body"):
        day19.parse_rule("2 x")


def test_part_one_sample(first_input):
    rules, messages = first_input
    assert day19.matching_messages(rules, messages) == ["ababbb", "abbbab"]
    assert day19.part_one(first_input) == 2


def test_unpatched_rules(second_input):
    rules, messages = second_input
    assert day19.matching_messages(rules, messages) == [
        "bbabbbbaabaabba", "ababaaaaaabaaab", "ababaaaaabbbaba"]
    assert day19.part_one(second_input) == 3


def test_patched_rule_loops(second_input):
    rules, _ = second_input
    patched = rules.patched()
    assert patched.matches("babbbbaabbbbbabbbbbbaabaaabaaa")
    assert not rules.matches("babbbbaabbbbbabbbbbbaabaaabaaa")
    assert rules.rule_map[8] == ((42,),)


def test_part_two_sample(second_input):
    rules, messages = second_input
    assert day19.matching_messages(rules.patched(), messages) == [
        "bbabbbbaabaabba",
        "babbbbaabbbbbabbbbbbaabaaabaaa",
        "aaabbbbbbaaaabaababaabababbabaaabbababababaaa",
        "bbbbbbbaaaabbbbaaabbabaaa",
        "bbbababbbbaaaaaaaabbababaaababaabab",
        "ababaaaaaabaaab",
        "ababaaaaabbbaba",
        "baabbaaaabbaaaababbaababb",
        "abbbbabbbbaaaababbbbbbaaaababb",
        "aaaaabbaabaaaaababaa",
        "aaaabbaabbaaaaaaabbbabbbaaabbaabaaa",
        "aabbbbbaabbbaaaaaabbbbbababaaaaabbaaabba",
    ]
    assert day19.part_two(second_input) == 12


def test_missing_messages_section():
    with pytest.raises(ValueError, match="Expected rules and messages"):
        day19.parse_input('0: "a"\n')


def test_bad_rule_line():
    with pytest.raises(ValueError, match="Bad rule formatting"):
        day19.parse_input("zero: 1\n\na\n")


def test_patched_copies_rule_map(second_input):
    rules, _ = second_input
    patched = rules.patched()
    assert patched is not rules
    assert patched.rule_map is not rules.rule_map
    assert patched.rule_map[11] == ((42, 31), (42, 11, 31))
    assert rules.rule_map[11] == ((42, 31),)
