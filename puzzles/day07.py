"""
Day 7: Handy Haversacks.

Rules form a directed graph: colour -> {contained colour: count}.
Part one walks the graph backwards from the target colour; part two counts
the bags inside it, memoising each colour's total.
"""

import re
from collections import defaultdict, deque
from typing import Dict, Optional, Set, Tuple

from core.puzzle_input import lines

BagRules = Dict[str, Dict[str, int]]

BAG_RULE = re.compile(r"^([a-z ]+?) bags contain (.+)\.$")
BAG_CONTENT = re.compile(r"^([0-9]+) ([a-z ]+?) bags?$")
NO_CONTENTS = "no other bags"
TARGET = "shiny gold"


def parse_rule(line: str) -> Tuple[str, Dict[str, int]]:
    """'light red bags contain 1 bright white bag, 2 muted yellow bags.'"""
    match = BAG_RULE.match(line.strip())
    if match is None:
        raise ValueError(f"Didn't match bag rule: {line!r}")

    color, body = match.group(1), match.group(2)
    if body == NO_CONTENTS:
        return color, {}

    contents = {}
    for part in body.split(', '):
        content = BAG_CONTENT.match(part)
        if content is None:
            raise ValueError(f"Didn't match bag contents: {part!r}")
        contents[content.group(2)] = int(content.group(1))
    return color, contents


def parse_input(puzzle_input: str) -> BagRules:
    return dict(parse_rule(line) for line in lines(puzzle_input))


def containers_of(rules: BagRules, color: str) -> Set[str]:
    """Every colour that eventually holds at least one `color` bag."""
    parents = defaultdict(set)
    for outer, contents in rules.items():
        for inner in contents:
            parents[inner].add(outer)

    found = set()
    queue = deque([color])
    while queue:
        for outer in parents[queue.popleft()]:
            if outer not in found:
                found.add(outer)
                queue.append(outer)
    return found


def bags_inside(rules: BagRules, color: str, memo: Optional[Dict[str, int]] = None) -> int:
    """Total individual bags required inside one `color` bag."""
    if memo is None:
        memo = {}
    if color in memo:
        return memo[color]
    if color not in rules:
        raise ValueError(f"No rule for {color!r} bags")

    total = sum(count * (1 + bags_inside(rules, inner, memo))
                for inner, count in rules[color].items())
    memo[color] = total
    return total


def part_one(rules: BagRules) -> int:
    return len(containers_of(rules, TARGET))


def part_two(rules: BagRules) -> int:
    return bags_inside(rules, TARGET)
