"""
Day 19: Monster Messages.

Rules are either a literal character or alternatives of rule sequences.
Matching returns every possible leftover after a rule consumes a prefix of
the message, so recursive rules (after the part two patch) are handled by
exploring all leftovers rather than committing to one.
"""

import re
from dataclasses import dataclass, replace
from typing import Dict, List, Tuple, Union

from core.puzzle_input import lines, sections

RULE_LINE = re.compile(r"^([0-9]+): (.+)$")
LITERAL_CHAR = re.compile(r'^"([a-z])"$')

Rule = Union[str, Tuple[Tuple[int, ...], ...]]


def parse_rule(text: str) -> Rule:
    """'"a"' -> 'a'; '1 2 | 3' -> ((1, 2), (3,))"""
    literal = LITERAL_CHAR.match(text.strip())
    if literal:
        return literal.group(1)

    alternatives = []
    for alternative in text.split('|'):
        parts = alternative.split()
        if not parts or not all(part.isdigit() for part in parts):
            raise ValueError(f"Bad rule body: {text!r}")
        alternatives.append(tuple(int(part) for part in parts))
    return tuple(alternatives)


@dataclass
class Rules:
    rule_map: Dict[int, Rule]

    @classmethod
    def parse(cls, rule_lines: List[str]) -> 'Rules':
        rule_map = {}
        for line in rule_lines:
            match = RULE_LINE.match(line.strip())
            if match is None:
                raise ValueError(f"Bad rule formatting: {line!r}")
            rule_map[int(match.group(1))] = parse_rule(match.group(2))
        return cls(rule_map=rule_map)

    def patched(self) -> 'Rules':
        """Replace rules 8 and 11 with their looping versions."""
        rule_map = dict(self.rule_map)
        rule_map[8] = parse_rule("42 | 42 8")
        rule_map[11] = parse_rule("42 31 | 42 11 31")
        return replace(self, rule_map=rule_map)

    def _leftovers(self, message: str, rule_id: int) -> List[str]:
        rule = self.rule_map.get(rule_id)
        if rule is None:
            return []

        if isinstance(rule, str):
            return [message[1:]] if message.startswith(rule) else []

        leftovers = []
        for sequence in rule:
            partial = [message]
            for sub_rule in sequence:
                partial = [rest for remaining in partial
                           for rest in self._leftovers(remaining, sub_rule)]
                if not partial:
                    break
            leftovers.extend(partial)
        return leftovers

    def matches(self, message: str) -> bool:
        """True if rule 0 consumes the whole message."""
        return any(leftover == '' for leftover in self._leftovers(message, 0))


def parse_input(puzzle_input: str) -> Tuple[Rules, List[str]]:
    parts = sections(lines(puzzle_input))
    if len(parts) != 2:
        raise ValueError(f"Expected rules and messages sections, got {len(parts)} section(s)")
    rule_lines, messages = parts
    return Rules.parse(rule_lines), [message.strip() for message in messages]


def matching_messages(rules: Rules, messages: List[str]) -> List[str]:
    return [message for message in messages if rules.matches(message)]


def part_one(parsed: Tuple[Rules, List[str]]) -> int:
    rules, messages = parsed
    return len(matching_messages(rules, messages))


def part_two(parsed: Tuple[Rules, List[str]]) -> int:
    rules, messages = parsed
    return len(matching_messages(rules.patched(), messages))
