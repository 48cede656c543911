"""
Day 18: Operation Order.

Expressions are evaluated by precedence climbing over a precedence table:
part one gives + and * equal precedence (plain left to right), part two
binds + tighter than *.
"""

import re
from typing import Dict, List, Optional, Sequence

from core.puzzle_input import lines

TOKEN = re.compile(r"[0-9]+|\S")
OPERATORS = {
    '+': lambda a, b: a + b,
    '*': lambda a, b: a * b,
}

LEFT_TO_RIGHT = {'+': 1, '*': 1}
ADDITION_FIRST = {'+': 2, '*': 1}


def tokenize(expression: str) -> List[str]:
    tokens = TOKEN.findall(expression)
    for token in tokens:
        if not token.isdigit() and token not in OPERATORS and token not in '()':
            raise ValueError(f"Unsupported character {token!r} in {expression!r}")
    return tokens


class _Parser:
    def __init__(self, tokens: Sequence[str], precedence: Dict[str, int]):
        self.tokens = tokens
        self.position = 0
        self.precedence = precedence

    def _peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def _take(self) -> str:
        token = self._peek()
        if token is None:
            raise ValueError("Unexpected end of expression")
        self.position += 1
        return token

    def operand(self) -> int:
        token = self._take()
        if token == '(':
            value = self.expression()
            if self._take() != ')':
                raise ValueError("Expected ')'")
            return value
        if token.isdigit():
            return int(token)
        raise ValueError(f"Expected a number, got {token!r}")

    def expression(self, min_precedence: int = 1) -> int:
        value = self.operand()
        while True:
            operator = self._peek()
            if operator not in self.precedence or self.precedence[operator] < min_precedence:
                return value
            self.position += 1
            right = self.expression(self.precedence[operator] + 1)
            value = OPERATORS[operator](value, right)


def evaluate(expression: str, precedence: Dict[str, int] = LEFT_TO_RIGHT) -> int:
    parser = _Parser(tokenize(expression), precedence)
    value = parser.expression()
    if parser.position != len(parser.tokens):
        raise ValueError(f"Unexpected {parser.tokens[parser.position]!r} in {expression!r}")
    return value


def parse_input(puzzle_input: str) -> List[str]:
    return lines(puzzle_input)


def part_one(expressions: Sequence[str]) -> int:
    return sum(evaluate(expression, LEFT_TO_RIGHT) for expression in expressions)


def part_two(expressions: Sequence[str]) -> int:
    return sum(evaluate(expression, ADDITION_FIRST) for expression in expressions)
