"""
Day 16: Ticket Translation.

Part one sums the values no rule accepts. Part two drops those tickets,
narrows each column to the fields whose ranges accept every value in it,
then resolves the columns by elimination.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from core.puzzle_input import lines, sections

RULE_LINE = re.compile(r"^([a-z ]+): ([0-9]+)-([0-9]+) or ([0-9]+)-([0-9]+)$")
YOUR_TICKET = "your ticket:"
NEARBY_TICKETS = "nearby tickets:"

Ticket = List[int]


@dataclass(frozen=True)
class FieldRule:
    name: str
    ranges: Tuple[Tuple[int, int], ...]

    @classmethod
    def parse(cls, line: str) -> 'FieldRule':
        match = RULE_LINE.match(line.strip())
        if match is None:
            raise ValueError(f"Rule doesn't match format: {line!r}")
        low1, high1, low2, high2 = (int(group) for group in match.groups()[1:])
        return cls(name=match.group(1), ranges=((low1, high1), (low2, high2)))

    def accepts(self, value: int) -> bool:
        """Ranges are inclusive at both ends."""
        return any(low <= value <= high for low, high in self.ranges)


@dataclass
class TicketNotes:
    rules: List[FieldRule]
    your_ticket: Ticket
    nearby_tickets: List[Ticket]


def parse_ticket(line: str) -> Ticket:
    try:
        return [int(value) for value in line.split(',')]
    except ValueError:
        raise ValueError(f"Bad ticket: {line!r}") from None


def parse_input(puzzle_input: str) -> TicketNotes:
    parts = sections(lines(puzzle_input))
    if len(parts) != 3:
        raise ValueError(f"Expected rules, your ticket and nearby tickets sections, got {len(parts)}")
    rule_lines, yours, nearby = parts

    if len(yours) != 2 or yours[0].strip() != YOUR_TICKET:
        raise ValueError("Your ticket section improperly formatted")
    if nearby[0].strip() != NEARBY_TICKETS:
        raise ValueError("Nearby tickets section improperly formatted")

    return TicketNotes(rules=[FieldRule.parse(line) for line in rule_lines],
                       your_ticket=parse_ticket(yours[1]),
                       nearby_tickets=[parse_ticket(line) for line in nearby[1:]])


def invalid_values(notes: TicketNotes, ticket: Ticket) -> List[int]:
    return [value for value in ticket if not any(rule.accepts(value) for rule in notes.rules)]


def scanning_error_rate(notes: TicketNotes) -> int:
    return sum(sum(invalid_values(notes, ticket)) for ticket in notes.nearby_tickets)


def field_mapping(notes: TicketNotes) -> List[str]:
    """
    Field name for every ticket column.

    Raises:
        ValueError: If the columns cannot be resolved unambiguously
    """
    tickets = [ticket for ticket in notes.nearby_tickets if not invalid_values(notes, ticket)]
    tickets.append(notes.your_ticket)

    columns = len(notes.your_ticket)
    if len(notes.rules) != columns or any(len(ticket) != columns for ticket in tickets):
        raise ValueError(f"Tickets must have one value per rule ({len(notes.rules)})")

    candidates: Dict[int, Set[str]] = {
        column: {rule.name for rule in notes.rules
                 if all(rule.accepts(ticket[column]) for ticket in tickets)}
        for column in range(columns)
    }

    resolved: Dict[int, str] = {}
    while candidates:
        column = next((c for c, names in candidates.items() if len(names) == 1), None)
        if column is None:
            raise ValueError(f"Could not resolve ticket fields: {candidates}")
        name = candidates.pop(column).pop()
        resolved[column] = name
        for names in candidates.values():
            names.discard(name)

    return [resolved[column] for column in range(columns)]


def translate(notes: TicketNotes, ticket: Ticket) -> Dict[str, int]:
    return dict(zip(field_mapping(notes), ticket))


def part_one(notes: TicketNotes) -> int:
    return scanning_error_rate(notes)


def part_two(notes: TicketNotes, prefix: str = "departure") -> int:
    """Product of your ticket's fields whose names start with prefix."""
    product = 1
    for name, value in translate(notes, notes.your_ticket).items():
        if name.startswith(prefix):
            product *= value
    return product
