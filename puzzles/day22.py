"""
Day 22: Crab Combat.

Decks are deques: the top card is popped from the left and won cards go to
the bottom on the right. Recursive combat stops a game as soon as a pair of
decks repeats, with player 1 winning.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Sequence, Tuple

from core.puzzle_input import lines, sections

PLAYER_HEADERS = ("Player 1:", "Player 2:")


@dataclass(frozen=True)
class Decks:
    player1: Tuple[int, ...]
    player2: Tuple[int, ...]


def _parse_deck(section, header: str) -> Tuple[int, ...]:
    if section[0].strip() != header:
        raise ValueError(f"Expected {header!r}, got {section[0]!r}")
    try:
        return tuple(int(line) for line in section[1:])
    except ValueError:
        raise ValueError(f"Bad card in {header[:-1]} deck") from None


def parse_input(puzzle_input: str) -> Decks:
    parts = sections(lines(puzzle_input))
    if len(parts) != 2:
        raise ValueError(f"Wrong number of sections: {len(parts)}")
    return Decks(player1=_parse_deck(parts[0], PLAYER_HEADERS[0]),
                 player2=_parse_deck(parts[1], PLAYER_HEADERS[1]))


def play_round(deck1: Deque[int], deck2: Deque[int]) -> int:
    """Play one round in place; returns the winning player (1 or 2)."""
    card1, card2 = deck1.popleft(), deck2.popleft()
    if card1 > card2:
        deck1.extend((card1, card2))
        return 1
    deck2.extend((card2, card1))
    return 2


def play_combat(decks: Decks) -> Tuple[int, Deque[int]]:
    """(winner, winning deck)"""
    deck1, deck2 = deque(decks.player1), deque(decks.player2)
    while deck1 and deck2:
        play_round(deck1, deck2)
    return (1, deck1) if deck1 else (2, deck2)


def play_recursive_combat(deck1: Deque[int], deck2: Deque[int]) -> Tuple[int, Deque[int]]:
    seen = set()
    while deck1 and deck2:
        state = (tuple(deck1), tuple(deck2))
        if state in seen:
            return 1, deck1
        seen.add(state)

        card1, card2 = deck1.popleft(), deck2.popleft()
        if len(deck1) >= card1 and len(deck2) >= card2:
            winner, _ = play_recursive_combat(deque(list(deck1)[:card1]),
                                              deque(list(deck2)[:card2]))
        else:
            winner = 1 if card1 > card2 else 2

        if winner == 1:
            deck1.extend((card1, card2))
        else:
            deck2.extend((card2, card1))

    return (1, deck1) if deck1 else (2, deck2)


def score(deck: Sequence[int]) -> int:
    """Bottom card times 1, the next times 2, and so on."""
    return sum(card * position for position, card in enumerate(reversed(deck), start=1))


def part_one(decks: Decks) -> int:
    _, deck = play_combat(decks)
    return score(deck)


def part_two(decks: Decks) -> int:
    _, deck = play_recursive_combat(deque(decks.player1), deque(decks.player2))
    return score(deck)
