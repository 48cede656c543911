"""
Day 25: Combo Breaker.

The handshake is modular exponentiation: transforming a subject with loop
size n gives subject ** n mod 20201227. The final day has a single part.
"""

from typing import Tuple

from core.puzzle_input import integers

MODULUS = 20201227
SUBJECT = 7


def parse_input(puzzle_input: str) -> Tuple[int, int]:
    """(card public key, door public key)"""
    keys = integers(puzzle_input)
    if len(keys) != 2:
        raise ValueError(f"Expected 2 public keys, got {len(keys)}")
    return keys[0], keys[1]


def transform(subject: int, loop_size: int) -> int:
    return pow(subject, loop_size, MODULUS)


def discover_loop_size(public_key: int, subject: int = SUBJECT) -> int:
    if not 1 <= public_key < MODULUS:
        raise ValueError(f"Public key out of range: {public_key}")
    value = 1
    loop_size = 0
    while value != public_key:
        value = (value * subject) % MODULUS
        loop_size += 1
    return loop_size


def encryption_key(card_public_key: int, door_public_key: int) -> int:
    return transform(door_public_key, discover_loop_size(card_public_key))


def part_one(keys: Tuple[int, int]) -> int:
    card_public_key, door_public_key = keys
    return encryption_key(card_public_key, door_public_key)
