"""
Day 4: Passport Processing.

Passports are blank-line separated groups of 'key:value' fields. Part one
only checks the required keys are present; part two also validates every
required value.
"""

import re
from typing import Callable, Dict, List, Sequence

from core.puzzle_input import lines, sections

Passport = Dict[str, str]

YEAR = re.compile(r"^[0-9]{4}$")
HEIGHT = re.compile(r"^([0-9]+)(cm|in)$")
HAIR_COLOR = re.compile(r"^#[0-9a-f]{6}$")
PASSPORT_ID = re.compile(r"^[0-9]{9}$")
EYE_COLORS = {'amb', 'blu', 'brn', 'gry', 'grn', 'hzl', 'oth'}
HEIGHT_RANGES = {'cm': (150, 193), 'in': (59, 76)}


def _year_between(low: int, high: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        return bool(YEAR.match(value)) and low <= int(value) <= high
    return check


def is_valid_height(value: str) -> bool:
    match = HEIGHT.match(value)
    if match is None:
        return False
    low, high = HEIGHT_RANGES[match.group(2)]
    return low <= int(match.group(1)) <= high


def is_valid_hair_color(value: str) -> bool:
    return bool(HAIR_COLOR.match(value))


def is_valid_eye_color(value: str) -> bool:
    return value in EYE_COLORS


def is_valid_passport_id(value: str) -> bool:
    return bool(PASSPORT_ID.match(value))


# 'cid' is optional
VALIDATORS: Dict[str, Callable[[str], bool]] = {
    'byr': _year_between(1920, 2002),
    'iyr': _year_between(2010, 2020),
    'eyr': _year_between(2020, 2030),
    'hgt': is_valid_height,
    'hcl': is_valid_hair_color,
    'ecl': is_valid_eye_color,
    'pid': is_valid_passport_id,
}


def parse_passport(record_lines: List[str]) -> Passport:
    passport = {}
    for field in ' '.join(record_lines).split():
        key, separator, value = field.partition(':')
        if not separator or not key:
            raise ValueError(f"Bad passport field: {field!r}")
        passport[key] = value
    return passport


def parse_input(puzzle_input: str) -> List[Passport]:
    return [parse_passport(record) for record in sections(lines(puzzle_input))]


def has_required_fields(passport: Passport) -> bool:
    return all(key in passport for key in VALIDATORS)


def is_valid(passport: Passport) -> bool:
    return all(key in passport and check(passport[key]) for key, check in VALIDATORS.items())


def part_one(passports: Sequence[Passport]) -> int:
    return sum(1 for passport in passports if has_required_fields(passport))


def part_two(passports: Sequence[Passport]) -> int:
    return sum(1 for passport in passports if is_valid(passport))
