"""
Day 21: Allergen Assessment.

Each allergen is in exactly one ingredient, so its candidates are the
intersection of the ingredient lists of every food declaring it. Solved
allergens are eliminated from the others until every allergen has one
ingredient.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from core.puzzle_input import lines

FOOD_LINE = re.compile(r"^([a-z ]+?) \(contains ([a-z, ]+)\)$")


@dataclass(frozen=True)
class Food:
    ingredients: Tuple[str, ...]
    allergens: Tuple[str, ...]

    @classmethod
    def parse(cls, line: str) -> 'Food':
        match = FOOD_LINE.match(line.strip())
        if match is None:
            raise ValueError(f"Invalid label: {line!r}")
        return cls(ingredients=tuple(match.group(1).split()),
                   allergens=tuple(match.group(2).split(', ')))


def parse_input(puzzle_input: str) -> List[Food]:
    return [Food.parse(line) for line in lines(puzzle_input)]


def allergen_candidates(foods: Sequence[Food]) -> Dict[str, Set[str]]:
    candidates: Dict[str, Set[str]] = {}
    for food in foods:
        for allergen in food.allergens:
            if allergen in candidates:
                candidates[allergen] &= set(food.ingredients)
            else:
                candidates[allergen] = set(food.ingredients)
    return candidates


def resolve_allergens(foods: Sequence[Food]) -> Dict[str, str]:
    """
    Allergen -> the ingredient containing it.

    Raises:
        ValueError: If elimination gets stuck
    """
    candidates = allergen_candidates(foods)
    resolved = {}
    while candidates:
        allergen = next((a for a, names in candidates.items() if len(names) == 1), None)
        if allergen is None:
            raise ValueError(f"Couldn't resolve allergens: {candidates}")
        ingredient = candidates.pop(allergen).pop()
        resolved[allergen] = ingredient
        for names in candidates.values():
            names.discard(ingredient)
    return resolved


def safe_ingredients(foods: Sequence[Food]) -> Set[str]:
    """Ingredients that cannot contain any allergen."""
    unsafe = set().union(*allergen_candidates(foods).values())
    return {ingredient for food in foods for ingredient in food.ingredients} - unsafe


def part_one(foods: Sequence[Food]) -> int:
    safe = safe_ingredients(foods)
    return sum(1 for food in foods for ingredient in food.ingredients if ingredient in safe)


def part_two(foods: Sequence[Food]) -> str:
    """Dangerous ingredients sorted by their allergen, comma separated."""
    resolved = resolve_allergens(foods)
    return ','.join(resolved[allergen] for allergen in sorted(resolved))
