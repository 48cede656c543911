"""
Day 3: Toboggan Trajectory.

The map repeats to the right forever, so column indices wrap modulo the
map width. Collisions along a slope are gathered with a single fancy-index
into the tree mask.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple

from core.puzzle_input import lines

SLOPE = (3, 1)
ALL_SLOPES = [(1, 1), (3, 1), (5, 1), (7, 1), (1, 2)]


@dataclass(frozen=True, eq=False)
class TreeMap:
    trees: np.ndarray

    @classmethod
    def parse(cls, puzzle_input: str) -> 'TreeMap':
        rows = lines(puzzle_input)
        if not rows:
            raise ValueError("Empty map")

        width = len(rows[0])
        for row_no, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(f"Row {row_no} has {len(row)} cells, expected {width}")
            bad = set(row) - {'.', '#'}
            if bad:
                raise ValueError(f"Row {row_no}: unrecognized characters {sorted(bad)}")

        return cls(trees=np.array([[char == '#' for char in row] for row in rows], dtype=bool))

    def is_tree(self, x: int, y: int) -> bool:
        return bool(self.trees[y, x % self.trees.shape[1]])

    def collisions(self, right: int, down: int = 1) -> int:
        """Trees hit moving `right` columns for every `down` rows from the top-left."""
        height, width = self.trees.shape
        ys = np.arange(0, height, down)
        xs = (np.arange(len(ys)) * right) % width
        return int(np.count_nonzero(self.trees[ys, xs]))


def parse_input(puzzle_input: str) -> TreeMap:
    return TreeMap.parse(puzzle_input)


def part_one(tree_map: TreeMap) -> int:
    return tree_map.collisions(*SLOPE)


def part_two(tree_map: TreeMap, slopes: Sequence[Tuple[int, int]] = ALL_SLOPES) -> int:
    product = 1
    for right, down in slopes:
        product *= tree_map.collisions(right, down)
    return product
