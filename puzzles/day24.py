"""
Day 24: Lobby Layout.

Hex tiles use axial coordinates (q, r). Part two runs the flipping rule on
a dense boolean grid that grows by one cell each day, counting black
neighbours with a convolution over the six axial offsets.
"""

import re
import numpy as np
from typing import Iterable, List, Set, Tuple
from scipy.ndimage import convolve

from core.puzzle_input import lines

Hex = Tuple[int, int]

STEPS = {
    'e': (1, 0),
    'w': (-1, 0),
    'ne': (1, -1),
    'nw': (0, -1),
    'se': (0, 1),
    'sw': (-1, 1),
}

PATH = re.compile(r"^(?:e|w|ne|nw|se|sw)*$")
STEP = re.compile(r"[ns]?[ew]")

# Indexed [dq + 1, dr + 1]
HEX_KERNEL = np.array([[0, 1, 1],
                       [1, 0, 1],
                       [1, 1, 0]], dtype=np.int32)

DAYS = 100


def parse_path(line: str) -> List[str]:
    """'esenee' -> ['e', 'se', 'ne', 'e']"""
    line = line.strip()
    if not PATH.match(line):
        raise ValueError(f"Bad tile path: {line!r}")
    return STEP.findall(line)


def parse_input(puzzle_input: str) -> List[List[str]]:
    return [parse_path(line) for line in lines(puzzle_input)]


def locate(path: Iterable[str]) -> Hex:
    q, r = 0, 0
    for step in path:
        dq, dr = STEPS[step]
        q, r = q + dq, r + dr
    return q, r


def black_tiles(paths: Iterable[List[str]]) -> Set[Hex]:
    """Tiles flipped an odd number of times."""
    black = set()
    for path in paths:
        black ^= {locate(path)}
    return black


def to_grid(black: Set[Hex]) -> np.ndarray:
    if not black:
        return np.zeros((1, 1), dtype=bool)
    qs = [q for q, _ in black]
    rs = [r for _, r in black]
    grid = np.zeros((max(qs) - min(qs) + 1, max(rs) - min(rs) + 1), dtype=bool)
    for q, r in black:
        grid[q - min(qs), r - min(rs)] = True
    return grid


def flip_day(grid: np.ndarray) -> np.ndarray:
    """
    Black tiles with 0 or more than 2 black neighbours turn white; white
    tiles with exactly 2 black neighbours turn black.
    """
    grid = np.pad(grid, 1, mode='constant', constant_values=False)
    neighbours = convolve(grid.astype(np.int32), HEX_KERNEL, mode='constant', cval=0)
    return (grid & ((neighbours == 1) | (neighbours == 2))) | (~grid & (neighbours == 2))


def living_art(black: Set[Hex], days: int = DAYS) -> int:
    """Black tile count after `days` days."""
    grid = to_grid(black)
    for _ in range(days):
        grid = flip_day(grid)
    return int(np.count_nonzero(grid))


def part_one(paths: List[List[str]]) -> int:
    return len(black_tiles(paths))


def part_two(paths: List[List[str]], days: int = DAYS) -> int:
    return living_art(black_tiles(paths), days)
