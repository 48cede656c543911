"""
Day 17: Conway Cubes.

The pocket dimension is a dense boolean array that grows by one cell in
every direction each cycle. Neighbour counts are an n-dimensional
convolution with a 3^n kernel whose centre is zero.
"""

import numpy as np
from scipy.ndimage import convolve

from core.puzzle_input import lines

CYCLES = 6


def parse_input(puzzle_input: str) -> np.ndarray:
    """2D slice of active ('#') cubes."""
    rows = [row.strip() for row in lines(puzzle_input)]
    if not rows:
        raise ValueError("Empty initial slice")

    width = len(rows[0])
    for row_no, row in enumerate(rows, start=1):
        if len(row) != width:
            raise ValueError(f"Row {row_no} has {len(row)} cells, expected {width}")
        bad = set(row) - {'.', '#'}
        if bad:
            raise ValueError(f"Row {row_no}: unrecognized characters {sorted(bad)}")

    return np.array([[char == '#' for char in row] for row in rows], dtype=bool)


def initial_state(slice_2d: np.ndarray, dimensions: int) -> np.ndarray:
    """Embed the slice in `dimensions` dimensions (extra axes of length 1)."""
    if dimensions < 2:
        raise ValueError(f"Need at least 2 dimensions, got {dimensions}")
    return slice_2d.reshape((1,) * (dimensions - 2) + slice_2d.shape)


def cycle(active: np.ndarray) -> np.ndarray:
    """
    One cycle of the cube rule.

    Active cubes stay active with 2 or 3 active neighbours; inactive cubes
    become active with exactly 3.
    """
    active = np.pad(active, 1, mode='constant', constant_values=False)
    kernel = np.ones((3,) * active.ndim, dtype=np.int32)
    kernel[(1,) * active.ndim] = 0
    neighbours = convolve(active.astype(np.int32), kernel, mode='constant', cval=0)
    return (active & ((neighbours == 2) | (neighbours == 3))) | (~active & (neighbours == 3))


def run(slice_2d: np.ndarray, dimensions: int, cycles: int = CYCLES) -> int:
    """Active cube count after `cycles` cycles."""
    active = initial_state(slice_2d, dimensions)
    for _ in range(cycles):
        active = cycle(active)
    return int(np.count_nonzero(active))


def part_one(slice_2d: np.ndarray) -> int:
    return run(slice_2d, dimensions=3)


def part_two(slice_2d: np.ndarray) -> int:
    return run(slice_2d, dimensions=4)
