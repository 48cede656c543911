"""
Day 11: Seating System.

Seats are simulated on numpy grids until the layout stops changing:
- seats: True where a chair exists ('L' or '#')
- occupied: True where a chair is taken ('#')

Part one counts the 8 adjacent cells; part two looks along the 8 directions
to the first chair and tolerates one more occupied neighbour.
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Tuple
from scipy.ndimage import convolve

from core.puzzle_input import lines

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]

NEIGHBOUR_KERNEL = np.array([[1, 1, 1],
                             [1, 0, 1],
                             [1, 1, 1]], dtype=np.int32)


@dataclass(frozen=True, eq=False)
class SeatLayout:
    seats: np.ndarray
    occupied: np.ndarray

    @classmethod
    def parse(cls, puzzle_input: str) -> 'SeatLayout':
        rows = lines(puzzle_input)
        if not rows:
            raise ValueError("Empty seat layout")

        width = len(rows[0])
        for row_no, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(f"Row {row_no} has {len(row)} cells, expected {width}")
            bad = set(row) - {'.', 'L', '#'}
            if bad:
                raise ValueError(f"Row {row_no}: unrecognized characters {sorted(bad)}")

        chars = np.array([list(row) for row in rows])
        return cls(seats=chars != '.', occupied=chars == '#')

    def __eq__(self, other):
        if not isinstance(other, SeatLayout):
            return NotImplemented
        return (np.array_equal(self.seats, other.seats)
                and np.array_equal(self.occupied, other.occupied))

    @property
    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.occupied))


def adjacent_occupied(layout: SeatLayout) -> np.ndarray:
    """Occupied seats among the 8 adjacent cells."""
    return convolve(layout.occupied.astype(np.int32), NEIGHBOUR_KERNEL,
                    mode='constant', cval=0)


def _first_visible_seats(seats: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """(seat, visible seat) index pairs, as flat indices, for every direction."""
    height, width = seats.shape
    sources, targets = [], []
    for r, c in np.argwhere(seats).tolist():
        for dr, dc in DIRECTIONS:
            rr, cc = r + dr, c + dc
            while 0 <= rr < height and 0 <= cc < width:
                if seats[rr, cc]:
                    sources.append(r * width + c)
                    targets.append(rr * width + cc)
                    break
                rr, cc = rr + dr, cc + dc
    return np.array(sources, dtype=np.intp), np.array(targets, dtype=np.intp)


def visible_occupied_counter(layout: SeatLayout) -> Callable[[SeatLayout], np.ndarray]:
    """Build a counter of occupied seats in line of sight; sight lines never change."""
    sources, targets = _first_visible_seats(layout.seats)
    size = layout.seats.size
    shape = layout.seats.shape

    def count(current: SeatLayout) -> np.ndarray:
        weights = current.occupied.ravel()[targets].astype(np.int64)
        return np.bincount(sources, weights=weights, minlength=size).astype(np.int64).reshape(shape)

    return count


def iterate(layout: SeatLayout, neighbours: np.ndarray, tolerance: int) -> SeatLayout:
    """One round: empty seats with no occupied neighbours fill, crowded seats empty."""
    fill = layout.seats & ~layout.occupied & (neighbours == 0)
    stay = layout.occupied & (neighbours < tolerance)
    return SeatLayout(seats=layout.seats, occupied=fill | stay)


def iterate_until_stable(layout: SeatLayout, counter: Callable[[SeatLayout], np.ndarray],
                         tolerance: int) -> SeatLayout:
    while True:
        next_layout = iterate(layout, counter(layout), tolerance)
        if next_layout == layout:
            return next_layout
        layout = next_layout


def parse_input(puzzle_input: str) -> SeatLayout:
    return SeatLayout.parse(puzzle_input)


def part_one(layout: SeatLayout) -> int:
    return iterate_until_stable(layout, adjacent_occupied, tolerance=4).occupied_count


def part_two(layout: SeatLayout) -> int:
    counter = visible_occupied_counter(layout)
    return iterate_until_stable(layout, counter, tolerance=5).occupied_count
