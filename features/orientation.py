"""
Tile orientations and placements.

An orientation is an optional left/right mirror followed by 0-3 quarter
turns counter-clockwise. Orientations never copy pixel data: view() returns
a numpy view of the source array, and source_coords() maps a coordinate in
the oriented tile back to the raw tile.

Coordinates are (x, y) = (column, row), with (0, 0) at the top-left.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from core.tiles import Tile

EDGES = ('top', 'bottom', 'left', 'right')

OPPOSITE_EDGE = {
    'top': 'bottom',
    'bottom': 'top',
    'left': 'right',
    'right': 'left',
}


@dataclass(frozen=True)
class Orientation:
    """Mirror flag plus number of counter-clockwise quarter turns."""
    rotations: int = 0
    flipped: bool = False

    def __post_init__(self):
        if self.rotations not in (0, 1, 2, 3):
            raise ValueError(f"rotations must be 0-3, got {self.rotations}")

    @property
    def name(self) -> str:
        name = f"rot{90 * self.rotations}"
        return name + "+flip" if self.flipped else name

    def view(self, array: np.ndarray) -> np.ndarray:
        """Return the oriented array as a view of `array` (no copy)."""
        if self.flipped:
            array = np.fliplr(array)
        return np.rot90(array, self.rotations)

    def source_coords(self, x: int, y: int, size: int) -> Tuple[int, int]:
        """
        Map (x, y) in the oriented square back to (row, col) in the source.

        Args:
            x, y: Column and row in the oriented grid
            size: Side length of the square grid

        Returns:
            (row, col) index into the unoriented data
        """
        row, col = y, x
        for _ in range(self.rotations):
            row, col = col, size - 1 - row
        if self.flipped:
            col = size - 1 - col
        return row, col

    def inverse(self) -> 'Orientation':
        """Orientation that undoes this one. Mirrored orientations are self-inverse."""
        if self.flipped:
            return self
        return Orientation((4 - self.rotations) % 4, False)


ORIENTATIONS = tuple(Orientation(rotations, flipped)
                     for flipped in (False, True)
                     for rotations in range(4))


@dataclass(frozen=True)
class Placement:
    """A tile under one orientation."""
    tile: Tile
    orientation: Orientation

    @property
    def tile_id(self) -> int:
        return self.tile.tile_id

    @property
    def pixels(self) -> np.ndarray:
        return self.orientation.view(self.tile.data)

    def pixel_at(self, x: int, y: int) -> bool:
        row, col = self.orientation.source_coords(x, y, self.tile.size)
        return bool(self.tile.data[row, col])

    def edge(self, edge: str) -> Tuple[bool, ...]:
        """Border cells along one side, top-to-bottom or left-to-right."""
        pixels = self.pixels
        if edge == 'top':
            strip = pixels[0, :]
        elif edge == 'bottom':
            strip = pixels[-1, :]
        elif edge == 'left':
            strip = pixels[:, 0]
        elif edge == 'right':
            strip = pixels[:, -1]
        else:
            raise ValueError(f"Unknown edge: {edge}")
        return tuple(strip.tolist())

    def interior(self) -> np.ndarray:
        """Pixels with the outermost ring removed."""
        return self.pixels[1:-1, 1:-1]


def all_placements(tile: Tile):
    """Every placement of a tile, one per orientation."""
    return [Placement(tile, orientation) for orientation in ORIENTATIONS]
