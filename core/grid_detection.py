"""Grid size detection for tile sets."""

import numpy as np
from typing import Sequence

from .errors import GridConfigurationError


def detect_grid_size(tiles: Sequence) -> int:
    """
    Determine the side length N of the N x N arrangement of tiles.

    Args:
        tiles: Parsed tiles

    Returns:
        Number of tiles per row/column

    Raises:
        GridConfigurationError: If there are no tiles, the tile count is not a
            perfect square, or the tiles differ in size
    """
    n_tiles = len(tiles)
    if n_tiles == 0:
        raise GridConfigurationError("No tiles provided")

    grid_size = int(round(np.sqrt(n_tiles)))
    if grid_size * grid_size != n_tiles:
        raise GridConfigurationError(f"Number of tiles ({n_tiles}) is not a perfect square")

    sizes = sorted({tile.size for tile in tiles})
    if len(sizes) > 1:
        raise GridConfigurationError(f"Tiles must all be the same size, got sizes {sizes}")

    return grid_size
