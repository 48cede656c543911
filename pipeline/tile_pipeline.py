"""
Tile Production Pipeline (Phase 1)

Turns puzzle input into validated tiles:
- parse every 'Tile <id>:' block
- check the tile set can form a square grid

Parsing errors abort the whole input; nothing is retried.
"""

from typing import List, Tuple

from core.grid_detection import detect_grid_size
from core.puzzle_input import load_puzzle_input
from core.tiles import Tile, parse_tiles


def produce_tiles(puzzle_input: str) -> Tuple[List[Tile], int]:
    """
    Parse and validate tiles from input text.

    Returns:
        tiles: Parsed tiles in input order
        grid_size: Tiles per row/column

    Raises:
        TileParseError: If a block is malformed
        GridConfigurationError: If the tiles cannot form a square grid
    """
    tiles = parse_tiles(puzzle_input)
    grid_size = detect_grid_size(tiles)
    return tiles, grid_size


def load_and_produce_tiles(input_path, verbose: bool = True) -> Tuple[List[Tile], int]:
    """
    Load an input file and produce tiles (convenience function).

    Args:
        input_path: Path to the puzzle input
        verbose: Print progress info
    """
    tiles, grid_size = produce_tiles(load_puzzle_input(input_path))

    if verbose:
        print(f"Loaded: {input_path}")
        print(f"Tiles: {len(tiles)} of {tiles[0].size}x{tiles[0].size}")
        print(f"Grid: {grid_size}x{grid_size}")

    return tiles, grid_size
