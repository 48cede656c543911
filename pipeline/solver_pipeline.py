"""
Solver Pipeline (Phase 2)

Orchestrates the jigsaw:
1. Parse tiles (Phase 1)
2. Arrange tiles with the backtracking solver
3. Compose the image from tile interiors
4. Search the composite for a pattern in every orientation

Part one is the product of the corner tile ids; part two is the roughness
of the composite once pattern instances are removed.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence

from core.tiles import Tile
from features.patterns import Pattern, PatternSearchResult, SEA_MONSTER, search_orientations
from solvers.backtracking import Board, SolverConfig, corner_product, solve_grid
from .tile_pipeline import produce_tiles


@dataclass
class JigsawResult:
    """Everything derived from one solved tile set."""
    board: Board
    grid_size: int
    image: np.ndarray
    search: PatternSearchResult

    @property
    def corner_product(self) -> int:
        return corner_product(self.board, self.grid_size)

    @property
    def roughness(self) -> int:
        return self.search.roughness


def compose_image(board: Board, grid_size: int) -> np.ndarray:
    """
    Assemble the composite image from a complete board.

    The outer ring of every tile is dropped; interiors are tiled row-major.

    Args:
        board: Dict mapping (row, col) -> Placement
        grid_size: Tiles per row/column

    Returns:
        Boolean array of side grid_size * (tile_size - 2)
    """
    tile_size = board[(0, 0)].tile.size
    inner = tile_size - 2

    output = np.zeros((inner * grid_size, inner * grid_size), dtype=bool)
    for r in range(grid_size):
        for c in range(grid_size):
            y1, y2 = r * inner, (r + 1) * inner
            x1, x2 = c * inner, (c + 1) * inner
            output[y1:y2, x1:x2] = board[(r, c)].interior()

    return output


def solve_tiles(tiles: Sequence[Tile], pattern: Pattern = SEA_MONSTER,
                config: Optional[SolverConfig] = None) -> Optional[JigsawResult]:
    """
    Arrange tiles, compose the image and search it for `pattern`.

    Returns:
        JigsawResult, or None when no arrangement exists

    Raises:
        GridConfigurationError: If the tiles cannot form a square grid
    """
    if config is None:
        config = SolverConfig()

    board = solve_grid(tiles, config)
    if board is None:
        return None

    grid_size = int(round(np.sqrt(len(board))))
    image = compose_image(board, grid_size)

    if config.verbose:
        print(f"\n[3] Composite image: {image.shape[1]}x{image.shape[0]}, "
              f"{int(image.sum())} set pixels")
        print(f"\n[4] Searching for {pattern.name}...")

    search = search_orientations(image, pattern, verbose=config.verbose)

    if config.verbose:
        print(f"    Best orientation: {search.orientation.name} "
              f"({search.match_count} matches, roughness {search.roughness})")

    return JigsawResult(board=board, grid_size=grid_size, image=image, search=search)


def solve_jigsaw(puzzle_input: str, pattern: Pattern = SEA_MONSTER,
                 config: Optional[SolverConfig] = None) -> Optional[JigsawResult]:
    """
    Complete pipeline: parse → solve → compose → search.

    This is the main entry point.
    """
    if config is None:
        config = SolverConfig()

    tiles, grid_size = produce_tiles(puzzle_input)

    if config.verbose:
        print("\n" + "=" * 60)
        print(f"PHASE 1: Parsed {len(tiles)} tiles ({grid_size}x{grid_size} grid)")
        print("=" * 60)

    return solve_tiles(tiles, pattern, config)

