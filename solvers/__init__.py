"""
Tile arrangement solvers.

Usage:
    from core import parse_tiles
    from solvers import solve_grid

    tiles = parse_tiles(text)
    board = solve_grid(tiles)  # None if no arrangement exists
"""
from .backtracking import (
    SolverConfig,
    candidate_placements,
    iter_solutions,
    find_all_solutions,
    solve_grid,
    board_to_arrangement,
    corner_ids,
    corner_product
)
