"""
Day 20: Jurassic Jigsaw.

Thin entry point over the tile pipeline; see core.tiles, features,
solvers.backtracking and pipeline.solver_pipeline.
"""

from typing import List, Optional

from core.tiles import Tile, parse_tiles
from features.patterns import SEA_MONSTER, Pattern
from pipeline.solver_pipeline import solve_tiles
from solvers.backtracking import SolverConfig


def parse_input(puzzle_input: str) -> List[Tile]:
    return parse_tiles(puzzle_input)


def part_one(tiles: List[Tile]) -> Optional[int]:
    """Product of the corner tile ids (None if the tiles cannot be arranged)."""
    result = solve_tiles(tiles, config=SolverConfig(verbose=False))
    return None if result is None else result.corner_product


def part_two(tiles: List[Tile], pattern: Pattern = SEA_MONSTER) -> Optional[int]:
    """Water roughness once every sea monster is removed."""
    result = solve_tiles(tiles, pattern, config=SolverConfig(verbose=False))
    return None if result is None else result.roughness
