"""
Backtracking Grid Solver

Fills an N x N board one cell at a time in row-major order. Each cell only
considers placements whose top edge matches the bottom edge of the tile
above and whose left edge matches the right edge of the tile to the left,
looked up in the edge index. Tiles already on the board are filtered out.

Algorithm:
- Explicit stack of (board, used) states, depth-first
- Each step copies the board dict; states are never mutated in place
- Solutions are yielded lazily in the order a recursive search would find them
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from core.grid_detection import detect_grid_size
from core.tiles import Tile
from features.edges import EdgeIndex
from features.orientation import Placement

Board = Dict[Tuple[int, int], Placement]


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class SolverConfig:
    """Solver options."""
    # Stop after this many complete boards (None = exhaust the search)
    max_solutions: Optional[int] = None

    # Progress output
    verbose: bool = True


# =============================================================================
# CANDIDATES
# =============================================================================

def candidate_placements(index: EdgeIndex, board: Board, r: int, c: int,
                         used: frozenset) -> List[Placement]:
    """
    Placements that fit cell (r, c) given its top and left neighbours.

    The first cell has no neighbours and takes every placement in the index.
    """
    constraints = []
    if r > 0:
        constraints.append(index.lookup(board[(r - 1, c)].edge('bottom'), 'top'))
    if c > 0:
        constraints.append(index.lookup(board[(r, c - 1)].edge('right'), 'left'))

    if not constraints:
        candidates = index.placements
    else:
        candidates = constraints[0]
        for other in constraints[1:]:
            allowed = set(other)
            candidates = [p for p in candidates if p in allowed]

    return [p for p in candidates if p.tile_id not in used]


# =============================================================================
# SEARCH
# =============================================================================

def _search(index: EdgeIndex, grid_size: int, stats: dict) -> Iterator[Board]:
    positions = [(r, c) for r in range(grid_size) for c in range(grid_size)]
    stack = [({}, frozenset())]

    while stack:
        board, used = stack.pop()
        stats['states'] += 1

        if len(board) == len(positions):
            yield board
            continue

        r, c = positions[len(board)]
        candidates = candidate_placements(index, board, r, c, used)

        # Reversed so the first candidate is explored first
        for placement in reversed(candidates):
            new_board = board.copy()
            new_board[(r, c)] = placement
            stack.append((new_board, used | {placement.tile_id}))


def iter_solutions(tiles: Sequence[Tile], index: Optional[EdgeIndex] = None,
                   stats: Optional[dict] = None) -> Iterator[Board]:
    """
    Lazily yield every complete board.

    Args:
        tiles: Tiles to arrange
        index: Prebuilt edge index for these tiles (built if not given)
        stats: Optional dict receiving a 'states' counter

    Raises:
        GridConfigurationError: Before any search, if the tiles cannot form a square
    """
    grid_size = detect_grid_size(tiles)
    if index is None:
        index = EdgeIndex.build(tiles)
    if stats is None:
        stats = {}
    stats['states'] = 0
    return _search(index, grid_size, stats)


def find_all_solutions(tiles: Sequence[Tile], config: Optional[SolverConfig] = None) -> List[Board]:
    """Collect complete boards, up to config.max_solutions."""
    if config is None:
        config = SolverConfig()

    stats = {}
    solutions = []
    for board in iter_solutions(tiles, stats=stats):
        solutions.append(board)
        if config.max_solutions is not None and len(solutions) >= config.max_solutions:
            break

    if config.verbose:
        print(f"    Explored {stats['states']} states, found {len(solutions)} solution(s)")
    return solutions


def solve_grid(tiles: Sequence[Tile], config: Optional[SolverConfig] = None) -> Optional[Board]:
    """
    Main solver function.

    Args:
        tiles: Parsed tiles (count must be a perfect square)
        config: Solver options

    Returns:
        First complete board, or None if no arrangement exists
    """
    if config is None:
        config = SolverConfig()

    grid_size = detect_grid_size(tiles)

    if config.verbose:
        print("=" * 60)
        print(f"Backtracking Solver ({grid_size}x{grid_size}, {len(tiles)} tiles)")
        print("=" * 60)
        print("\n[1] Building edge index...")

    index = EdgeIndex.build(tiles)

    if config.verbose:
        print(f"    {len(index.placements)} placements, {len(index)} distinct edges")
        corners = [tid for tid, n in index.unmatched_edge_counts().items() if n == 2]
        print(f"    Corner candidates: {corners}")
        print("\n[2] Searching...")

    stats = {}
    board = next(iter_solutions(tiles, index=index, stats=stats), None)

    if config.verbose:
        if board is None:
            print(f"    No solution found after {stats['states']} states")
        else:
            print(f"    Solved after {stats['states']} states")
            print(f"    Arrangement: {board_to_arrangement(board, grid_size)}")

    return board


# =============================================================================
# BOARD HELPERS
# =============================================================================

def board_to_arrangement(board: Board, grid_size: int) -> List[int]:
    """Flat row-major list of tile ids."""
    return [board[(r, c)].tile_id for r in range(grid_size) for c in range(grid_size)]


def corner_ids(board: Board, grid_size: int) -> List[int]:
    """Tile ids at the four corners: top-left, top-right, bottom-left, bottom-right."""
    last = grid_size - 1
    return [board[pos].tile_id for pos in [(0, 0), (0, last), (last, 0), (last, last)]]


def corner_product(board: Board, grid_size: int) -> int:
    product = 1
    for tile_id in corner_ids(board, grid_size):
        product *= tile_id
    return product
