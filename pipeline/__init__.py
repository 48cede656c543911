"""
Pipeline orchestration modules.

1. produce_tiles() - parse and validate input (Phase 1)
2. solve_tiles() - arrange, compose, search (Phase 2)
3. solve_jigsaw() - both phases from input text
"""
from .tile_pipeline import (
    produce_tiles,
    load_and_produce_tiles
)
from .solver_pipeline import (
    JigsawResult,
    compose_image,
    solve_tiles,
    solve_jigsaw
)
