"""Feature extraction: orientations, edges, pattern search."""
from .orientation import EDGES, OPPOSITE_EDGE, ORIENTATIONS, Orientation, Placement, all_placements
from .edges import EdgeIndex, edge_signature
from .patterns import (
    Pattern,
    PatternSearchResult,
    SEA_MONSTER,
    load_pattern,
    find_matches,
    match_footprint,
    roughness,
    search_orientations
)
