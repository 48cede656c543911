"""Edge patterns and the edge index over all tile placements."""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from core.tiles import Tile
from .orientation import EDGES, Placement, all_placements

EdgePattern = Tuple[bool, ...]


def edge_signature(pattern: EdgePattern) -> str:
    """Render an edge pattern as '#'/'.' text."""
    return ''.join('#' if cell else '.' for cell in pattern)


class EdgeIndex:
    """
    Map from edge pattern to every (placement, edge) exposing it.

    Built once over all tiles x orientations x edges and never pruned;
    callers track which tiles are still available.
    """

    def __init__(self):
        self._entries: Dict[EdgePattern, List[Tuple[Placement, str]]] = defaultdict(list)
        self.placements: List[Placement] = []

    @classmethod
    def build(cls, tiles: Iterable[Tile]) -> 'EdgeIndex':
        index = cls()
        for tile in tiles:
            for placement in all_placements(tile):
                index.placements.append(placement)
                for edge in EDGES:
                    index._entries[placement.edge(edge)].append((placement, edge))
        return index

    def __len__(self):
        return len(self._entries)

    def entries(self, pattern: EdgePattern) -> List[Tuple[Placement, str]]:
        """All (placement, edge) pairs for a pattern, in build order."""
        return list(self._entries.get(tuple(pattern), ()))

    def lookup(self, pattern: EdgePattern, edge: str) -> List[Placement]:
        """Placements whose `edge` side equals `pattern`, in build order."""
        return [placement for placement, side in self._entries.get(tuple(pattern), ())
                if side == edge]

    def unmatched_edge_counts(self) -> Dict[int, int]:
        """
        Count, per tile id, the edges (in the identity orientation) that no
        other tile can share in any orientation.

        Corner tiles of a well-formed puzzle have 2, border tiles 1.
        """
        counts = {}
        for placement in self.placements:
            if placement.orientation.rotations or placement.orientation.flipped:
                continue
            unmatched = 0
            for edge in EDGES:
                owners = {p.tile_id for p, _ in self._entries[placement.edge(edge)]}
                if owners == {placement.tile_id}:
                    unmatched += 1
            counts[placement.tile_id] = unmatched
        return counts
