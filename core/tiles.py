"""Tile data model and parsing of tile blocks."""

import re
import numpy as np
from dataclasses import dataclass
from typing import List, Sequence

from .errors import TileParseError
from .puzzle_input import lines, sections

TILE_HEADER = re.compile(r"^Tile ([0-9]+):$")


@dataclass(frozen=True, eq=False)
class Tile:
    """
    A square block of on/off pixels.

    Attributes:
        tile_id: Numeric id from the block header
        size: Side length in pixels
        data: Read-only (size, size) boolean array, row-major
    """
    tile_id: int
    size: int
    data: np.ndarray

    @classmethod
    def from_block(cls, block: Sequence[str], block_index: int = None) -> 'Tile':
        """Create a tile from a header line followed by rows of '#'/'.'."""
        if not block:
            raise TileParseError("empty tile block", block_index)

        header = block[0].strip()
        match = TILE_HEADER.match(header)
        if match is None:
            raise TileParseError("invalid header line, expected 'Tile <id>:'",
                                 block_index, header)

        rows = [row.strip() for row in block[1:]]
        if not rows:
            raise TileParseError("tile has no pixel rows", block_index, header)

        width = len(rows[0])
        for row_no, row in enumerate(rows, start=1):
            if len(row) != width:
                raise TileParseError(
                    f"inconsistent row lengths: row {row_no} has {len(row)} cells, "
                    f"expected {width}", block_index, header)
            bad = set(row) - {'#', '.'}
            if bad:
                raise TileParseError(
                    f"row {row_no} has unexpected characters {sorted(bad)}",
                    block_index, header)

        if width != len(rows):
            raise TileParseError(
                f"tile isn't square: {len(rows)} rows of {width} cells",
                block_index, header)

        data = np.array([[char == '#' for char in row] for row in rows], dtype=bool)
        data.setflags(write=False)
        return cls(tile_id=int(match.group(1)), size=width, data=data)

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return (self.tile_id == other.tile_id and self.size == other.size
                and np.array_equal(self.data, other.data))

    def __hash__(self):
        return hash((self.tile_id, self.size, self.data.tobytes()))

    def __repr__(self):
        return f"Tile(tile_id={self.tile_id}, size={self.size})"


def parse_tiles(puzzle_input: str) -> List[Tile]:
    """
    Parse every tile block in the input.

    Blocks are separated by blank lines. Fails on the first malformed block.

    Raises:
        TileParseError: If a block is malformed or a tile id is repeated
    """
    tiles = []
    seen = {}
    for block_index, block in enumerate(sections(lines(puzzle_input))):
        tile = Tile.from_block(block, block_index)
        if tile.tile_id in seen:
            raise TileParseError(
                f"duplicate tile id {tile.tile_id} (first seen in block {seen[tile.tile_id]})",
                block_index, block[0].strip())
        seen[tile.tile_id] = block_index
        tiles.append(tile)
    return tiles
