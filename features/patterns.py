"""
Pattern search over the composite image (sea monsters).

A pattern is a small boolean mask; an anchor (row, col) matches when every
marked cell of the mask, offset by the anchor, is set in the image. Matching
is a 2D correlation of the image with the mask: an anchor matches exactly
when the correlation reaches the number of marked cells.
"""

import numpy as np
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple
from scipy.signal import correlate2d

from .orientation import ORIENTATIONS, Orientation


@dataclass(frozen=True, eq=False)
class Pattern:
    """
    Boolean mask of cells that must be set.

    Attributes:
        mask: (height, width) boolean array, trimmed to the marked cells' extents
        name: Label for display
    """
    mask: np.ndarray
    name: str = "pattern"

    @classmethod
    def from_text(cls, text: str, name: str = "pattern") -> 'Pattern':
        """
        Parse a pattern where '#' marks a cell and anything else is blank.

        Leading spaces are significant between rows; blank margins around
        the marked cells are trimmed.
        """
        cells = [(row, col)
                 for row, line in enumerate(text.split('\n'))
                 for col, char in enumerate(line)
                 if char == '#']
        if not cells:
            raise ValueError(f"Pattern {name!r} has no marked cells")

        top = min(row for row, _ in cells)
        left = min(col for _, col in cells)
        height = max(row for row, _ in cells) - top + 1
        width = max(col for _, col in cells) - left + 1
        mask = np.zeros((height, width), dtype=bool)
        for row, col in cells:
            mask[row - top, col - left] = True
        mask.setflags(write=False)
        return cls(mask=mask, name=name)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.mask.shape

    @property
    def offsets(self) -> List[Tuple[int, int]]:
        """(row, col) offsets of the marked cells."""
        return [tuple(offset) for offset in np.argwhere(self.mask).tolist()]

    @property
    def cell_count(self) -> int:
        return int(self.mask.sum())


SEA_MONSTER = Pattern.from_text(
    "                  # \n"
    "#    ##    ##    ###\n"
    " #  #  #  #  #  #   ",
    name="sea monster",
)


def load_pattern(file_path) -> Pattern:
    """Load a pattern from a text file."""
    path = Path(file_path)
    if not path.is_file():
        raise ValueError(f"Could not load pattern: {file_path}")
    return Pattern.from_text(path.read_text(), name=path.stem)


def find_matches(image: np.ndarray, pattern: Pattern) -> List[Tuple[int, int]]:
    """
    Find every anchor where the pattern is fully set in the image.

    Args:
        image: 2D boolean image
        pattern: Pattern to look for

    Returns:
        (row, col) anchors in row-major order
    """
    height, width = pattern.shape
    if image.shape[0] < height or image.shape[1] < width:
        return []

    hits = correlate2d(image.astype(np.int32), pattern.mask.astype(np.int32), mode='valid')
    anchors = np.argwhere(hits == pattern.cell_count)
    return [tuple(anchor) for anchor in anchors.tolist()]


def match_footprint(image_shape: Tuple[int, int], pattern: Pattern,
                    anchors: List[Tuple[int, int]]) -> np.ndarray:
    """Union of the cells covered by every matched pattern instance."""
    footprint = np.zeros(image_shape, dtype=bool)
    height, width = pattern.shape
    for row, col in anchors:
        footprint[row:row + height, col:col + width] |= pattern.mask
    return footprint


def roughness(image: np.ndarray, pattern: Pattern, anchors: List[Tuple[int, int]]) -> int:
    """Set pixels not covered by any matched instance (overlaps counted once)."""
    footprint = match_footprint(image.shape, pattern, anchors)
    return int(np.count_nonzero(image & ~footprint))


@dataclass
class PatternSearchResult:
    """Best orientation of the composite image for a pattern."""
    orientation: Orientation
    image: np.ndarray
    anchors: List[Tuple[int, int]] = field(default_factory=list)
    roughness: int = 0

    @property
    def match_count(self) -> int:
        return len(self.anchors)


def search_orientations(image: np.ndarray, pattern: Pattern,
                        verbose: bool = False) -> PatternSearchResult:
    """
    Try the image in all 8 orientations and keep the one with most matches.

    Ties go to the earlier orientation in ORIENTATIONS. If no orientation
    matches, the identity orientation is returned with no anchors.
    """
    best = None
    for orientation in ORIENTATIONS:
        oriented = orientation.view(image)
        anchors = find_matches(oriented, pattern)
        if verbose:
            print(f"    {orientation.name:>12}: {len(anchors)} x {pattern.name}")
        if best is None or len(anchors) > best.match_count:
            best = PatternSearchResult(orientation=orientation, image=oriented, anchors=anchors)

    best.roughness = roughness(best.image, pattern, best.anchors)
    return best
