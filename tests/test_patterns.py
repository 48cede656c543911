"""Tests for pattern search and roughness."""

import sys
import os
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from features import (
    ORIENTATIONS,
    SEA_MONSTER,
    Pattern,
    find_matches,
    load_pattern,
    match_footprint,
    roughness,
    search_orientations,
)

DATA_DIR = Path(__file__).parent / "data"


def image_from(rows):
    return np.array([[char == '#' for char in row] for row in rows], dtype=bool)


def test_sea_monster_shape():
    assert SEA_MONSTER.shape == (3, 20)
    assert SEA_MONSTER.cell_count == 15
    assert (0, 18) in SEA_MONSTER.offsets
    assert (2, 1) in SEA_MONSTER.offsets


def test_pattern_extents_come_from_marked_cells():
    pattern = Pattern.from_text("  #   \n#     \n\n")
    assert pattern.shape == (2, 3)
    assert pattern.offsets == [(0, 2), (1, 0)]


def test_pattern_without_cells():
    with pytest.raises(ValueError, match="no marked cells"):
        Pattern.from_text("...\n   \n")


def test_load_pattern_matches_builtin():
    pattern = load_pattern(DATA_DIR / "sea_monster.txt")
    assert pattern.name == "sea_monster"
    assert np.array_equal(pattern.mask, SEA_MONSTER.mask)


def test_padded_pattern_file_is_trimmed():
    pattern = load_pattern(DATA_DIR / "sea_monster_padded.txt")
    assert pattern.shape == SEA_MONSTER.shape
    assert np.array_equal(pattern.mask, SEA_MONSTER.mask)

    # Monster touching the top-left corner of the image
    image = SEA_MONSTER.mask.copy()
    assert find_matches(image, pattern) == [(0, 0)]


def test_load_missing_pattern(tmp_path):
    with pytest.raises(ValueError, match="Could not load pattern"):
        load_pattern(tmp_path / "nope.txt")


def test_find_matches_and_overlap():
    image = image_from(["###",
                        "##.",
                        "..."])
    pattern = Pattern.from_text("##\n#.")
    anchors = find_matches(image, pattern)
    assert anchors == [(0, 0), (0, 1)]

    # The two matches share (0, 1); it is only removed once
    footprint = match_footprint(image.shape, pattern, anchors)
    assert int(footprint.sum()) == 5
    assert roughness(image, pattern, anchors) == 0


def test_pattern_larger_than_image():
    assert find_matches(np.ones((2, 2), dtype=bool), SEA_MONSTER) == []


def test_single_monster_found():
    image = np.zeros((5, 22), dtype=bool)
    image[1:4, 1:21] = SEA_MONSTER.mask
    image[0, 0] = True
    assert find_matches(image, SEA_MONSTER) == [(1, 1)]
    assert roughness(image, SEA_MONSTER, [(1, 1)]) == 1


def test_search_orientations_finds_rotated_monster():
    image = np.zeros((24, 24), dtype=bool)
    image[2:5, 2:22] = SEA_MONSTER.mask
    image[10, 10] = True
    rotated = np.rot90(image, 1)

    result = search_orientations(rotated, SEA_MONSTER)
    assert result.match_count == 1
    assert result.roughness == 1
    assert np.array_equal(result.image, result.orientation.view(rotated))


def test_search_orientations_without_matches():
    image = np.zeros((24, 24), dtype=bool)
    image[0, :5] = True
    result = search_orientations(image, SEA_MONSTER)
    assert result.orientation == ORIENTATIONS[0]
    assert result.anchors == []
    assert result.roughness == 5
