"""Display utilities for the composite image."""

import numpy as np
import matplotlib.pyplot as plt
from PIL import Image
from typing import Dict, Optional
from pathlib import Path

from features.orientation import Placement


def render_ascii(image: np.ndarray, footprint: Optional[np.ndarray] = None) -> str:
    """
    Render a boolean image as text.

    Args:
        image: 2D boolean image
        footprint: Optional mask of pattern cells, drawn as 'O'

    Returns:
        '#'/'.' rows joined by newlines
    """
    rows = []
    for r in range(image.shape[0]):
        row = []
        for c in range(image.shape[1]):
            if footprint is not None and footprint[r, c]:
                row.append('O')
            else:
                row.append('#' if image[r, c] else '.')
        rows.append(''.join(row))
    return '\n'.join(rows)


def _highlighted(image: np.ndarray, footprint: Optional[np.ndarray]) -> np.ndarray:
    """RGB array: set pixels dark blue, pattern cells orange, background white."""
    rgb = np.full(image.shape + (3,), 255, dtype=np.uint8)
    rgb[image] = (30, 60, 120)
    if footprint is not None:
        rgb[footprint] = (240, 140, 20)
    return rgb


def display_image(image: np.ndarray, footprint: Optional[np.ndarray] = None,
                  title: str = "Composite", roughness: Optional[int] = None,
                  figsize: tuple = (6, 6)):
    """
    Display the composite image with pattern cells highlighted.

    Args:
        image: Composite boolean image
        footprint: Optional mask of matched pattern cells
        title: Figure title
        roughness: Optional roughness to display
        figsize: Figure size
    """
    fig, ax = plt.subplots(1, 1, figsize=figsize)

    if roughness is not None:
        title = f"{title} (Roughness: {roughness})"

    ax.imshow(_highlighted(image, footprint), interpolation='nearest')
    ax.set_title(title)
    ax.axis('off')

    plt.tight_layout()
    plt.show()


def save_image(image: np.ndarray, output_path: str,
               footprint: Optional[np.ndarray] = None,
               title: str = "Composite", roughness: Optional[int] = None,
               dpi: int = 150):
    """
    Save the highlighted composite as a matplotlib figure.

    Args:
        image: Composite boolean image
        output_path: Path to save the figure
        footprint: Optional mask of matched pattern cells
        title: Figure title
        roughness: Optional roughness to display
        dpi: Output DPI
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))

    if roughness is not None:
        title = f"{title} (Roughness: {roughness})"

    ax.imshow(_highlighted(image, footprint), interpolation='nearest')
    ax.set_title(title)
    ax.axis('off')

    plt.tight_layout()

    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)


def save_bitmap(image: np.ndarray, output_path: str, scale: int = 1):
    """Write the image as a 1-bit PNG, one block of scale x scale per pixel."""
    if scale > 1:
        image = np.kron(image, np.ones((scale, scale), dtype=bool))

    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    Image.fromarray((~image).astype(np.uint8) * 255).convert('1').save(output_path)


def display_board(board: Dict[tuple, Placement], grid_size: int,
                  figsize: Optional[tuple] = None):
    """
    Display every placed tile in its grid cell with its id.

    Args:
        board: Dict mapping (row, col) -> Placement
        grid_size: Tiles per row/column
        figsize: Figure size
    """
    if figsize is None:
        figsize = (grid_size * 2, grid_size * 2)

    fig, axes = plt.subplots(grid_size, grid_size, figsize=figsize)
    axes = np.array(axes).reshape(grid_size, grid_size)

    for (r, c), placement in board.items():
        axes[r, c].imshow(placement.pixels, cmap='gray_r', interpolation='nearest')
        axes[r, c].set_title(f"{placement.tile_id} {placement.orientation.name}", fontsize=8)
        axes[r, c].axis('off')

    plt.tight_layout()
    plt.show()
