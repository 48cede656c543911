"""Visualization utilities for the assembled image."""
from .display import (
    render_ascii,
    display_image,
    display_board,
    save_image,
    save_bitmap
)
