"""
Maze rendering.

- ASCII art for terminals and text files
- RGB image arrays and PNG export (matplotlib)
- Occupancy arrays (1 = wall, 0 = passage) for numerical work
"""

from __future__ import annotations

from .ascii_art import to_ascii
from .colors import format_hex_color, parse_hex_color
from .image import save_png, to_image_array, to_occupancy_array

__all__ = [
    "format_hex_color",
    "parse_hex_color",
    "save_png",
    "to_ascii",
    "to_image_array",
    "to_occupancy_array",
]
