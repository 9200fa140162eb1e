"""
Raster rendering of mazes.

Two array views of a grid:

- ``to_image_array``: RGB pixels for display or PNG export. The image is
  ``cell_size * n + wall_size`` pixels along each axis; every present wall
  paints a ``wall_size`` band over its cell edge.
- ``to_occupancy_array``: integer occupancy map (1 = wall, 0 = passage) for
  numerical use, e.g. as an obstacle mask on a computational domain.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from minotaur.grid import DIRECTIONS, Direction
from minotaur.utils.maze_logging import get_logger
from minotaur.visualization.colors import parse_hex_color

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from minotaur.grid import Grid
    from minotaur.visualization.colors import RGB

logger = get_logger(__name__)

DEFAULT_CELL_SIZE = 10
DEFAULT_WALL_SIZE = 1
DEFAULT_BACKGROUND = (255, 255, 255)
DEFAULT_WALL = (0, 0, 0)


def _as_rgb(color: RGB | str) -> RGB:
    if isinstance(color, str):
        return parse_hex_color(color)
    r, g, b = color
    for component in (r, g, b):
        if not 0 <= int(component) <= 255:
            raise ValueError(f"Color component {component} outside 0-255 in {color!r}")
    return (int(r), int(g), int(b))


def to_image_array(
    grid: Grid,
    cell_size: int = DEFAULT_CELL_SIZE,
    wall_size: int = DEFAULT_WALL_SIZE,
    background_color: RGB | str = DEFAULT_BACKGROUND,
    wall_color: RGB | str = DEFAULT_WALL,
) -> NDArray[np.uint8]:
    """
    Rasterize a grid to an RGB image.

    Args:
        grid: Maze grid to draw
        cell_size: Pixels per cell, measured between wall origins
        wall_size: Wall thickness in pixels
        background_color: Passage color, RGB triple or hex string
        wall_color: Wall color, RGB triple or hex string

    Returns:
        ``uint8`` array of shape
        ``(cell_size * height + wall_size, cell_size * width + wall_size, 3)``

    Raises:
        ValueError: If a size is below 1 or a color is invalid
    """
    if cell_size < 1 or wall_size < 1:
        raise ValueError(f"cell_size and wall_size must be >= 1, got {cell_size} and {wall_size}")

    image_height = cell_size * grid.height + wall_size
    image_width = cell_size * grid.width + wall_size
    image = np.empty((image_height, image_width, 3), dtype=np.uint8)
    image[:, :] = _as_rgb(background_color)
    wall_pixel = np.array(_as_rgb(wall_color), dtype=np.uint8)

    span = cell_size + wall_size
    for x, y in grid.cells():
        px, py = x * cell_size, y * cell_size
        if grid.has_wall((x, y), Direction.NORTH):
            image[py : py + wall_size, px : px + span] = wall_pixel
        if grid.has_wall((x, y), Direction.SOUTH):
            image[py + cell_size : py + span, px : px + span] = wall_pixel
        if grid.has_wall((x, y), Direction.WEST):
            image[py : py + span, px : px + wall_size] = wall_pixel
        if grid.has_wall((x, y), Direction.EAST):
            image[py : py + span, px + cell_size : px + span] = wall_pixel

    return image


def save_png(
    grid: Grid,
    path: str | Path,
    cell_size: int = DEFAULT_CELL_SIZE,
    wall_size: int = DEFAULT_WALL_SIZE,
    background_color: RGB | str = DEFAULT_BACKGROUND,
    wall_color: RGB | str = DEFAULT_WALL,
) -> Path:
    """
    Render a grid and write it as a PNG file.

    Returns:
        Path of the written file
    """
    import matplotlib.image as mpimg

    image = to_image_array(grid, cell_size, wall_size, background_color, wall_color)
    path = Path(path)
    mpimg.imsave(path, image, format="png")
    logger.info(f"Saved {image.shape[1]}x{image.shape[0]} maze image to {path}")
    return path


def to_occupancy_array(grid: Grid, wall_thickness: int = 1) -> NDArray[np.int32]:
    """
    Convert a maze to an occupancy map.

    Args:
        grid: Maze grid to convert
        wall_thickness: Thickness of walls in array elements

    Returns:
        Array of shape ``(height * (2t + 1) + t, width * (2t + 1) + t)``
        where 1 = wall and 0 = passage
    """
    if wall_thickness < 1:
        raise ValueError(f"wall_thickness must be >= 1, got {wall_thickness}")

    t = wall_thickness
    block = 2 * t + 1
    maze = np.ones((grid.height * block + t, grid.width * block + t), dtype=np.int32)

    for x, y in grid.cells():
        top, left = y * block + t, x * block + t
        maze[top : top + t, left : left + t] = 0

        # Each end of a passage clears one t x t square.
        for direction in DIRECTIONS:
            if grid.has_wall((x, y), direction):
                continue
            row = top + direction.dy * t
            col = left + direction.dx * t
            maze[row : row + t, col : col + t] = 0

    return maze
