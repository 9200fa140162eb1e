"""
``.mz`` binary format for saving a generated maze and re-rendering it later.

Layout (all integers little-endian):

    offset          size        field
    0               8           n_cells    (u64)
    8               n_cells     passage flags, one byte per cell, row-major
    8 + n_cells     8           width      (u64)
    16 + n_cells    8           height     (u64)

A passage-flag byte has bit 1 set when the cell is open to the north, 2 to
the south, 4 to the east and 8 to the west.

Examples:
    Save a maze:
        >>> from minotaur.utils.io import save_maze
        >>> save_maze(grid, 'maze.mz')

    Load it back:
        >>> from minotaur.utils.io import load_maze
        >>> grid = load_maze('maze.mz')
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from minotaur.exceptions import MazeFormatError
from minotaur.grid import Grid
from minotaur.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from os import PathLike

logger = get_logger(__name__)

_U64 = np.dtype("<u8")
_HEADER_SIZE = _U64.itemsize
_TRAILER_SIZE = 2 * _U64.itemsize


def dumps(grid: Grid) -> bytes:
    """Serialize a grid to ``.mz`` bytes."""
    flags = grid.passage_flags()
    return b"".join(
        [
            np.array([grid.num_cells], dtype=_U64).tobytes(),
            flags.tobytes(order="C"),
            np.array([grid.width, grid.height], dtype=_U64).tobytes(),
        ]
    )


def loads(data: bytes, source: str | None = None) -> Grid:
    """
    Deserialize ``.mz`` bytes into a grid.

    Args:
        data: Serialized maze
        source: Where the data came from, used in error messages

    Raises:
        MazeFormatError: If the data is truncated, has trailing bytes,
            disagrees with its own dimensions, or describes passages that
            are not symmetric or lead off the grid
    """
    data = bytes(data)
    if len(data) < _HEADER_SIZE + _TRAILER_SIZE:
        raise MazeFormatError("Maze data is truncated", source=source, size=len(data))

    n_cells = int(np.frombuffer(data, dtype=_U64, count=1)[0])
    expected_size = _HEADER_SIZE + n_cells + _TRAILER_SIZE
    if len(data) < expected_size:
        raise MazeFormatError(
            "Maze data is truncated",
            source=source,
            size=len(data),
            expected_size=expected_size,
        )
    if len(data) > expected_size:
        raise MazeFormatError(
            "Maze data has trailing bytes",
            source=source,
            size=len(data),
            expected_size=expected_size,
        )

    width, height = (int(v) for v in np.frombuffer(data, dtype=_U64, count=2, offset=_HEADER_SIZE + n_cells))
    if width == 0 or height == 0:
        raise MazeFormatError("Maze dimensions must be positive", source=source, width=width, height=height)
    if width * height != n_cells:
        raise MazeFormatError(
            "Cell count does not match maze dimensions",
            source=source,
            n_cells=n_cells,
            width=width,
            height=height,
        )

    flags = np.frombuffer(data, dtype=np.uint8, count=n_cells, offset=_HEADER_SIZE).reshape(height, width)
    try:
        return Grid.from_passage_flags(flags)
    except ValueError as e:
        raise MazeFormatError(f"Invalid passage flags: {e}", source=source) from e


def save_maze(grid: Grid, path: str | PathLike) -> Path:
    """
    Write a grid to a ``.mz`` file.

    Returns:
        Path of the written file
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_bytes(dumps(grid))
    logger.info(f"Saved {grid.width}x{grid.height} maze to {filepath}")
    return filepath


def load_maze(path: str | PathLike) -> Grid:
    """
    Read a grid from a ``.mz`` file.

    Raises:
        FileNotFoundError: If the file does not exist
        MazeFormatError: If the file contents are malformed
    """
    filepath = Path(path)
    if not filepath.exists():
        raise FileNotFoundError(f"Maze file not found: {filepath}")

    grid = loads(filepath.read_bytes(), source=str(filepath))
    logger.debug(f"Loaded {grid.width}x{grid.height} maze from {filepath}")
    return grid


__all__ = ["dumps", "load_maze", "loads", "save_maze"]
