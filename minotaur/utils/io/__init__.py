"""
Maze file formats.

- ``.mz``: compact binary snapshot of a generated maze, reloadable for
  re-rendering
"""

from __future__ import annotations

from .mz_format import dumps, load_maze, loads, save_maze

__all__ = ["dumps", "load_maze", "loads", "save_maze"]
