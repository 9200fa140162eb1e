"""Recursive Backtracker maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.random_source import draw_choice

if TYPE_CHECKING:
    from minotaur.grid import Grid
    from minotaur.random_source import SupportsRandomRange


class RecursiveBacktracker(MazeAlgorithmBase):
    """
    Recursive Backtracking algorithm (depth-first search).

    Algorithm:
    1. Start from a random cell, mark it visited, push it on the stack
    2. While the stack is not empty:
       a. Look at the cell on top of the stack
       b. If it has unvisited neighbors, carve to a random one, mark it,
          and push it
       c. Otherwise pop it (backtrack)

    Uses an explicit stack, so large grids never hit the recursion limit.

    Characteristics:
    - Long, winding corridors
    - Low branching factor, few dead ends
    """

    algorithm = MazeAlgorithm.RECURSIVE_BACKTRACKER
    description = "Depth-first search with an explicit stack; long winding corridors."

    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        start = grid.random_cell(random_source)
        grid.mark_visited(start)
        stack = [start]

        while stack:
            current = stack[-1]
            unvisited = grid.unvisited_neighbors(current)

            if unvisited:
                following = draw_choice(random_source, unvisited)
                grid.carve(current, following)
                grid.mark_visited(following)
                stack.append(following)
            else:
                stack.pop()
