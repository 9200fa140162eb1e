"""Aldous-Broder maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.random_source import draw_choice

if TYPE_CHECKING:
    from minotaur.grid import Grid
    from minotaur.random_source import SupportsRandomRange


class AldousBroder(MazeAlgorithmBase):
    """
    Aldous-Broder algorithm (random walk).

    Produces a uniform spanning tree: every possible maze for the grid is
    equally likely.

    Algorithm:
    1. Start at a uniformly chosen cell, mark it visited
    2. Step to a uniformly chosen neighbor
    3. If that neighbor is unvisited, carve to it and mark it
    4. Continue from the neighbor either way until every cell is visited

    Characteristics:
    - Unbiased
    - Run time is the cover time of the random walk, which grows
      superlinearly with grid size and has no worst-case bound
    """

    algorithm = MazeAlgorithm.ALDOUS_BRODER
    description = "Random walk until every cell is visited; uniform over all mazes but slow to finish."

    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        current = grid.random_cell(random_source)
        grid.mark_visited(current)
        remaining = grid.num_cells - 1

        while remaining > 0:
            neighbor = draw_choice(random_source, grid.neighbors(current))
            if not grid.is_visited(neighbor):
                grid.carve(current, neighbor)
                grid.mark_visited(neighbor)
                remaining -= 1
            current = neighbor
