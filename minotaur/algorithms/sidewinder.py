"""Sidewinder maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.grid import Direction
from minotaur.random_source import draw, draw_choice

if TYPE_CHECKING:
    from minotaur.grid import Coord, Grid
    from minotaur.random_source import SupportsRandomRange


class Sidewinder(MazeAlgorithmBase):
    """
    Sidewinder algorithm.

    Works row by row, west to east, keeping a "run" of cells joined by
    eastward passages. For each cell a fair coin decides whether to extend
    the run east or close it: closing picks one member of the run uniformly
    and carves NORTH from it, then starts a new run.

    Row boundaries:
    - Northern row: always extends east (there is nothing to the north)
    - Last cell of any other row: always closes its run, even a run of one

    Characteristics:
    - O(n), memory bounded by one row
    - Unbroken corridor along the northern row
    - Every run has exactly one northward exit, so rows always connect
    """

    algorithm = MazeAlgorithm.SIDEWINDER
    description = "Row-by-row runs with one northward exit each; a corridor along the top row."

    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        for y in range(grid.height):
            run: list[Coord] = []
            for x in range(grid.width):
                cell = (x, y)
                run.append(cell)
                at_eastern_boundary = x == grid.width - 1

                if y == 0:
                    if not at_eastern_boundary:
                        grid.carve_direction(cell, Direction.EAST)
                    continue

                if at_eastern_boundary or draw(random_source, 0, 2) == 1:
                    member = draw_choice(random_source, run)
                    grid.carve_direction(member, Direction.NORTH)
                    run = []
                else:
                    grid.carve_direction(cell, Direction.EAST)
