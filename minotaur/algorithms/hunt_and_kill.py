"""Hunt-and-Kill maze generation."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.random_source import draw_choice

if TYPE_CHECKING:
    from minotaur.grid import Coord, Grid
    from minotaur.random_source import SupportsRandomRange


class HuntAndKill(MazeAlgorithmBase):
    """
    Hunt-and-Kill algorithm.

    Alternates two phases:

    - Kill: random walk from the current cell into unvisited neighbors only,
      carving as it goes, until the walk is boxed in
    - Hunt: scan for the first unvisited cell (row-major) that touches the
      visited region, carve into a random visited neighbor, and resume the
      kill phase from there

    The scan is a min-heap of row-major indices for every unvisited cell
    adjacent to the visited region, so each hunt is O(log n) rather than a
    full rescan.

    Characteristics:
    - Long, winding corridors with few dead ends
    - No stack or recursion
    """

    algorithm = MazeAlgorithm.HUNT_AND_KILL
    description = "Random walks through unvisited cells, resuming from the first cell the walk missed."

    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        frontier: list[int] = []

        current: Coord | None = grid.random_cell(random_source)
        grid.mark_visited(current)
        self._extend_frontier(grid, frontier, current)

        while current is not None:
            # Kill
            unvisited = grid.unvisited_neighbors(current)
            if unvisited:
                following = draw_choice(random_source, unvisited)
                grid.carve(current, following)
                grid.mark_visited(following)
                self._extend_frontier(grid, frontier, following)
                current = following
                continue

            # Hunt
            current = None
            while frontier:
                candidate = grid.coords(heapq.heappop(frontier))
                if grid.is_visited(candidate):
                    continue
                grid.carve(candidate, draw_choice(random_source, grid.visited_neighbors(candidate)))
                grid.mark_visited(candidate)
                self._extend_frontier(grid, frontier, candidate)
                current = candidate
                break

    @staticmethod
    def _extend_frontier(grid: Grid, frontier: list[int], cell: Coord) -> None:
        for neighbor in grid.unvisited_neighbors(cell):
            heapq.heappush(frontier, grid.index(neighbor))
