"""Wilson's maze generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.random_source import draw_choice

if TYPE_CHECKING:
    from minotaur.grid import Coord, Grid
    from minotaur.random_source import SupportsRandomRange


class Wilsons(MazeAlgorithmBase):
    """
    Wilson's algorithm using loop-erased random walks.

    Produces a uniform spanning tree, like Aldous-Broder, but slow to start
    and fast to finish.

    Algorithm:
    1. Mark one uniformly chosen cell as part of the maze
    2. Start a walk from a uniformly chosen unvisited cell
    3. Walk randomly; whenever the walk re-enters a cell already on its
       path, erase the loop by truncating the path back to that cell
    4. When the walk reaches the maze, carve the whole path into it
    5. Repeat until no unvisited cells remain
    """

    algorithm = MazeAlgorithm.WILSONS
    description = "Loop-erased random walks; uniform over all mazes, slow start and fast finish."

    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        unvisited = _CellPool(grid.cells())

        first = draw_choice(random_source, unvisited.cells)
        grid.mark_visited(first)
        unvisited.remove(first)

        while unvisited:
            start = draw_choice(random_source, unvisited.cells)
            path = self._loop_erased_walk(grid, random_source, start)

            for cell, following in zip(path, path[1:]):
                grid.carve(cell, following)
                grid.mark_visited(cell)
                unvisited.remove(cell)

    @staticmethod
    def _loop_erased_walk(grid: Grid, random_source: SupportsRandomRange, start: Coord) -> list[Coord]:
        """
        Walk from ``start`` until a visited cell is reached.

        Returns:
            Simple path from start to the first visited cell, inclusive
        """
        path = [start]
        position = {start: 0}
        current = start

        while not grid.is_visited(current):
            current = draw_choice(random_source, grid.neighbors(current))
            if current in position:
                cut = position[current] + 1
                for erased in path[cut:]:
                    del position[erased]
                del path[cut:]
            else:
                position[current] = len(path)
                path.append(current)

        return path


class _CellPool:
    """Unordered set of cells with O(1) removal and indexable storage for uniform picks."""

    def __init__(self, cells):
        self.cells: list[Coord] = list(cells)
        self._index = {cell: i for i, cell in enumerate(self.cells)}

    def remove(self, cell: Coord) -> None:
        i = self._index.pop(cell)
        last = self.cells.pop()
        if i < len(self.cells):
            self.cells[i] = last
            self._index[last] = i

    def __len__(self) -> int:
        return len(self.cells)
