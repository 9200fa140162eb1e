"""
Perfect maze generation entry points.

``generate_maze`` is the one-call API: pick an algorithm by name, a size and
an optional seed, get back a finished Grid. ``PerfectMazeGenerator`` is the
reusable object form that remembers its settings and the seed of its last
run. ``verify_perfect_maze`` checks the spanning-tree invariant of any grid.

Example:
    >>> grid = generate_maze("Wilsons", 20, 10, seed=42)
    >>> verify_perfect_maze(grid)["is_perfect"]
    True
"""

from __future__ import annotations

import time
from collections import deque
from typing import TYPE_CHECKING, Any

from minotaur.algorithms import MazeAlgorithm, get_algorithm
from minotaur.grid import DIRECTIONS, Grid, validate_dimensions
from minotaur.random_source import RandomSource
from minotaur.utils.maze_logging import get_logger, log_generation_completion

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from minotaur.random_source import SupportsRandomRange

logger = get_logger(__name__)


class PerfectMazeGenerator:
    """
    Perfect maze generator for a fixed size and algorithm.

    Dimensions and the algorithm name are validated when the generator is
    built, so a bad request fails before any grid is allocated.
    """

    def __init__(
        self,
        width: int,
        height: int,
        algorithm: str | MazeAlgorithm = MazeAlgorithm.ALDOUS_BRODER,
    ):
        """
        Initialize maze generator.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            algorithm: Algorithm name or enum member

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer
            UnknownAlgorithmError: If the algorithm name is not recognized
        """
        self.width, self.height = validate_dimensions(width, height)
        self.algorithm = MazeAlgorithm.from_name(algorithm)
        self._strategy = get_algorithm(self.algorithm)
        self.grid: Grid | None = None
        self.last_seed: int | None = None

    def generate(self, seed: int | None = None, random_source: SupportsRandomRange | None = None) -> Grid:
        """
        Generate a new perfect maze.

        Args:
            seed: Random seed for reproducibility. Ignored when
                ``random_source`` is given.
            random_source: Custom source of uniform integers

        Returns:
            Freshly allocated grid holding the maze
        """
        if random_source is None:
            random_source = RandomSource(seed)
        self.last_seed = getattr(random_source, "seed", None)

        grid = Grid(self.width, self.height)
        start_time = time.perf_counter()
        self._strategy.generate(grid, random_source)
        elapsed = time.perf_counter() - start_time

        log_generation_completion(
            logger,
            self.algorithm.value,
            cells=grid.num_cells,
            passages=grid.open_edge_count(),
            execution_time=elapsed,
            seed=self.last_seed,
        )
        self.grid = grid
        return grid

    def to_numpy_array(self, wall_thickness: int = 1) -> NDArray:
        """
        Occupancy array of the last generated maze (1 = wall, 0 = passage).

        Raises:
            RuntimeError: If ``generate`` has not been called yet
        """
        if self.grid is None:
            raise RuntimeError("No maze generated yet; call generate() first")
        from minotaur.visualization.image import to_occupancy_array

        return to_occupancy_array(self.grid, wall_thickness=wall_thickness)


def generate_maze(
    algorithm: str | MazeAlgorithm,
    width: int,
    height: int,
    seed: int | None = None,
) -> Grid:
    """
    High-level function to generate a perfect maze.

    Args:
        algorithm: Algorithm name, e.g. "BinaryTree", "wilsons", "hunt-and-kill"
        width: Number of columns
        height: Number of rows
        seed: Random seed for reproducibility

    Returns:
        Grid whose passages form a spanning tree

    Example:
        >>> grid = generate_maze("RecursiveBacktracker", 8, 4, seed=7)
        >>> grid.open_edge_count()
        31
    """
    generator = PerfectMazeGenerator(width, height, algorithm)
    return generator.generate(seed=seed)


def verify_perfect_maze(grid: Grid) -> dict[str, Any]:
    """
    Verify that a maze is perfect (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All cells reachable from any cell
    2. Acyclicity: Exactly (n-1) passages for n cells

    The walk uses its own bookkeeping and leaves the grid's visited markers
    untouched.

    Args:
        grid: Maze grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check (given connectivity)
        - is_symmetric: Wall flags agree on both sides of every edge
        - visited_cells: Number of reachable cells
        - total_cells: Total number of cells
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    start = (0, 0)
    reached = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for direction in DIRECTIONS:
            if grid.has_wall(current, direction):
                continue
            neighbor = grid.neighbor(current, direction)
            if neighbor is not None and neighbor not in reached:
                reached.add(neighbor)
                queue.append(neighbor)

    total_cells = grid.num_cells
    is_connected = len(reached) == total_cells

    passage_count = grid.open_edge_count()
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages
    is_symmetric = grid.wall_flags_consistent()

    return {
        "is_perfect": is_connected and is_no_loops and is_symmetric,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "is_symmetric": is_symmetric,
        "visited_cells": len(reached),
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


__all__ = ["PerfectMazeGenerator", "generate_maze", "verify_perfect_maze"]
