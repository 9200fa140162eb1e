"""
Rectangular grid of cells for perfect maze generation.

Each cell stores four wall flags (NORTH, SOUTH, EAST, WEST) packed into one
byte of a ``numpy.uint8`` array. A wall between two neighbors is a single
logical edge seen from both sides, so every mutation goes through ``carve``,
which clears both flags together.

Coordinates are ``(x, y)`` tuples with ``y = 0`` the northern row and
``x = 0`` the western column.

Mathematical Foundation:
A perfect maze is a spanning tree of the grid graph: with n = width * height
cells it has exactly n - 1 open edges, is connected, and has no cycles.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

import operator
from enum import IntFlag
from typing import TYPE_CHECKING

import numpy as np

from minotaur.exceptions import InvalidDimensionError, NotAdjacentError
from minotaur.random_source import draw

if TYPE_CHECKING:
    from collections.abc import Iterator

    from numpy.typing import NDArray

    from minotaur.random_source import SupportsRandomRange

Coord = tuple[int, int]


class Direction(IntFlag):
    """Compass directions, valued as wall/passage bit flags."""

    NORTH = 0b0001
    SOUTH = 0b0010
    EAST = 0b0100
    WEST = 0b1000

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def dx(self) -> int:
        return _DELTA[self][0]

    @property
    def dy(self) -> int:
        return _DELTA[self][1]


DIRECTIONS: tuple[Direction, ...] = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
ALL_WALLS = 0b1111

_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}
_DELTA = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}
_DIRECTION_FROM_DELTA = {delta: direction for direction, delta in _DELTA.items()}


class Grid:
    """
    Grid of cells for maze generation.

    All walls start closed and all cells start unvisited. The visited
    markers are scratch state for the generation algorithms; they never
    affect walls and are ignored by equality, rendering and serialization.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize grid.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer
        """
        self.width, self.height = validate_dimensions(width, height)
        self._walls: NDArray[np.uint8] = np.full((self.height, self.width), ALL_WALLS, dtype=np.uint8)
        self._visited: NDArray[np.bool_] = np.zeros((self.height, self.width), dtype=np.bool_)

    @classmethod
    def from_passage_flags(cls, flags: NDArray) -> Grid:
        """
        Rebuild a grid from a per-cell bitmask of OPEN directions.

        Args:
            flags: Integer array of shape (height, width)

        Returns:
            Grid with the corresponding walls removed

        Raises:
            ValueError: If the flags use unknown bits, open a passage through
                the outer boundary, or disagree between neighbors
        """
        flags = np.asarray(flags)
        if flags.ndim != 2:
            raise ValueError(f"Passage flags must be 2-dimensional, got shape {flags.shape}")
        if not np.issubdtype(flags.dtype, np.integer):
            raise ValueError(f"Passage flags must be integers, got dtype {flags.dtype}")
        height, width = flags.shape
        grid = cls(width, height)

        if np.any((flags < 0) | (flags > ALL_WALLS)):
            raise ValueError("Passage flags contain bits other than NORTH, SOUTH, EAST, WEST")

        grid._walls = (ALL_WALLS ^ flags.astype(np.uint8)).astype(np.uint8)
        if not grid.wall_flags_consistent():
            raise ValueError("Passage flags are asymmetric or open through the outer boundary")
        return grid

    # ------------------------------------------------------------------
    # Geometry

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    @property
    def walls(self) -> NDArray[np.uint8]:
        """Read-only view of the wall bitmasks, shape (height, width)."""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    def contains(self, cell: Coord) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Coord]:
        """Iterate over all cell coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def index(self, cell: Coord) -> int:
        """Row-major index of a cell."""
        x, y = self._check(cell)
        return y * self.width + x

    def coords(self, index: int) -> Coord:
        """Cell coordinates for a row-major index."""
        if not 0 <= index < self.num_cells:
            raise IndexError(f"Cell index {index} out of range for {self.num_cells} cells")
        return (index % self.width, index // self.width)

    def random_cell(self, random_source: SupportsRandomRange) -> Coord:
        """Pick a cell uniformly at random."""
        return self.coords(draw(random_source, 0, self.num_cells))

    def neighbor(self, cell: Coord, direction: Direction) -> Coord | None:
        """
        Get the adjacent cell in a direction.

        Returns:
            Neighbor coordinates, or None if the cell is on that boundary
        """
        x, y = self._check(cell)
        dx, dy = _DELTA[direction]
        nx, ny = x + dx, y + dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            return (nx, ny)
        return None

    def neighbors(self, cell: Coord) -> list[Coord]:
        """All grid-adjacent cells, in NORTH, SOUTH, EAST, WEST order."""
        neighbors = []
        for direction in DIRECTIONS:
            neighbor = self.neighbor(cell, direction)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def direction_between(self, cell_a: Coord, cell_b: Coord) -> Direction:
        """
        Direction leading from cell_a to cell_b.

        Raises:
            NotAdjacentError: If the cells do not share an edge
        """
        ax, ay = self._check(cell_a)
        bx, by = self._check(cell_b)
        direction = _DIRECTION_FROM_DELTA.get((bx - ax, by - ay))
        if direction is None:
            raise NotAdjacentError(cell_a, cell_b)
        return direction

    # ------------------------------------------------------------------
    # Walls

    def carve(self, cell_a: Coord, cell_b: Coord) -> None:
        """
        Remove the wall between two adjacent cells, from both sides.

        Raises:
            NotAdjacentError: If cell_b is not a grid neighbor of cell_a
        """
        direction = self.direction_between(cell_a, cell_b)
        ax, ay = cell_a
        bx, by = cell_b
        self._walls[ay, ax] = int(self._walls[ay, ax]) & (ALL_WALLS ^ int(direction))
        self._walls[by, bx] = int(self._walls[by, bx]) & (ALL_WALLS ^ int(direction.opposite))

    def carve_direction(self, cell: Coord, direction: Direction) -> Coord:
        """
        Remove the wall on one side of a cell.

        Returns:
            The neighbor the new passage leads to

        Raises:
            NotAdjacentError: If the wall is on the outer boundary
        """
        neighbor = self.neighbor(cell, direction)
        if neighbor is None:
            raise NotAdjacentError(cell, None, reason=f"{direction.name} is the outer boundary")
        self.carve(cell, neighbor)
        return neighbor

    def is_carved(self, cell_a: Coord, cell_b: Coord) -> bool:
        """True iff the cells are adjacent and no wall separates them."""
        try:
            direction = self.direction_between(cell_a, cell_b)
        except NotAdjacentError:
            return False
        ax, ay = cell_a
        return not int(self._walls[ay, ax]) & int(direction)

    def has_wall(self, cell: Coord, direction: Direction) -> bool:
        """Whether the cell has a wall on the given side (outer walls always do)."""
        x, y = self._check(cell)
        return bool(int(self._walls[y, x]) & int(direction))

    def open_edge_count(self) -> int:
        """Number of passages between neighboring cells."""
        south_open = np.count_nonzero((self._walls[:-1, :] & Direction.SOUTH.value) == 0)
        east_open = np.count_nonzero((self._walls[:, :-1] & Direction.EAST.value) == 0)
        return int(south_open + east_open)

    def is_pristine(self) -> bool:
        """True while no wall has been carved."""
        return bool(np.all(self._walls == ALL_WALLS))

    def passage_flags(self) -> NDArray[np.uint8]:
        """Per-cell bitmask of OPEN directions, shape (height, width)."""
        return (~self._walls & ALL_WALLS).astype(np.uint8)

    def wall_flags_consistent(self) -> bool:
        """
        Check that both views of every edge agree and the boundary is closed.

        Returns:
            True when each interior wall is present on both sides or on
            neither, and every outer wall is present
        """
        w = self._walls
        north = (w & Direction.NORTH.value) != 0
        south = (w & Direction.SOUTH.value) != 0
        east = (w & Direction.EAST.value) != 0
        west = (w & Direction.WEST.value) != 0

        boundary_closed = bool(north[0, :].all() and south[-1, :].all() and west[:, 0].all() and east[:, -1].all())
        vertical_agree = bool(np.array_equal(north[1:, :], south[:-1, :]))
        horizontal_agree = bool(np.array_equal(west[:, 1:], east[:, :-1]))
        return boundary_closed and vertical_agree and horizontal_agree

    # ------------------------------------------------------------------
    # Visited bookkeeping

    def mark_visited(self, cell: Coord) -> None:
        x, y = self._check(cell)
        self._visited[y, x] = True

    def is_visited(self, cell: Coord) -> bool:
        x, y = self._check(cell)
        return bool(self._visited[y, x])

    def reset_visited(self) -> None:
        """Reset visited flags for all cells."""
        self._visited.fill(False)

    def visited_count(self) -> int:
        return int(np.count_nonzero(self._visited))

    def unvisited_neighbors(self, cell: Coord) -> list[Coord]:
        return [n for n in self.neighbors(cell) if not self._visited[n[1], n[0]]]

    def visited_neighbors(self, cell: Coord) -> list[Coord]:
        return [n for n in self.neighbors(cell) if self._visited[n[1], n[0]]]

    # ------------------------------------------------------------------

    def copy(self) -> Grid:
        clone = Grid(self.width, self.height)
        clone._walls = self._walls.copy()
        clone._visited = self._visited.copy()
        return clone

    def __eq__(self, other):
        """Equality based on dimensions and walls only."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self.height == other.height and np.array_equal(self._walls, other._walls)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, open_edges={self.open_edge_count()})"

    def __str__(self) -> str:
        from minotaur.visualization.ascii_art import to_ascii

        return to_ascii(self)

    def _check(self, cell: Coord) -> Coord:
        x, y = cell
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell {cell} is outside the {self.width}x{self.height} grid")
        return x, y


def validate_dimensions(width, height) -> tuple[int, int]:
    try:
        if isinstance(width, bool) or isinstance(height, bool):
            raise TypeError("booleans are not dimensions")
        w = operator.index(width)
        h = operator.index(height)
    except TypeError as e:
        raise InvalidDimensionError(width, height) from e
    if w < 1 or h < 1:
        raise InvalidDimensionError(width, height)
    return w, h


__all__ = ["ALL_WALLS", "DIRECTIONS", "Coord", "Direction", "Grid", "validate_dimensions"]
