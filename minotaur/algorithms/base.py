"""
Common contract for perfect maze generation algorithms.

Every algorithm carves a perfect maze into a pristine Grid in place:

1. Fully Connected: a path exists between any two cells
2. No Loops: exactly one path between any pair of cells

The base class owns the parts all six strategies share: rejecting grids that
already have passages, resetting the visited markers before and after the
run, and logging. Subclasses implement ``_carve`` only.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from minotaur.exceptions import GridStateError, UnknownAlgorithmError
from minotaur.utils.maze_logging import get_logger, log_generation_start

if TYPE_CHECKING:
    from minotaur.grid import Grid
    from minotaur.random_source import SupportsRandomRange

logger = get_logger(__name__)

_SEPARATORS = re.compile(r"[\s_\-']+")


class MazeAlgorithm(Enum):
    """Available perfect maze generation algorithms."""

    BINARY_TREE = "BinaryTree"
    SIDEWINDER = "Sidewinder"
    ALDOUS_BRODER = "AldousBroder"
    WILSONS = "Wilsons"
    HUNT_AND_KILL = "HuntAndKill"
    RECURSIVE_BACKTRACKER = "RecursiveBacktracker"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def from_name(cls, name: str | MazeAlgorithm) -> MazeAlgorithm:
        """
        Resolve an algorithm name case-insensitively.

        Underscores, hyphens, spaces and apostrophes are ignored, so
        "wilsons", "Wilson's" and "WILSONS" all resolve to WILSONS.

        Raises:
            UnknownAlgorithmError: If the name matches no algorithm
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = _normalize(name)
            for member in cls:
                if key in (_normalize(member.value), _normalize(member.name)):
                    return member
        raise UnknownAlgorithmError(name, cls.names())

    @classmethod
    def _missing_(cls, value):
        try:
            return cls.from_name(value)
        except UnknownAlgorithmError:
            return None


class MazeAlgorithmBase(ABC):
    """
    Base class for algorithms that carve a perfect maze into a Grid.

    Subclasses set ``algorithm`` and ``description`` and implement ``_carve``.
    """

    algorithm: ClassVar[MazeAlgorithm]
    description: ClassVar[str]

    @property
    def name(self) -> str:
        return self.algorithm.value

    def generate(self, grid: Grid, random_source: SupportsRandomRange) -> Grid:
        """
        Carve a perfect maze into ``grid``.

        Args:
            grid: Freshly allocated grid with every wall closed
            random_source: Source of uniform integers

        Returns:
            The same grid, now a perfect maze

        Raises:
            GridStateError: If the grid already has passages
        """
        if not grid.is_pristine():
            raise GridStateError(self.name, grid.open_edge_count())

        log_generation_start(logger, self.name, {"width": grid.width, "height": grid.height})
        grid.reset_visited()
        self._carve(grid, random_source)
        grid.reset_visited()
        return grid

    @abstractmethod
    def _carve(self, grid: Grid, random_source: SupportsRandomRange) -> None:
        """Remove walls until the grid is a spanning tree."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _normalize(name: str) -> str:
    return _SEPARATORS.sub("", name).lower()
