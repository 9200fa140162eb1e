"""
Perfect maze generation algorithms.

Each algorithm is a ``MazeAlgorithmBase`` subclass that carves a spanning
tree into a pristine Grid. ``get_algorithm`` resolves a name or enum member
to a ready-to-use instance.
"""

from __future__ import annotations

from minotaur.algorithms.aldous_broder import AldousBroder
from minotaur.algorithms.base import MazeAlgorithm, MazeAlgorithmBase
from minotaur.algorithms.binary_tree import BinaryTree
from minotaur.algorithms.hunt_and_kill import HuntAndKill
from minotaur.algorithms.recursive_backtracker import RecursiveBacktracker
from minotaur.algorithms.sidewinder import Sidewinder
from minotaur.algorithms.wilsons import Wilsons

ALGORITHM_REGISTRY: dict[MazeAlgorithm, type[MazeAlgorithmBase]] = {
    MazeAlgorithm.BINARY_TREE: BinaryTree,
    MazeAlgorithm.SIDEWINDER: Sidewinder,
    MazeAlgorithm.ALDOUS_BRODER: AldousBroder,
    MazeAlgorithm.WILSONS: Wilsons,
    MazeAlgorithm.HUNT_AND_KILL: HuntAndKill,
    MazeAlgorithm.RECURSIVE_BACKTRACKER: RecursiveBacktracker,
}


def get_algorithm(algorithm: str | MazeAlgorithm) -> MazeAlgorithmBase:
    """
    Instantiate the algorithm for a name or enum member.

    Raises:
        UnknownAlgorithmError: If the name matches no algorithm
    """
    return ALGORITHM_REGISTRY[MazeAlgorithm.from_name(algorithm)]()


def list_algorithms() -> list[tuple[str, str]]:
    """(name, description) for every algorithm, in declaration order."""
    return [(member.value, ALGORITHM_REGISTRY[member].description) for member in MazeAlgorithm]


__all__ = [
    "ALGORITHM_REGISTRY",
    "AldousBroder",
    "BinaryTree",
    "HuntAndKill",
    "MazeAlgorithm",
    "MazeAlgorithmBase",
    "RecursiveBacktracker",
    "Sidewinder",
    "Wilsons",
    "get_algorithm",
    "list_algorithms",
]
