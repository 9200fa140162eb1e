from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("minotaur")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .algorithms import MazeAlgorithm, MazeAlgorithmBase, get_algorithm, list_algorithms
from .exceptions import (
    ColorParseError,
    GridStateError,
    InvalidDimensionError,
    MazeError,
    MazeFormatError,
    NotAdjacentError,
    RandomSourceError,
    UnknownAlgorithmError,
)
from .generator import PerfectMazeGenerator, generate_maze, verify_perfect_maze
from .grid import Direction, Grid
from .random_source import RandomSource, SupportsRandomRange

generate = generate_maze

__all__ = [
    "ColorParseError",
    "Direction",
    "Grid",
    "GridStateError",
    "InvalidDimensionError",
    "MazeAlgorithm",
    "MazeAlgorithmBase",
    "MazeError",
    "MazeFormatError",
    "NotAdjacentError",
    "PerfectMazeGenerator",
    "RandomSource",
    "RandomSourceError",
    "SupportsRandomRange",
    "UnknownAlgorithmError",
    "__version__",
    "generate",
    "generate_maze",
    "get_algorithm",
    "list_algorithms",
    "verify_perfect_maze",
]
