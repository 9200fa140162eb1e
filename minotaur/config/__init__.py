"""
Configuration management for minotaur.

Quick Start
-----------
>>> from minotaur.config import MazeConfig, RenderConfig
>>> config = MazeConfig(width=20, height=10, algorithm="hunt-and-kill",
...                     render=RenderConfig(cell_size=16))

>>> # Or load from YAML
>>> from minotaur.config import load_maze_config
>>> config = load_maze_config("mazes/baseline.yaml")
"""

from .core import LoggingConfig, MazeConfig, RenderConfig
from .io import load_maze_config, save_maze_config, validate_yaml_config

__all__ = [
    "LoggingConfig",
    "MazeConfig",
    "RenderConfig",
    "load_maze_config",
    "save_maze_config",
    "validate_yaml_config",
]
