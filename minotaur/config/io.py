"""
YAML I/O for maze configurations.

This module provides functions to load and save maze configurations from/to
YAML files with schema validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

if TYPE_CHECKING:
    from .core import MazeConfig


def load_maze_config(path: str | Path) -> MazeConfig:
    """
    Load maze configuration from YAML file.

    Parameters
    ----------
    path : str | Path
        Path to YAML configuration file

    Returns
    -------
    MazeConfig
        Validated maze configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If configuration is invalid (chained from pydantic's ValidationError)
    yaml.YAMLError
        If YAML syntax is invalid

    YAML Format
    -----------
    width: 20
    height: 10
    algorithm: Wilsons
    seed: 42
    render:
      cell_size: 16
      wall_size: 2
      wall_color: "#1F2937"
    logging:
      level: INFO
    """
    from .core import MazeConfig

    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {path}: expected a mapping, got {type(data).__name__}")

    try:
        return MazeConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def save_maze_config(config: MazeConfig, path: str | Path) -> None:
    """
    Save maze configuration to YAML file.

    Parameters
    ----------
    config : MazeConfig
        Configuration to save
    path : str | Path
        Output file path

    Examples
    --------
    >>> config = MazeConfig(width=20, height=10, algorithm="Wilsons", seed=42)
    >>> save_maze_config(config, "mazes/wilsons_20x10.yaml")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False, indent=2, allow_unicode=True)


def validate_yaml_config(path: str | Path) -> tuple[bool, str]:
    """
    Validate YAML configuration without keeping the result.

    Returns
    -------
    tuple[bool, str]
        (is_valid, message) - True if valid, False with error message otherwise
    """
    try:
        load_maze_config(path)
        return True, "Configuration is valid"
    except FileNotFoundError as e:
        return False, str(e)
    except yaml.YAMLError as e:
        return False, f"YAML syntax error: {e}"
    except ValueError as e:
        return False, f"Validation error: {e}"
