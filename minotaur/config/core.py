"""
Configuration models for maze generation and rendering.

A ``MazeConfig`` describes one generation request (size, algorithm, seed)
together with how the result should be drawn (``RenderConfig``) and how
verbose the run should be (``LoggingConfig``). Models are pydantic, so the
same validation applies whether a config is built in Python or loaded from
YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from minotaur.algorithms import MazeAlgorithm
from minotaur.visualization.colors import RGB, format_hex_color, parse_hex_color


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        Logging level (default: WARNING)
    use_colors : bool
        Colored terminal output when colorlog is installed (default: True)
    log_file : str | None
        Also write log records to this file (default: None)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    use_colors: bool = True
    log_file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class RenderConfig(BaseModel):
    """
    Configuration for image rendering.

    Attributes
    ----------
    cell_size : int
        Pixels per cell (default: 10)
    wall_size : int
        Wall thickness in pixels (default: 1)
    background_color : str
        Passage color as ``#RRGGBB`` (default: #FFFFFF)
    wall_color : str
        Wall color as ``#RRGGBB`` (default: #000000)
    """

    cell_size: int = Field(default=10, ge=1)
    wall_size: int = Field(default=1, ge=1)
    background_color: str = "#FFFFFF"
    wall_color: str = "#000000"

    @field_validator("background_color", "wall_color", mode="before")
    @classmethod
    def normalize_color(cls, v):
        """Accept ``RRGGBB``, ``#rrggbb`` or an RGB triple; store ``#RRGGBB``."""
        if isinstance(v, (list, tuple)):
            if len(v) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in v):
                raise ValueError(f"RGB color must be three integers in 0-255, got {v!r}")
            return format_hex_color(tuple(v))
        return format_hex_color(parse_hex_color(v))

    @property
    def background_rgb(self) -> RGB:
        return parse_hex_color(self.background_color)

    @property
    def wall_rgb(self) -> RGB:
        return parse_hex_color(self.wall_color)

    def image_kwargs(self) -> dict:
        """Keyword arguments for ``to_image_array`` / ``save_png``."""
        return {
            "cell_size": self.cell_size,
            "wall_size": self.wall_size,
            "background_color": self.background_rgb,
            "wall_color": self.wall_rgb,
        }


class MazeConfig(BaseModel):
    """
    Complete configuration for one maze.

    Attributes
    ----------
    width : int
        Maze width in cells (default: 5)
    height : int
        Maze height in cells (default: 5)
    algorithm : MazeAlgorithm
        Generation algorithm (default: AldousBroder). Any spelling accepted
        by ``MazeAlgorithm.from_name`` is allowed, e.g. "wilsons".
    seed : int | None
        Random seed; None draws one from system entropy (default: None)
    render : RenderConfig
        Image rendering options
    logging : LoggingConfig
        Logging options
    """

    width: int = Field(default=5, ge=1)
    height: int = Field(default=5, ge=1)
    algorithm: MazeAlgorithm = MazeAlgorithm.ALDOUS_BRODER
    seed: int | None = Field(default=None, ge=0)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("algorithm", mode="before")
    @classmethod
    def resolve_algorithm(cls, v):
        return MazeAlgorithm.from_name(v)

    @model_validator(mode="after")
    def validate_log_file(self) -> MazeConfig:
        """Validate that a log file, if given, is not a directory."""
        if self.logging.log_file is not None and Path(self.logging.log_file).is_dir():
            raise ValueError(f"logging.log_file points to a directory: {self.logging.log_file}")
        return self

    @property
    def num_cells(self) -> int:
        return self.width * self.height


__all__ = ["LoggingConfig", "MazeConfig", "RenderConfig"]
