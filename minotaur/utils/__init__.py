"""Support utilities for minotaur: logging and maze file I/O."""

from __future__ import annotations

from .maze_logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
