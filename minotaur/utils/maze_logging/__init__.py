"""
Logging utilities for minotaur.

Usage:
    >>> from minotaur.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Carving passages...")
"""

from __future__ import annotations

from .logger import (
    COLORLOG_AVAILABLE,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    get_logger,
    log_generation_completion,
    log_generation_start,
)

__all__ = [
    "COLORLOG_AVAILABLE",
    "MazeFormatter",
    "MazeLogger",
    "configure_development_logging",
    "configure_logging",
    "get_logger",
    "log_generation_completion",
    "log_generation_start",
]
