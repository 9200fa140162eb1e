"""
Logging Infrastructure for minotaur

Library code only ever calls ``get_logger(__name__)``. Verbosity, colors and
an optional log file are decided once by whoever embeds the library (the
command line, a notebook, a test) through ``configure_logging``; every logger
handed out so far is rewired when the settings change.

Generation runs report through two structured helpers so that every
algorithm produces the same messages:

    Starting Wilsons
    Wilsons completed - 200 cells, 199 passages, time: 0.004s, seed: 42
"""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path
from typing import Any, ClassVar

try:
    import colorlog

    COLORLOG_AVAILABLE = True
except ImportError:
    COLORLOG_AVAILABLE = False

_DATE_FORMAT = "%H:%M:%S"
_RECORD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}
# Libraries pulled in for PNG export that are chatty at DEBUG.
_NOISY_LIBRARIES = ("matplotlib", "PIL")


class MazeFormatter(logging.Formatter):
    """Formatter for minotaur log records, colored when colorlog is installed."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors and COLORLOG_AVAILABLE
        self.include_location = include_location

        record_format = _RECORD_FORMAT
        if include_location:
            record_format += " [%(filename)s:%(lineno)d]"
        super().__init__(record_format, datefmt=_DATE_FORMAT)

        self._colored = None
        if self.use_colors:
            self._colored = colorlog.ColoredFormatter(
                "%(log_color)s" + record_format,
                datefmt=_DATE_FORMAT,
                log_colors=_LEVEL_COLORS,
            )

    def format(self, record):
        if self._colored is not None:
            return self._colored.format(record)
        return super().format(record)


class MazeLogger:
    """
    Process-wide registry of minotaur loggers and their shared settings.

    A single instance exists (``MazeLogger() is MazeLogger()``); all state is
    held on the class and guarded by one lock.
    """

    _instance = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}

    level: ClassVar[int] = logging.WARNING
    use_colors: ClassVar[bool] = True
    include_location: ClassVar[bool] = False
    log_file: ClassVar[Path | None] = None
    stream: ClassVar[Any] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
        suppress_external: bool = True,
        stream=None,
    ):
        """
        Change the settings of every minotaur logger.

        Args:
            level: Level name (case-insensitive) or number
            log_to_file: Also write records to a file
            log_file_path: File to write to; defaults to ``minotaur.log`` in
                the working directory
            use_colors: Colored console output when colorlog is installed
            include_location: Append ``[file:line]`` to each record
            suppress_external: Keep plotting libraries at WARNING
            stream: Console stream; defaults to ``sys.stderr`` at call time
        """
        with cls._lock:
            cls.level = getattr(logging, level.upper()) if isinstance(level, str) else int(level)
            cls.use_colors = use_colors and COLORLOG_AVAILABLE
            cls.include_location = include_location
            cls.stream = stream

            cls.log_file = None
            if log_to_file:
                cls.log_file = Path(log_file_path) if log_file_path is not None else Path.cwd() / "minotaur.log"
                cls.log_file.parent.mkdir(parents=True, exist_ok=True)

            if suppress_external:
                for name in _NOISY_LIBRARIES:
                    logging.getLogger(name).setLevel(logging.WARNING)

            for logger in cls._loggers.values():
                cls._attach_handlers(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Return the logger for ``name``, wiring it up on first use."""
        logger = cls._loggers.get(name)
        if logger is not None:
            return logger

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                cls._attach_handlers(logger)
                cls._loggers[name] = logger
        return cls._loggers[name]

    @classmethod
    def _attach_handlers(cls, logger: logging.Logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()

        logger.setLevel(cls.level)
        logger.propagate = False

        console = logging.StreamHandler(cls.stream if cls.stream is not None else sys.stderr)
        console.setFormatter(MazeFormatter(use_colors=cls.use_colors, include_location=cls.include_location))
        logger.addHandler(console)

        if cls.log_file is not None:
            file_handler = logging.FileHandler(cls.log_file)
            file_handler.setFormatter(MazeFormatter(use_colors=False, include_location=cls.include_location))
            logger.addHandler(file_handler)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name (if None, uses calling module name)
    """
    if name is None:
        import inspect

        caller = inspect.currentframe().f_back
        name = caller.f_globals.get("__name__", "minotaur") if caller else "minotaur"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """Configure all minotaur loggers; see ``MazeLogger.configure`` for options."""
    MazeLogger.configure(**kwargs)


def configure_development_logging(include_location: bool = True):
    """DEBUG level, colors and source locations, with library logging left alone."""
    configure_logging(
        level="DEBUG",
        use_colors=True,
        include_location=include_location,
        suppress_external=False,
    )
    get_logger("minotaur.development").debug("Development logging enabled")


def log_generation_start(logger: logging.Logger, algorithm: str, config: dict[str, Any]):
    """Log the start of a generation run with its parameters."""
    logger.debug(f"Starting {algorithm}")
    logger.debug(f"Generation parameters: {config}")


def log_generation_completion(
    logger: logging.Logger,
    algorithm: str,
    cells: int,
    passages: int,
    execution_time: float,
    seed: int | None = None,
):
    """Log generation completion with summary."""
    msg = f"{algorithm} completed - {cells} cells, {passages} passages, time: {execution_time:.3f}s"
    if seed is not None:
        msg += f", seed: {seed}"
    logger.info(msg)
