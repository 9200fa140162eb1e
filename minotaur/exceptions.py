"""
Exception classes for minotaur with helpful error messages.

Every exception carries the same structured context as the base class:
a clear message, an optional suggested action, a stable error code and
optional diagnostic data, all folded into the rendered exception text.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation errors.

    Provides structured error information including:
    - Clear error description
    - Suggested actions for resolution
    - Stable error code
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = message

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""

    def __init__(self, width: Any, height: Any):
        diagnostic_data = {
            "width": width,
            "height": height,
        }
        bad = [name for name, value in (("width", width), ("height", height)) if not _is_positive_int(value)]
        message = f"Invalid grid dimension: {' and '.join(bad) or 'size'} must be a positive integer"

        super().__init__(
            message=message,
            suggested_action="Use width >= 1 and height >= 1",
            error_code="INVALID_DIMENSION",
            diagnostic_data=diagnostic_data,
        )
        self.width = width
        self.height = height


class NotAdjacentError(MazeError, ValueError):
    """Raised when carving between two cells that do not share an edge."""

    def __init__(self, cell_a: tuple[int, int], cell_b: tuple[int, int] | None, reason: str | None = None):
        diagnostic_data: dict[str, Any] = {"cell_a": cell_a, "cell_b": cell_b}
        if reason:
            diagnostic_data["reason"] = reason

        super().__init__(
            message=f"Cells {cell_a} and {cell_b} are not grid-adjacent",
            suggested_action="Only carve between horizontally or vertically neighboring cells",
            error_code="NOT_ADJACENT",
            diagnostic_data=diagnostic_data,
        )


class GridStateError(MazeError):
    """Raised when an algorithm receives a grid that already has passages."""

    def __init__(self, algorithm: str, open_edges: int):
        super().__init__(
            message=f"{algorithm} requires a grid with every wall closed",
            suggested_action="Allocate a fresh Grid for each generation run",
            error_code="GRID_NOT_PRISTINE",
            diagnostic_data={"open_edges": open_edges},
        )


class UnknownAlgorithmError(MazeError, ValueError):
    """Raised when an algorithm name cannot be resolved."""

    def __init__(self, name: Any, available: list[str]):
        super().__init__(
            message=f"Unknown algorithm: {name!r}",
            suggested_action=f"Choose one of: {', '.join(available)}",
            error_code="UNKNOWN_ALGORITHM",
        )
        self.name = name
        self.available = available


class RandomSourceError(MazeError, AssertionError):
    """Raised when an injected random source returns a value outside the requested range."""

    def __init__(self, value: Any, low: int, high: int):
        super().__init__(
            message=f"Random source returned {value!r}, outside of [{low}, {high})",
            suggested_action="next_in_range(low, high) must return an integer with low <= value < high",
            error_code="RANDOM_SOURCE_CONTRACT",
            diagnostic_data={"value": value, "low": low, "high": high},
        )


class MazeFormatError(MazeError, ValueError):
    """Raised when serialized maze data is malformed."""

    def __init__(self, message: str, source: str | None = None, **details: Any):
        diagnostic_data = dict(details)
        if source is not None:
            diagnostic_data["source"] = source

        super().__init__(
            message=message,
            suggested_action="Regenerate the file with 'minotaur generate -o maze.mz'",
            error_code="MALFORMED_MAZE_DATA",
            diagnostic_data=diagnostic_data,
        )


class ColorParseError(MazeError, ValueError):
    """Raised when a hex color string cannot be parsed."""

    def __init__(self, value: str, reason: str | None = None):
        if reason is None:
            message = f"Expected a 6 character color value in hex, but got: {value!r}"
        else:
            message = f"Invalid hex color {value!r}: {reason}"

        super().__init__(message=message, error_code="INVALID_COLOR")
        self.value = value


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool) and value >= 1


__all__ = [
    "ColorParseError",
    "GridStateError",
    "InvalidDimensionError",
    "MazeError",
    "MazeFormatError",
    "NotAdjacentError",
    "RandomSourceError",
    "UnknownAlgorithmError",
]
