"""
Seedable random source consumed by the maze generation algorithms.

Algorithms never touch a global RNG. They receive any object satisfying
``SupportsRandomRange`` and draw every random decision through ``draw``,
which enforces the range contract. ``RandomSource`` is the default
implementation, a thin wrapper over ``numpy.random.Generator`` (PCG64).

Reproducibility: a fixed seed plus a fixed sequence of ``next_in_range``
calls replays the same values. When no seed is supplied one is taken from
system entropy and kept on ``RandomSource.seed`` so the run can be repeated.
"""

from __future__ import annotations

from numbers import Integral
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

import numpy as np

from minotaur.exceptions import RandomSourceError

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


@runtime_checkable
class SupportsRandomRange(Protocol):
    """Anything that can produce a uniform integer in [low, high)."""

    def next_in_range(self, low: int, high: int) -> int: ...


class RandomSource:
    """
    Uniform integer stream backed by ``numpy.random.default_rng``.

    Args:
        seed: Non-negative seed. None draws a fresh seed from system entropy.
    """

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
        elif isinstance(seed, bool) or not isinstance(seed, Integral):
            raise TypeError(f"seed must be an integer, got {type(seed).__name__}")
        elif seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")
        self.seed = int(seed)
        self._rng = np.random.default_rng(self.seed)

    def next_in_range(self, low: int, high: int) -> int:
        """
        Draw a uniform integer in [low, high).

        Raises:
            ValueError: If the range is empty
        """
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return int(self._rng.integers(low, high))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"


def draw(source: SupportsRandomRange, low: int, high: int) -> int:
    """
    Draw from an injected source, checking that it honored the requested range.

    Raises:
        RandomSourceError: If the source returned a non-integer or a value
            outside [low, high)
    """
    value = source.next_in_range(low, high)
    if isinstance(value, bool) or not isinstance(value, Integral) or not low <= value < high:
        raise RandomSourceError(value, low, high)
    return int(value)


def draw_choice(source: SupportsRandomRange, options: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence uniformly."""
    return options[draw(source, 0, len(options))]


__all__ = ["RandomSource", "SupportsRandomRange", "draw", "draw_choice"]
