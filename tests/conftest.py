"""
Pytest configuration and shared fixtures for the minotaur test suite.

This module provides common fixtures, test configuration, and utilities
used across the entire test suite.
"""

import pytest

from minotaur import Grid, RandomSource
from minotaur.algorithms import MazeAlgorithm
from minotaur.utils.maze_logging import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")
    config.addinivalue_line("markers", "statistical: Statistical property tests over many seeded runs")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name or "uniform" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Restore library-default logging after each test."""
    yield
    configure_logging(level="WARNING", use_colors=False)


# =============================================================================
# Maze Fixtures
# =============================================================================


@pytest.fixture(params=list(MazeAlgorithm), ids=lambda a: a.value)
def algorithm(request):
    """Parametrized fixture over all six algorithms."""
    return request.param


@pytest.fixture
def rng():
    """Seeded random source for reproducible tests."""
    return RandomSource(seed=12345678)


@pytest.fixture
def pristine_grid():
    """Small grid with every wall closed."""
    return Grid(4, 3)


class ScriptedSource:
    """Random source replaying a fixed list of draws, for exact-path tests."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next_in_range(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


class ConstantSource:
    """Random source that always returns the same value."""

    def __init__(self, value):
        self.value = value

    def next_in_range(self, low, high):
        return self.value


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def constant_source():
    return ConstantSource
