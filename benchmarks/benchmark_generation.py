#!/usr/bin/env python3
"""
Benchmark maze generation for every algorithm.

Measures wall-clock time of a single generate() call on a pristine grid:
- Small grids (10x10)
- Large grids (100x100)

Each iteration builds a fresh Grid and a freshly seeded RandomSource so
every algorithm is timed on identical inputs.
"""

import time

import numpy as np

from minotaur.algorithms import MazeAlgorithm, get_algorithm
from minotaur.grid import Grid
from minotaur.random_source import RandomSource

# ============================================================================
# Benchmark Configuration
# ============================================================================

GRID_SIZES = [
    (10, 10),
    (100, 100),
]

N_WARMUP = 1
N_ITERATIONS = 10
BASE_SEED = 2024


# ============================================================================
# Benchmark Utilities
# ============================================================================


def benchmark_algorithm(
    algorithm: MazeAlgorithm,
    width: int,
    height: int,
    n_warmup: int = N_WARMUP,
    n_iterations: int = N_ITERATIONS,
) -> dict[str, float]:
    """
    Time one algorithm at one grid size.

    Returns:
        Dictionary with timing statistics (mean, std, min, max)
    """
    generator = get_algorithm(algorithm)

    for i in range(n_warmup):
        generator.generate(Grid(width, height), RandomSource(seed=BASE_SEED + i))

    times = []
    for i in range(n_iterations):
        grid = Grid(width, height)
        source = RandomSource(seed=BASE_SEED + i)
        start = time.perf_counter()
        generator.generate(grid, source)
        times.append(time.perf_counter() - start)

    times = np.array(times)

    return {
        "algorithm": algorithm.value,
        "size": f"{width}x{height}",
        "mean": float(np.mean(times)),
        "std": float(np.std(times)),
        "min": float(np.min(times)),
        "max": float(np.max(times)),
    }


# ============================================================================
# Main Benchmark Runner
# ============================================================================


def run_all_benchmarks(grid_sizes=None):
    """Run every algorithm at every grid size and print a summary table."""
    grid_sizes = grid_sizes or GRID_SIZES

    print("=" * 80)
    print("Maze Generation Benchmarks")
    print("=" * 80)
    print()

    all_results = []

    for width, height in grid_sizes:
        print(f"Grid Size: {width} × {height}")
        print("-" * 80)

        for algorithm in MazeAlgorithm:
            result = benchmark_algorithm(algorithm, width, height)
            all_results.append(result)
            print(f"  {result['algorithm']:25s}: {result['mean'] * 1000:10.3f} ± {result['std'] * 1000:8.3f} ms")

        print()

    print("=" * 80)
    print("Benchmark Complete")
    print("=" * 80)
    print()
    print("Summary:")
    print(f"  - Warmup iterations: {N_WARMUP}")
    print(f"  - Measurement iterations: {N_ITERATIONS}")
    print(f"  - Grid sizes tested: {len(grid_sizes)}")
    print(f"  - Total benchmarks: {len(all_results)}")
    print()

    return all_results


if __name__ == "__main__":
    results = run_all_benchmarks()
