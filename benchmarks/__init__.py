"""
Benchmarks for minotaur maze generation.

Sub-modules:
- benchmark_generation: Per-algorithm timing at small and large grid sizes
"""
