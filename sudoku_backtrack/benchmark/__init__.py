"""Benchmark module for comparing Sudoku solvers."""

from .benchmark import Benchmark, BenchmarkResult, load_puzzles

__all__ = ["Benchmark", "BenchmarkResult", "load_puzzles"]
