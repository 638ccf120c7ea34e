"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking_solver import BacktrackingSolver, solve
from .stack_solver import StackSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "StackSolver",
    "solve",
]
