"""9x9 Sudoku solver: board model, rule checks and backtracking search."""

from .core import (
    SudokuBoard,
    DEFAULT_PUZZLE,
    SudokuError,
    InvalidBoardShape,
    IllegalInsertion,
    InvalidStartingBoard,
    is_group_valid,
    is_valid_board,
    available_digits,
)
from .solvers import BacktrackingSolver, StackSolver, SolverStats, solve

__all__ = [
    "SudokuBoard",
    "DEFAULT_PUZZLE",
    "SudokuError",
    "InvalidBoardShape",
    "IllegalInsertion",
    "InvalidStartingBoard",
    "is_group_valid",
    "is_valid_board",
    "available_digits",
    "BacktrackingSolver",
    "StackSolver",
    "SolverStats",
    "solve",
]
