"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, DEFAULT_PUZZLE
from .exceptions import SudokuError, InvalidBoardShape, IllegalInsertion, InvalidStartingBoard
from .validator import (
    VALID_NUMBERS,
    is_group_valid,
    is_valid_board,
    available_digits,
    cell_candidates,
    is_valid_placement,
    validate_solution,
)

__all__ = [
    "SudokuBoard",
    "DEFAULT_PUZZLE",
    "VALID_NUMBERS",
    "SudokuError",
    "InvalidBoardShape",
    "IllegalInsertion",
    "InvalidStartingBoard",
    "is_group_valid",
    "is_valid_board",
    "available_digits",
    "cell_candidates",
    "is_valid_placement",
    "validate_solution",
]
