"""Validation and candidate utilities for Sudoku puzzles."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from .board import SudokuBoard


VALID_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9)


def is_group_valid(group: Sequence[int]) -> bool:
    """
    Check a row, column or box for rule violations.

    A group is valid when it has 9 entries, each in 0-9, and no nonzero
    value appears more than once. Zeros (empty cells) are ignored, so a
    partially filled group can be valid.

    Args:
        group: The 9 values of the group.

    Returns:
        True if the group breaks no rule.
    """
    values = np.asarray(group)
    if values.shape != (9,):
        return False
    if values.min() < 0 or values.max() > 9:
        return False

    non_zero = values[values != 0]
    return len(non_zero) == len(np.unique(non_zero))


def is_valid_board(board: SudokuBoard) -> bool:
    """
    Check if the entire board state is valid (no conflicts).

    Every row, column and box must pass is_group_valid(). Empty cells
    are allowed.

    Args:
        board: The Sudoku board to validate.

    Returns:
        True if no constraints are violated.
    """
    for i in range(board.size):
        if not is_group_valid(board.get_row(i)):
            return False

    for j in range(board.size):
        if not is_group_valid(board.get_col(j)):
            return False

    for box_y in range(board.box_size):
        for box_x in range(board.box_size):
            if not is_group_valid(board.get_box(box_x, box_y)):
                return False

    return True


def available_digits(row: Sequence[int], col: Sequence[int], box: Sequence[int]) -> List[int]:
    """
    Digits 1-9 not already used in the given row, column and box.

    Returns:
        Ascending list of the remaining digits, empty if all nine are used.
    """
    used = set(int(v) for v in row) | set(int(v) for v in col) | set(int(v) for v in box)
    return [d for d in VALID_NUMBERS if d not in used]


def cell_candidates(board: SudokuBoard, row: int, col: int) -> List[int]:
    """Candidate digits for (row, col) given its row, column and box."""
    return available_digits(
        board.get_row(row),
        board.get_col(col),
        board.get_box_for_cell(row, col),
    )


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the cell is empty and value does not clash with its peers.
    """
    if value < 1 or value > board.size:
        return False
    if not board.is_empty(row, col):
        return False
    return value in cell_candidates(board, row, col)


def validate_solution(board: SudokuBoard) -> bool:
    """
    Validate that the working grid correctly solves the original puzzle.

    Returns:
        True if the grid is complete, valid, and keeps every given clue.
    """
    fixed = board.origin != 0
    if not np.array_equal(board.grid[fixed], board.origin[fixed]):
        return False
    return board.is_solved()
