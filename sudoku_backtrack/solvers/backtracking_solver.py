"""Depth-first backtracking solver."""

from __future__ import annotations

from .base_solver import BaseSolver
from ..core.board import SudokuBoard
from ..core.validator import cell_candidates


class BacktrackingSolver(BaseSolver):
    """
    Depth-First Search solver using recursive backtracking.

    Cells are filled in row-major order: the next cell tried is always the
    first empty one scanning from the top-left, and its candidates are tried
    in ascending order. The search is therefore deterministic. Recursion
    depth is bounded by the 81 cells of the grid.
    """

    name = "Backtracking"

    def _solve(self, board: SudokuBoard) -> bool:
        """Solve using DFS with backtracking."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
        self.stats.extra["max_depth"] = 0

        return self._backtrack(board, 0)

    def _backtrack(self, board: SudokuBoard, depth: int) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise. On False the cell
        chosen at this level is empty again.
        """
        self.stats.iterations += 1
        if depth > self.stats.extra["max_depth"]:
            self.stats.extra["max_depth"] = depth

        cell = board.first_empty_cell()
        if cell is None:
            # Every placement was checked against its peers, so a full grid is valid
            return True

        row, col = cell
        candidates = cell_candidates(board, row, col)
        self.stats.nodes_explored += 1

        for value in candidates:
            board.set(row, col, value)
            if self._backtrack(board, depth + 1):
                return True

        board.clear(row, col)
        self.stats.backtracks += 1
        return False


def solve(board: SudokuBoard) -> bool:
    """
    Solve board in place with a BacktrackingSolver.

    Returns:
        True if solved; the board's working grid then holds the solution.

    Raises:
        InvalidStartingBoard: If the board already breaks a rule.
    """
    return BacktrackingSolver(track_memory=False).solve(board)
