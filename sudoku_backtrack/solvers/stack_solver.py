"""Backtracking solver driven by an explicit stack instead of recursion."""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .base_solver import BaseSolver
from ..core.board import SudokuBoard
from ..core.validator import cell_candidates

# (row, col, candidates not yet tried)
Frame = Tuple[int, int, Iterator[int]]


class StackSolver(BaseSolver):
    """
    Iterative depth-first search.

    Explores cells and candidates in exactly the same order as
    BacktrackingSolver and reports the same counters, but keeps one frame
    per filled cell on a list rather than on the call stack.
    """

    name = "Backtracking (stack)"

    def _solve(self, board: SudokuBoard) -> bool:
        self.stats.iterations = 1
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
        self.stats.extra["max_depth"] = 0

        stack: List[Frame] = []
        if not self._push(board, stack):
            return True

        while stack:
            row, col, remaining = stack[-1]
            value = next(remaining, None)

            if value is None:
                # Candidates exhausted
                board.clear(row, col)
                stack.pop()
                self.stats.backtracks += 1
                continue

            board.set(row, col, value)
            self.stats.iterations += 1
            if len(stack) > self.stats.extra["max_depth"]:
                self.stats.extra["max_depth"] = len(stack)

            if not self._push(board, stack):
                return True

        return False

    def _push(self, board: SudokuBoard, stack: List[Frame]) -> bool:
        """Push a frame for the next empty cell. False when the grid is full."""
        cell = board.first_empty_cell()
        if cell is None:
            return False

        row, col = cell
        self.stats.nodes_explored += 1
        stack.append((row, col, iter(cell_candidates(board, row, col))))
        return True
