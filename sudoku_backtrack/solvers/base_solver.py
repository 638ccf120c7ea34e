"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any
import logging
import time
import tracemalloc

from ..core.board import SudokuBoard
from ..core.exceptions import InvalidStartingBoard
from ..core.validator import is_valid_board

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for Sudoku solvers.

    Solvers work on the board they are given: on success its working grid
    holds the solution, on failure it is left as it was before the call.
    """

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak memory with tracemalloc. Slows the
                          search down noticeably; switch off for timing runs.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> bool:
        """
        Solve a Sudoku puzzle in place with timing and memory tracking.

        Args:
            board: The puzzle to solve.

        Returns:
            True if the board now holds a complete solution.

        Raises:
            InvalidStartingBoard: If the board already breaks a rule.
        """
        self.stats = SolverStats(algorithm=self.name)

        if not is_valid_board(board):
            raise InvalidStartingBoard("Board must be valid before solving")

        log.debug("%s: solving board with %d empty cells", self.name, board.count_empty())

        # Leave an outer tracemalloc session alone
        owns_tracing = self.track_memory and not tracemalloc.is_tracing()
        if owns_tracing:
            tracemalloc.start()

        start_time = time.perf_counter()
        try:
            solved = self._solve(board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if owns_tracing:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = solved
        if solved:
            log.debug(
                "%s: solved in %.4fs (%d iterations, %d backtracks)",
                self.name, self.stats.time_seconds,
                self.stats.iterations, self.stats.backtracks,
            )
        else:
            log.info("%s: no solution after %d iterations", self.name, self.stats.iterations)

        return solved

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A valid board to fill in place.

        Returns:
            True if solved. On False every cell the search wrote must have
            been cleared again.
        """
        pass
