"""Benchmarking framework for comparing Sudoku solvers on a puzzle set."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.exceptions import SudokuError
from ..core.validator import validate_solution
from ..solvers import BaseSolver, BacktrackingSolver, StackSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


def load_puzzles(path: str) -> List[SudokuBoard]:
    """
    Read puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        InvalidBoardShape: If a line is not a well-formed puzzle.
    """
    puzzles = []
    with open(path, "r") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            puzzles.append(SudokuBoard.from_string(line))
    return puzzles


class Benchmark:
    """
    Benchmark framework for comparing Sudoku solving algorithms.

    Runs every solver on its own copy of every puzzle and collects
    performance metrics.
    """

    def __init__(
        self,
        puzzles: List[SudokuBoard],
        solvers: Optional[Dict[str, BaseSolver]] = None,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve.
            solvers: Dict of solver_name -> solver_instance (default: all).
        """
        self.puzzles = puzzles

        if solvers is None:
            self.solvers = {
                "Backtracking": BacktrackingSolver(),
                "Stack": StackSolver(),
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.puzzles) * len(self.solvers)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_id, puzzle in enumerate(self.puzzles):
            for solver_name, solver in self.solvers.items():
                self.results.append(self._run_single(puzzle, puzzle_id, solver_name, solver))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: int,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a copy of a single puzzle."""
        board = puzzle.copy()
        try:
            solver.solve(board)
        except SudokuError as e:
            log.warning("Puzzle %d rejected by %s: %s", puzzle_id, solver_name, e)
            return BenchmarkResult(
                puzzle_id=puzzle_id,
                algorithm=solver_name,
                solved=False,
                time_seconds=0.0,
                memory_bytes=0,
                iterations=0,
                backtracks=0,
                nodes_explored=0,
                extra={"error": str(e)}
            )

        stats = solver.stats
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            algorithm=solver_name,
            solved=stats.solved and validate_solution(board),
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {},
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]
                backtracks = [r.backtracks for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "avg_backtracks": sum(backtracks) / len(backtracks),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save raw benchmark results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
