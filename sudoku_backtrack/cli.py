"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark, load_puzzles
from .core.board import SudokuBoard
from .core.exceptions import InvalidBoardShape, SudokuError
from .solvers import BacktrackingSolver, StackSolver


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="9x9 Sudoku backtracking solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the built-in sample puzzle
  sudoku-backtrack solve

  # Solve a puzzle given as a string
  sudoku-backtrack solve --puzzle "530070000600195000..."

  # Compare solvers on a file of puzzles
  sudoku-backtrack benchmark --file puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show debug logging and detailed solving statistics"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells). Default: built-in sample"
    )
    source.add_argument(
        "--file", "-f", type=str, default=None,
        help="File whose first puzzle line is solved"
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=["backtracking", "stack", "all"],
        default="backtracking",
        help="Solving algorithm to use (default: backtracking)"
    )
    solve_parser.add_argument(
        "--format",
        choices=["grid", "braces", "string"],
        default="grid",
        help="Output format for boards (default: grid)"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a puzzle for rule violations")
    validate_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument(
        "--file", "-f", type=str, required=True,
        help="File with one 81-char puzzle per line"
    )
    bench_parser.add_argument(
        "--algorithm", "-a",
        choices=["backtracking", "stack", "all"],
        default="all",
        help="Solving algorithm to benchmark (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "solve":
            return cmd_solve(args)
        elif args.command == "validate":
            return cmd_validate(args)
        elif args.command == "benchmark":
            return cmd_benchmark(args)
    except (SudokuError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


def get_solvers(algorithm, track_memory=True):
    """Map an --algorithm choice to named solver instances."""
    solver_map = {
        "backtracking": ("Backtracking", BacktrackingSolver),
        "stack": ("Stack", StackSolver),
    }
    if algorithm == "all":
        selected = list(solver_map.values())
    else:
        selected = [solver_map[algorithm]]
    return {name: cls(track_memory=track_memory) for name, cls in selected}


def format_board(board, fmt):
    """Render a board in one of the --format styles."""
    if fmt == "braces":
        return board.to_display().rstrip("\n")
    elif fmt == "string":
        return board.to_string()
    return str(board)


def cmd_solve(args):
    """Handle the solve command."""
    if args.file:
        puzzles = load_puzzles(args.file)
        if not puzzles:
            raise InvalidBoardShape(f"No puzzle found in {args.file}")
        board = puzzles[0]
    elif args.puzzle:
        board = SudokuBoard.from_string(args.puzzle.strip())
    else:
        board = SudokuBoard.default()

    print("Input puzzle:")
    print(format_board(board, args.format))
    print()

    all_solved = True
    for name, solver in get_solvers(args.algorithm).items():
        print(f"Solving with {name}...")
        attempt = board.copy()
        solved = solver.solve(attempt)
        stats = solver.stats

        if solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Iterations: {stats.iterations:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Max depth: {stats.extra.get('max_depth', 0)}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
            print(format_board(attempt, args.format))
        else:
            all_solved = False
            print("✗ No solution exists")
            if args.verbose:
                print(f"  Time: {stats.time_seconds:.4f}s")
                print(f"  Iterations: {stats.iterations:,}")
        print()

    return 0 if all_solved else 1


def cmd_validate(args):
    """Handle the validate command."""
    board = SudokuBoard.from_string(args.puzzle.strip())
    print(board)

    if board.is_valid():
        state = "solved" if board.is_complete() else f"{board.count_empty()} empty cells"
        print(f"✓ Valid ({state})")
        return 0

    print("✗ Invalid: a row, column or box repeats a digit")
    return 1


def cmd_benchmark(args):
    """Handle the benchmark command."""
    puzzles = load_puzzles(args.file)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")

    benchmark = Benchmark(puzzles, solvers=get_solvers(args.algorithm))

    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)
    print(f"\nResults saved to {args.output}/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
