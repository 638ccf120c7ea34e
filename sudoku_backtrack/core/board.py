"""Sudoku board holding the working grid and the puzzle as originally given."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Tuple, Union

from .exceptions import IllegalInsertion, InvalidBoardShape
from .validator import VALID_NUMBERS, is_valid_board


SIZE = 9
BOX_SIZE = 3

DEFAULT_PUZZLE = (
    (5, 3, 0, 0, 7, 0, 0, 0, 0),
    (6, 0, 0, 1, 9, 5, 0, 0, 0),
    (0, 9, 8, 0, 0, 0, 0, 6, 0),
    (8, 0, 0, 0, 6, 0, 0, 0, 3),
    (4, 0, 0, 8, 0, 3, 0, 0, 1),
    (7, 0, 0, 0, 2, 0, 0, 0, 6),
    (0, 6, 0, 0, 0, 0, 2, 8, 0),
    (0, 0, 0, 4, 1, 9, 0, 0, 5),
    (0, 0, 0, 0, 8, 0, 0, 7, 9),
)

GridLike = Union[np.ndarray, Sequence[Sequence[int]]]


def _readonly(arr: np.ndarray) -> np.ndarray:
    """Return a view of arr that cannot be written through."""
    view = arr.view()
    view.flags.writeable = False
    return view


def _to_grid(data: GridLike) -> np.ndarray:
    """Convert input data to a fresh 9x9 int32 array, or raise InvalidBoardShape."""
    try:
        arr = np.asarray(data)
    except (TypeError, ValueError) as e:
        # Ragged nested sequences
        raise InvalidBoardShape(f"Grid must be {SIZE}x{SIZE}: {e}") from e

    if arr.shape != (SIZE, SIZE):
        raise InvalidBoardShape(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
    if arr.dtype.kind not in "iu":
        raise InvalidBoardShape(f"Grid values must be integers, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > SIZE:
        raise InvalidBoardShape(f"Grid values must be 0-{SIZE}")

    return arr.astype(np.int32)  # astype always copies


class SudokuBoard:
    """
    A 9x9 Sudoku board.

    Two grids are kept: the working grid, which insertion and solving mutate,
    and the origin grid, which records the puzzle as given. Cells that are
    nonzero in the origin grid are fixed and cannot be changed by insert().
    Empty cells hold 0.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[GridLike] = None):
        """
        Initialize a board.

        Args:
            grid: 9x9 nested sequence or array of ints in 0-9. If None, the
                  built-in sample puzzle is used.

        Raises:
            InvalidBoardShape: If grid is not a 9x9 grid of values 0-9.
        """
        if grid is None:
            grid = DEFAULT_PUZZLE

        self.grid = _to_grid(grid)
        self._origin = self.grid.copy()
        self._origin.flags.writeable = False

    @classmethod
    def default(cls) -> SudokuBoard:
        """Create a board holding the built-in sample puzzle."""
        return cls(DEFAULT_PUZZLE)

    @property
    def origin(self) -> np.ndarray:
        """The puzzle as originally given (read-only)."""
        return self._origin

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board, keeping its origin grid."""
        new_board = SudokuBoard(self._origin)
        new_board.grid = self.grid.copy()
        return new_board

    def reset(self) -> None:
        """Restore the working grid to the original puzzle."""
        self.grid[:, :] = self._origin

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """
        Set value at position (row, col) without the fixed-cell check.

        Used by the solvers, which only ever write to empty cells.
        """
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def insert(self, value: int, col: int, row: int) -> np.ndarray:
        """
        Place a value in a cell that was empty in the original puzzle.

        Args:
            value: Digit 1-9.
            col: Column index, 0 at the left.
            row: Row index, 0 at the top.

        Returns:
            Read-only view of the updated working grid.

        Raises:
            IllegalInsertion: If value is not 1-9, the position is off the
                              grid, or the cell is fixed.
        """
        if value not in VALID_NUMBERS:
            raise IllegalInsertion(f"Value must be 1-{self.size}, got {value}")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IllegalInsertion(f"Position (col={col}, row={row}) is off the grid")
        if self.is_fixed(row, col):
            raise IllegalInsertion(
                f"Cell (col={col}, row={row}) is fixed to {self._origin[row, col]}"
            )
        self.grid[row, col] = value
        return _readonly(self.grid)

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def is_fixed(self, row: int, col: int) -> bool:
        """Check if the cell was given in the original puzzle."""
        return self._origin[row, col] != 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return _readonly(self.grid[row, :])

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return _readonly(self.grid[:, col])

    def get_box(self, box_x: int, box_y: int) -> np.ndarray:
        """
        Get the values of a 3x3 box, scanned row by row.

        Unlike get_row() and get_col(), the result is a read-only copy and
        does not follow later changes to the grid.

        Args:
            box_x: Box column, 0-2.
            box_y: Box row, 0-2.
        """
        if not (0 <= box_x < self.box_size and 0 <= box_y < self.box_size):
            raise IndexError(f"Box index must be 0-{self.box_size - 1}, got ({box_x}, {box_y})")
        top = box_y * self.box_size
        left = box_x * self.box_size
        return _readonly(
            self.grid[top:top + self.box_size, left:left + self.box_size].flatten()
        )

    def get_box_for_cell(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        return self.get_box(col // self.box_size, row // self.box_size)

    def first_empty_cell(self) -> Optional[Tuple[int, int]]:
        """
        Find the first empty cell scanning rows top to bottom, left to right.

        Returns:
            (row, col) of the cell, or None if the grid is full.
        """
        for i in range(self.size):
            for j in range(self.size):
                if self.grid[i, j] == 0:
                    return i, j
        return None

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(i), int(j)) for i, j in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        return is_valid_board(self)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert the working grid to an 81-character string, 0 for empty."""
        return "".join(str(val) for val in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters read row by row.
               0 or . for empty, 1-9 for values.
        """
        if len(s) != SIZE * SIZE:
            raise InvalidBoardShape(f"String length must be {SIZE * SIZE}, got {len(s)}")

        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for idx, c in enumerate(s):
            if c in "0.":
                continue
            if c not in "123456789":
                raise InvalidBoardShape(f"Unexpected character {c!r} at position {idx}")
            grid[idx // SIZE, idx % SIZE] = int(c)

        return cls(grid)

    def to_display(self) -> str:
        """Render one line per row as {v, v, ..., v}."""
        lines = []
        for row in self.grid:
            lines.append("{" + ", ".join(str(val) for val in row) + "}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'

                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()}, fixed={int(np.sum(self._origin != 0))})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
