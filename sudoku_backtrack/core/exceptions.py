"""Exceptions raised by the board, validator and solvers."""


class SudokuError(ValueError):
    """Base class for all Sudoku input and state errors."""


class InvalidBoardShape(SudokuError):
    """The input is not a 9x9 grid of integers in the range 0-9."""


class IllegalInsertion(SudokuError):
    """A value was inserted into a fixed cell, out of range, or off the grid."""


class InvalidStartingBoard(SudokuError):
    """Solving was requested on a board that already breaks a rule."""
