"""Unit tests for rule checks and candidate computation."""

import pytest
from sudoku_backtrack.core import board as board_module
from sudoku_backtrack.core.board import SudokuBoard
from sudoku_backtrack.core.validator import (
    VALID_NUMBERS,
    is_group_valid,
    is_valid_board,
    available_digits,
    cell_candidates,
    is_valid_placement,
    validate_solution,
)


SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)


class TestGroupValidation:
    """Tests for is_group_valid."""

    def test_complete_group(self):
        """Test that a permutation of 1-9 is valid."""
        assert is_group_valid([9, 1, 8, 2, 7, 3, 6, 4, 5])

    def test_empty_group(self):
        """Test that an all-empty group is valid."""
        assert is_group_valid([0] * 9)

    def test_partial_group(self):
        """Test that distinct digits with gaps are valid."""
        assert is_group_valid([5, 3, 0, 0, 7, 0, 0, 0, 0])

    def test_partial_group_with_duplicate(self):
        """Test that a repeated digit is caught even with empty cells."""
        assert not is_group_valid([5, 5, 0, 0, 0, 0, 0, 0, 0])
        assert not is_group_valid([0, 1, 2, 3, 4, 5, 6, 7, 1])

    def test_complete_group_with_duplicate(self):
        """Test that a full group repeating a digit is invalid."""
        assert not is_group_valid([1, 2, 3, 4, 5, 6, 7, 8, 8])

    def test_out_of_range(self):
        """Test that values outside 0-9 are invalid."""
        assert not is_group_valid([10, 0, 0, 0, 0, 0, 0, 0, 0])
        assert not is_group_valid([-1, 0, 0, 0, 0, 0, 0, 0, 0])

    def test_wrong_length(self):
        """Test that a group must have nine cells."""
        assert not is_group_valid([1, 2, 3])
        assert not is_group_valid([0] * 10)


class TestBoardValidation:
    """Tests for is_valid_board."""

    def test_solved_board(self):
        """Test every group of a complete solution."""
        board = SudokuBoard.from_string(SOLVED)
        assert is_valid_board(board)
        for i in range(9):
            assert is_group_valid(board.get_row(i))
            assert is_group_valid(board.get_col(i))
        for by in range(3):
            for bx in range(3):
                assert is_group_valid(board.get_box(bx, by))

    def test_puzzle_is_valid(self):
        """Test that the partial sample puzzle is valid."""
        assert is_valid_board(SudokuBoard.from_string(PUZZLE))

    def test_row_duplicate(self):
        """Test a repeated digit within a row."""
        board = SudokuBoard.from_string("55" + "0" * 79)
        assert not is_valid_board(board)

    def test_column_duplicate(self):
        """Test a repeated digit within a column."""
        board = SudokuBoard.from_string("0" * 81)
        board.set(0, 4, 7)
        board.set(8, 4, 7)
        assert not is_valid_board(board)

    def test_box_duplicate(self):
        """Test a repeated digit within a box but not a row or column."""
        board = SudokuBoard.from_string("0" * 81)
        board.set(3, 3, 2)
        board.set(5, 5, 2)
        assert not is_valid_board(board)

    @pytest.mark.parametrize("row,col", [(0, 0), (4, 4), (8, 2), (2, 7)])
    def test_any_altered_cell_breaks_solution(self, row, col):
        """Test that changing one cell of a solution introduces a conflict."""
        board = SudokuBoard.from_string(SOLVED)
        board.set(row, col, board.get(row, col) % 9 + 1)
        assert not is_valid_board(board)


class TestAvailableDigits:
    """Tests for candidate computation."""

    def test_excludes_used_digits(self):
        """Test that digits from all three groups are removed."""
        row = [5, 3, 0, 0, 7, 0, 0, 0, 0]
        col = [0, 0, 8, 0, 0, 0, 0, 0, 0]
        box = [5, 3, 0, 6, 0, 0, 0, 9, 8]
        assert available_digits(row, col, box) == [1, 2, 4]

    def test_all_empty(self):
        """Test that empty groups leave every digit."""
        empty = [0] * 9
        assert available_digits(empty, empty, empty) == list(range(1, 10))

    def test_single_digit_constant(self):
        """Test that board and validator share one set of valid digits."""
        assert board_module.VALID_NUMBERS is VALID_NUMBERS
        empty = [0] * 9
        assert available_digits(empty, empty, empty) == list(VALID_NUMBERS)

    def test_all_used(self):
        """Test that nine distinct digits leave nothing."""
        row = [1, 2, 3, 0, 0, 0, 0, 0, 0]
        col = [4, 5, 6, 0, 0, 0, 0, 0, 0]
        box = [7, 8, 9, 0, 0, 0, 0, 0, 0]
        assert available_digits(row, col, box) == []

    def test_sorted_and_unique(self):
        """Test that every cell of the puzzle gets an ascending, clash-free list."""
        board = SudokuBoard.from_string(PUZZLE)
        for row, col in board.get_empty_cells():
            candidates = cell_candidates(board, row, col)
            assert candidates == sorted(set(candidates))
            used = (
                set(board.get_row(row))
                | set(board.get_col(col))
                | set(board.get_box_for_cell(row, col))
            )
            assert not used & set(candidates)

    def test_cell_candidates(self):
        """Test candidates for the first empty cell of the puzzle."""
        board = SudokuBoard.from_string(PUZZLE)
        assert cell_candidates(board, 0, 2) == [1, 2, 4]


class TestPlacement:
    """Tests for is_valid_placement."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard.from_string("0" * 81)
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_occupied_cell(self):
        """Test that a filled cell accepts nothing."""
        board = SudokuBoard.from_string(PUZZLE)
        assert not is_valid_placement(board, 0, 0, 1)

    def test_out_of_range(self):
        """Test that only digits 1-9 are placeable."""
        board = SudokuBoard.from_string("0" * 81)
        assert not is_valid_placement(board, 0, 0, 0)
        assert not is_valid_placement(board, 0, 0, 10)


class TestValidateSolution:
    """Tests for validate_solution."""

    def test_correct_solution(self):
        """Test a solution that keeps every clue."""
        board = SudokuBoard.from_string(PUZZLE)
        for idx, c in enumerate(SOLVED):
            row, col = divmod(idx, 9)
            if board.is_empty(row, col):
                board.insert(int(c), col=col, row=row)
        assert validate_solution(board)

    def test_incomplete(self):
        """Test that the unsolved puzzle is not a solution."""
        assert not validate_solution(SudokuBoard.from_string(PUZZLE))

    def test_clue_changed(self):
        """Test that overwriting a given clue is detected."""
        board = SudokuBoard.from_string(PUZZLE)
        board.grid[:, :] = SudokuBoard.from_string(SOLVED).grid
        assert validate_solution(board)

        # Swap two digits: still a valid grid, but the clues no longer match
        board.grid[board.grid == 5] = 0
        board.grid[board.grid == 3] = 5
        board.grid[board.grid == 0] = 3
        assert board.is_solved()
        assert not validate_solution(board)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
