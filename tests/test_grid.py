"""Unit tests for the Sudoku grid model and constraint checks."""

import pytest
import numpy as np
from backtrack_sudoku.core.grid import SudokuGrid, EMPTY, CELL_COUNT, copy_grid, box_origin
from backtrack_sudoku.core.errors import InvalidGridError, OutOfRangeInputError
from backtrack_sudoku.core.validator import (
    is_valid,
    find_empty_cell,
    get_candidates,
    is_consistent,
    is_solved,
    validate_solution,
)


class TestSudokuGrid:
    """Tests for SudokuGrid class."""

    def test_create_empty_grid(self):
        """A new grid has 81 empty cells."""
        grid = SudokuGrid()
        assert len(grid) == CELL_COUNT
        assert grid.cells.shape == (CELL_COUNT,)
        assert grid.count_empty() == 81
        assert grid.count_filled() == 0

    def test_set_and_get(self):
        """Test setting and getting values."""
        grid = SudokuGrid()
        grid.set(2, 7, 5)
        assert grid.get(2, 7) == 5
        assert grid.cells[2 * 9 + 7] == 5
        assert not grid.is_empty(2, 7)

        grid.clear(2, 7)
        assert grid.is_empty(2, 7)

    def test_set_rejects_out_of_range(self):
        grid = SudokuGrid()
        with pytest.raises(OutOfRangeInputError):
            grid.set(0, 0, 10)
        with pytest.raises(OutOfRangeInputError):
            grid.set(9, 0, 1)
        with pytest.raises(OutOfRangeInputError):
            grid.set(0, -1, 1)
        assert grid.count_filled() == 0

    def test_negative_coordinates_rejected(self):
        grid = SudokuGrid()
        grid.set(0, 8, 3)
        with pytest.raises(OutOfRangeInputError):
            grid.get(-1, 8)
        with pytest.raises(OutOfRangeInputError):
            grid.is_empty(0, -1)
        with pytest.raises(OutOfRangeInputError):
            grid.clear(1, -1)
        assert grid.get(0, 8) == 3

    def test_matrix_is_a_view(self):
        grid = SudokuGrid()
        grid.matrix[4, 4] = 7
        assert grid.get(4, 4) == 7

    def test_wrong_length_rejected(self):
        with pytest.raises(InvalidGridError):
            SudokuGrid([0] * 80)

    def test_foreign_values_rejected(self):
        with pytest.raises(InvalidGridError):
            SudokuGrid([0] * 80 + [-1])
        with pytest.raises(InvalidGridError):
            SudokuGrid([0] * 80 + [10])

    def test_fractional_values_rejected(self):
        with pytest.raises(InvalidGridError):
            SudokuGrid([1.7] + [0] * 80)
        with pytest.raises(InvalidGridError):
            SudokuGrid(np.full(81, 2.0))

    def test_integer_arrays_accepted(self):
        grid = SudokuGrid(np.arange(81, dtype=np.int64) % 10)
        assert grid.get(0, 1) == 1
        assert grid.cells.dtype == np.int32

    def test_from_string(self):
        """Test creating grid from string."""
        grid = SudokuGrid.from_string("." * 80 + "9")
        assert grid.get(8, 8) == 9
        assert grid.count_filled() == 1

    def test_from_string_rejects_letters(self):
        with pytest.raises(InvalidGridError):
            SudokuGrid.from_string("x" * 81)

    def test_from_string_rejects_non_ascii_digits(self):
        with pytest.raises(InvalidGridError):
            SudokuGrid.from_string("\u00b2" + "0" * 80)
        with pytest.raises(InvalidGridError):
            SudokuGrid.from_string("\u0663" + "0" * 80)

    def test_to_string(self, puzzle):
        s = puzzle.to_string()
        assert len(s) == 81
        assert s.startswith("530070000")

    def test_from_2d_list(self):
        data = [[0] * 9 for _ in range(9)]
        data[3][5] = 4
        grid = SudokuGrid.from_2d_list(data)
        assert grid.get(3, 5) == 4

    def test_from_2d_list_rejects_floats(self):
        data = [[0] * 9 for _ in range(9)]
        data[0][0] = 1.7
        with pytest.raises(InvalidGridError):
            SudokuGrid.from_2d_list(data)

    def test_from_2d_list_rejects_ragged_rows(self):
        data = [[0] * 9 for _ in range(9)]
        data[4] = [0] * 8
        with pytest.raises(InvalidGridError):
            SudokuGrid.from_2d_list(data)

    def test_copy(self):
        """Copy then mutate the copy never alters the source."""
        grid = SudokuGrid()
        grid.set(4, 4, 7)
        copy = copy_grid(grid)

        assert copy == grid
        copy.set(4, 4, 8)
        copy.set(0, 0, 1)
        assert grid.get(4, 4) == 7
        assert grid.is_empty(0, 0)
        assert not np.shares_memory(grid.cells, copy.cells)

    def test_empty_cells_row_major(self):
        grid = SudokuGrid.from_string("0" + "1" * 79 + "0")
        assert list(grid.empty_cells()) == [(0, 0), (8, 8)]

    def test_box_origin(self):
        assert box_origin(0, 0) == (0, 0)
        assert box_origin(4, 7) == (3, 6)
        assert box_origin(8, 2) == (6, 0)

    def test_pretty_print(self, puzzle):
        lines = str(puzzle).split("\n")
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"
        assert len(lines) == 13


class TestValidator:
    """Tests for constraint checks."""

    def test_is_valid(self):
        """Test placement validation."""
        grid = SudokuGrid()
        grid.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid(grid, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid(grid, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid(grid, 1, 1, 5)

        # Can place different value, or 5 elsewhere
        assert is_valid(grid, 0, 5, 7)
        assert is_valid(grid, 4, 4, 5)

    def test_scans_far_end_of_units(self):
        """Cells at index 8 of each unit are checked."""
        grid = SudokuGrid()
        grid.set(0, 8, 5)
        grid.set(8, 1, 6)
        grid.set(2, 2, 7)
        assert not is_valid(grid, 0, 0, 5)
        assert not is_valid(grid, 0, 1, 6)
        assert not is_valid(grid, 0, 0, 7)

    def test_conflict_follows_value_within_unit(self):
        """Moving a value to another cell of the same unit keeps the conflict visible."""
        grid = SudokuGrid()
        grid.set(3, 3, 9)
        assert not is_valid(grid, 3, 8, 9)

        grid.clear(3, 3)
        grid.set(3, 8, 9)
        assert not is_valid(grid, 3, 3, 9)

        grid.clear(3, 8)
        grid.set(5, 5, 9)
        assert not is_valid(grid, 3, 3, 9)

    def test_duplicate_row_rejects_third_cell(self):
        grid = SudokuGrid()
        grid.set(2, 0, 4)
        grid.set(2, 5, 4)
        for col in (1, 2, 3, 4, 6, 7, 8):
            assert not is_valid(grid, 2, col, 4)

    def test_empty_and_out_of_domain_values_never_valid(self):
        grid = SudokuGrid()
        assert not is_valid(grid, 0, 0, EMPTY)
        assert not is_valid(grid, 0, 0, 10)

    def test_negative_coordinates_rejected(self):
        grid = SudokuGrid()
        with pytest.raises(OutOfRangeInputError):
            is_valid(grid, -1, 0, 5)
        with pytest.raises(OutOfRangeInputError):
            is_valid(grid, 0, 9, 5)

    def test_find_empty_cell(self, puzzle, solution):
        assert find_empty_cell(puzzle) == (0, 2)
        assert find_empty_cell(solution) is None

        solution.clear(6, 4)
        solution.clear(7, 1)
        assert find_empty_cell(solution) == (6, 4)

    def test_get_candidates(self):
        grid = SudokuGrid()
        grid.set(0, 0, 5)
        grid.set(0, 1, 3)
        assert get_candidates(grid, 0, 2) == [1, 2, 4, 6, 7, 8, 9]
        assert get_candidates(grid, 0, 0) == []

    def test_is_consistent(self):
        grid = SudokuGrid()
        assert is_consistent(grid)

        grid.set(0, 0, 5)
        grid.set(0, 1, 5)
        assert not is_consistent(grid)

    def test_is_solved(self, puzzle, solution):
        assert is_solved(solution)
        assert not is_solved(puzzle)

    def test_validate_solution(self, puzzle, solution):
        assert validate_solution(puzzle, solution)

        other = SudokuGrid.from_string(solution.to_string())
        other.cells[[0, 1]] = other.cells[[1, 0]]
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
