"""Constraint checks for Sudoku grids."""

from __future__ import annotations
from typing import List, Optional, Tuple, TYPE_CHECKING

from .grid import EMPTY, SIZE, BOX_SIZE, VALUES, box_origin, cell_index, check_coordinate

if TYPE_CHECKING:
    from .grid import SudokuGrid


def is_valid(grid: SudokuGrid, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) keeps the grid consistent.

    Only the 9 cells of the row, the 9 of the column and the 9 of the box
    are scanned. Call this before assigning ``value`` to the cell.

    Args:
        grid: The Sudoku grid.
        row: Row index.
        col: Column index.
        value: Value to check (1-9).

    Returns:
        True if ``value`` appears in none of the three units.

    Raises:
        OutOfRangeInputError: if (row, col) is off the grid.
    """
    check_coordinate(row, col)
    if value < 1 or value > SIZE:
        return False

    cells = grid.cells
    for i in range(SIZE):
        if cells[cell_index(row, i)] == value or cells[cell_index(i, col)] == value:
            return False

    box_row, box_col = box_origin(row, col)
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            if cells[cell_index(box_row + i, box_col + j)] == value:
                return False

    return True


def find_empty_cell(grid: SudokuGrid) -> Optional[Tuple[int, int]]:
    """Return the first empty cell in row-major order, or None if the grid is full."""
    cells = grid.cells
    for row in range(SIZE):
        for col in range(SIZE):
            if cells[cell_index(row, col)] == EMPTY:
                return row, col
    return None


def get_candidates(grid: SudokuGrid, row: int, col: int) -> List[int]:
    """Values that can legally go into the empty cell (row, col), ascending."""
    if not grid.is_empty(row, col):
        return []
    return [value for value in VALUES if is_valid(grid, row, col, value)]


def _unit_has_duplicates(values) -> bool:
    non_zero = values[values != EMPTY]
    return len(non_zero) != len(set(non_zero.tolist()))


def is_consistent(grid: SudokuGrid) -> bool:
    """
    Check that no filled cell conflicts with another filled cell.

    Does not check completeness.
    """
    for i in range(SIZE):
        if _unit_has_duplicates(grid.get_row(i)) or _unit_has_duplicates(grid.get_col(i)):
            return False

    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            if _unit_has_duplicates(grid.get_box(box_row, box_col)):
                return False

    return True


def is_solved(grid: SudokuGrid) -> bool:
    """Check if the grid is completely and correctly filled."""
    return grid.is_complete() and is_consistent(grid)


def validate_solution(puzzle: SudokuGrid, solution: SudokuGrid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, consistent and keeps every given.
    """
    givens = puzzle.cells != EMPTY
    if (puzzle.cells[givens] != solution.cells[givens]).any():
        return False
    return is_solved(solution)
