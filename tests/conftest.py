"""Shared fixtures for the test suite."""

import matplotlib
matplotlib.use("Agg")

import pytest

from backtrack_sudoku.core.grid import SudokuGrid


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
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

# The solution to the test puzzle
TEST_SOLUTION = (
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


@pytest.fixture
def puzzle() -> SudokuGrid:
    return SudokuGrid.from_string(TEST_PUZZLE)


@pytest.fixture
def solution() -> SudokuGrid:
    return SudokuGrid.from_string(TEST_SOLUTION)


@pytest.fixture
def dead_end() -> SudokuGrid:
    """Consistent grid with no solution: (0, 7) and (0, 8) both need 8 or 9, but 9 is blocked in both columns."""
    grid = SudokuGrid()
    for col, value in enumerate(range(1, 8)):
        grid.set(0, col, value)
    grid.set(4, 7, 9)
    grid.set(7, 8, 9)
    return grid
