"""Core module for the Sudoku grid model and constraint checks."""

from .errors import (
    SudokuError,
    ConfigurationError,
    InvalidGridError,
    OutOfRangeInputError,
    InputClosedError,
    ConstraintViolationError,
)
from .grid import SudokuGrid, EMPTY, SIZE, CELL_COUNT, copy_grid
from .validator import is_valid, find_empty_cell, is_consistent, is_solved, validate_solution

__all__ = [
    "SudokuError",
    "ConfigurationError",
    "InvalidGridError",
    "OutOfRangeInputError",
    "InputClosedError",
    "ConstraintViolationError",
    "SudokuGrid",
    "EMPTY",
    "SIZE",
    "CELL_COUNT",
    "copy_grid",
    "is_valid",
    "find_empty_cell",
    "is_consistent",
    "is_solved",
    "validate_solution",
]
