"""Sudoku puzzle generator and backtracking solver."""

__version__ = "1.0.0"
