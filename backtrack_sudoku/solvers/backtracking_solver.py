"""Recursive depth-first backtracking solver."""

from __future__ import annotations

from .base_solver import BaseSolver
from ..core.grid import SudokuGrid, VALUES
from ..core.validator import is_valid, find_empty_cell


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search using plain recursion.

    Always expands the first empty cell in row-major order and tries the
    values 1-9 in ascending order, so the search is fully deterministic.
    """

    name = "Backtracking"

    def _search(self, grid: SudokuGrid) -> bool:
        self.stats.iterations += 1

        cell = find_empty_cell(grid)
        if cell is None:
            self._record_solution()
            return True

        row, col = cell
        for value in VALUES:
            if is_valid(grid, row, col, value):
                self._assign(grid, row, col, value)

                if self._search(grid):
                    return True

                self._unassign(grid, row, col)

        return False
