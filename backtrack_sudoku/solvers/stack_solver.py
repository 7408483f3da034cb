"""Backtracking solver driven by an explicit stack instead of recursion."""

from __future__ import annotations
from typing import List

from .base_solver import BaseSolver
from ..core.grid import SudokuGrid, SIZE
from ..core.validator import is_valid, find_empty_cell


class StackSolver(BaseSolver):
    """
    Same search as BacktrackingSolver, with the call stack made explicit.

    Each frame holds ``[row, col, next_value]``. A frame whose cell is still
    filled when it is back on top of the stack had its subtree fail, so its
    value is undone before the next candidate is tried. Visit order, undo
    order and statistics match the recursive solver exactly.
    """

    name = "Backtracking (stack)"

    def _search(self, grid: SudokuGrid) -> bool:
        self.stats.iterations += 1
        cell = find_empty_cell(grid)
        if cell is None:
            self._record_solution()
            return True

        stack: List[List[int]] = [[cell[0], cell[1], 1]]

        while stack:
            frame = stack[-1]
            row, col, start = frame

            if not grid.is_empty(row, col):
                self._unassign(grid, row, col)

            value = next(
                (v for v in range(start, SIZE + 1) if is_valid(grid, row, col, v)),
                None,
            )
            if value is None:
                stack.pop()
                continue

            frame[2] = value + 1
            self._assign(grid, row, col, value)
            self.stats.iterations += 1

            cell = find_empty_cell(grid)
            if cell is None:
                self._record_solution()
                return True
            stack.append([cell[0], cell[1], 1])

        return False
