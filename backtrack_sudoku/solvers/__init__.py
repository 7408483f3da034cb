"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SOLUTION_BASELINE, DEFAULT_DELAY_MS
from .backtracking_solver import BacktrackingSolver
from .stack_solver import StackSolver

SOLVERS = {
    "recursive": BacktrackingSolver,
    "stack": StackSolver,
}

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SOLUTION_BASELINE",
    "DEFAULT_DELAY_MS",
    "BacktrackingSolver",
    "StackSolver",
    "SOLVERS",
]
