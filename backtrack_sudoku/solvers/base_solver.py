"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Callable, Tuple
import time
import tracemalloc

import numpy as np

from ..core.grid import SudokuGrid, SIZE, cell_index, EMPTY
from ..core.validator import is_consistent
from ..display.console import ConsoleRenderer, sleep

# Solutions counter value before any complete grid is reached.
SOLUTION_BASELINE = 1
DEFAULT_DELAY_MS = 10

Renderer = Callable[[SudokuGrid], None]


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    solutions: int = SOLUTION_BASELINE
    assignments: np.ndarray = field(default_factory=lambda: np.zeros((SIZE, SIZE), dtype=np.int64))

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def solutions_found(self) -> int:
        """Complete grids reached, not counting the baseline."""
        return self.solutions - SOLUTION_BASELINE

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "solutions": self.solutions,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for backtracking Sudoku solvers.

    Subclasses implement ``_search`` and route every tentative assignment
    through ``_assign``/``_unassign`` so that statistics and the optional
    visualization hook behave the same for every search strategy.
    """

    name: str = "BaseSolver"

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        delay_ms: int = DEFAULT_DELAY_MS,
        pause: Callable[[int], None] = sleep,
    ):
        """
        Initialize the solver.

        Args:
            renderer: Called with the grid after each tentative assignment
                when visualizing. Defaults to a ConsoleRenderer.
            delay_ms: Pause after each rendered step, in milliseconds.
            pause: Function used to pause; receives ``delay_ms``.
        """
        self.renderer = renderer
        self.delay_ms = delay_ms
        self.pause = pause
        self.stats = SolverStats(algorithm=self.name)
        self._visualize = False

    def solve(self, grid: SudokuGrid, visualize: bool = False) -> bool:
        """
        Solve the grid in place.

        On failure every tentative assignment has been undone, so the grid
        is left exactly as it was passed in.

        Args:
            grid: The puzzle to solve; mutated in place.
            visualize: Render each tentative assignment and pause.

        Returns:
            True if a solution was written into ``grid``.
        """
        self.stats = SolverStats(algorithm=self.name)
        self._visualize = visualize
        if visualize and self.renderer is None:
            self.renderer = ConsoleRenderer()

        start_time = time.perf_counter()
        # Contradictory givens can never lead to a consistent grid.
        solved = is_consistent(grid) and self._search(grid)
        self.stats.time_seconds = time.perf_counter() - start_time
        self.stats.solved = solved
        return solved

    def solve_copy(self, grid: SudokuGrid) -> Tuple[Optional[SudokuGrid], SolverStats]:
        """
        Solve a copy of the puzzle with timing and memory tracking.

        Args:
            grid: The puzzle to solve; left untouched.

        Returns:
            Tuple of (solution or None, stats).
        """
        already_tracing = tracemalloc.is_tracing()
        if not already_tracing:
            tracemalloc.start()
        tracemalloc.reset_peak()

        try:
            work_grid = grid.copy()
            solved = self.solve(work_grid)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            if not already_tracing:
                tracemalloc.stop()
        self.stats.memory_bytes = peak

        return (work_grid if solved else None), self.stats

    @abstractmethod
    def _search(self, grid: SudokuGrid) -> bool:
        """
        Run the search on a consistent grid.

        Returns:
            True if the grid has been completed, False otherwise.
        """
        pass

    def _assign(self, grid: SudokuGrid, row: int, col: int, value: int) -> None:
        grid.cells[cell_index(row, col)] = value
        self.stats.nodes_explored += 1
        self.stats.assignments[row, col] += 1

        if self._visualize:
            self.renderer(grid)
            self.pause(self.delay_ms)

    def _unassign(self, grid: SudokuGrid, row: int, col: int) -> None:
        grid.cells[cell_index(row, col)] = EMPTY
        self.stats.backtracks += 1

    def _record_solution(self) -> None:
        self.stats.solutions += 1

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
