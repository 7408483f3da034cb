"""Sudoku puzzle generator: random full grid, then cell removal."""

from __future__ import annotations
import random
from enum import Enum
from typing import List, Tuple, Optional, Union

from ..core.errors import ConfigurationError
from ..core.grid import SudokuGrid, EMPTY, SIZE, CELL_COUNT, VALUES
from ..core.validator import is_valid, find_empty_cell


class Difficulty(Enum):
    """Named presets for the number of cells left filled."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def clues(self) -> int:
        """Filled cells kept by this preset."""
        counts = {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 32,
            Difficulty.HARD: 26,
            Difficulty.EXPERT: 20,
        }
        return counts[self]


DEFAULT_DIFFICULTY = Difficulty.MEDIUM.clues
DEFAULT_MAX_DRAWS_PER_CELL = 100

DifficultyLike = Union[int, Difficulty]


def resolve_difficulty(difficulty: DifficultyLike) -> int:
    """
    Turn a preset or an integer into a filled-cell count.

    Raises:
        ConfigurationError: if the count is not an integer in [0, 81].
    """
    if isinstance(difficulty, Difficulty):
        return difficulty.clues
    if isinstance(difficulty, bool) or not isinstance(difficulty, int):
        raise ConfigurationError(f"Difficulty must be an integer, got {difficulty!r}")
    if difficulty < 0 or difficulty > CELL_COUNT:
        raise ConfigurationError(
            f"Difficulty must be within 0-{CELL_COUNT}, got {difficulty}"
        )
    return difficulty


class SudokuGenerator:
    """
    Generator for Sudoku puzzles.

    Algorithm:
    1. Fill a complete grid greedily in row-major order, drawing random
       values until one passes the constraint check. If a cell stalls for
       ``max_draws_per_cell`` draws the partial grid is thrown away and the
       grid is filled by randomized backtracking instead.
    2. Clear random filled cells until only ``difficulty`` remain.

    No uniqueness check is made on the resulting puzzle.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        max_draws_per_cell: int = DEFAULT_MAX_DRAWS_PER_CELL,
    ):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to draw from. Mutually exclusive with ``seed``.
            max_draws_per_cell: Random draws allowed per cell before the
                greedy fill gives up.
        """
        if seed is not None and rng is not None:
            raise ConfigurationError("Pass either seed or rng, not both")
        if max_draws_per_cell < 1:
            raise ConfigurationError(
                f"max_draws_per_cell must be positive, got {max_draws_per_cell}"
            )
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_draws_per_cell = max_draws_per_cell

    def generate(self, difficulty: DifficultyLike = DEFAULT_DIFFICULTY) -> SudokuGrid:
        """
        Generate a puzzle with ``difficulty`` filled cells.

        Args:
            difficulty: Number of cells left filled (0-81) or a preset.

        Returns:
            A SudokuGrid with the puzzle.
        """
        puzzle, _ = self.generate_with_solution(difficulty)
        return puzzle

    def generate_with_solution(
        self, difficulty: DifficultyLike = DEFAULT_DIFFICULTY
    ) -> Tuple[SudokuGrid, SudokuGrid]:
        """
        Generate a puzzle along with the full grid it was cut from.

        Returns:
            Tuple of (puzzle, solution) grids.
        """
        clues = resolve_difficulty(difficulty)
        solution = self.fill_grid()
        puzzle = solution.copy()
        self._remove_cells(puzzle, clues)
        return puzzle, solution

    def generate_batch(self, count: int, difficulty: DifficultyLike = DEFAULT_DIFFICULTY) -> List[SudokuGrid]:
        """Generate ``count`` puzzles of the same difficulty."""
        return [self.generate(difficulty) for _ in range(count)]

    def fill_grid(self) -> SudokuGrid:
        """Produce a complete, valid grid."""
        grid = SudokuGrid()
        if not self._fill_greedy(grid):
            grid.fill(EMPTY)
            self._fill_backtracking(grid)
        return grid

    def _fill_greedy(self, grid: SudokuGrid) -> bool:
        """
        Place random accepted values cell by cell.

        Returns False as soon as a cell exhausts its draws, leaving the grid
        partially filled.
        """
        for row in range(SIZE):
            for col in range(SIZE):
                for _ in range(self.max_draws_per_cell):
                    value = self.rng.randint(1, SIZE)
                    if is_valid(grid, row, col, value):
                        grid.set(row, col, value)
                        break
                else:
                    return False
        return True

    def _fill_backtracking(self, grid: SudokuGrid) -> bool:
        """Fill the remaining cells using backtracking with shuffled candidates."""
        cell = find_empty_cell(grid)
        if cell is None:
            return True

        row, col = cell
        candidates = list(VALUES)
        self.rng.shuffle(candidates)

        for value in candidates:
            if is_valid(grid, row, col, value):
                grid.set(row, col, value)
                if self._fill_backtracking(grid):
                    return True
                grid.clear(row, col)

        return False

    def _remove_cells(self, puzzle: SudokuGrid, clues: int) -> None:
        """Clear uniformly random filled cells until ``clues`` remain."""
        filled = puzzle.count_filled()
        while filled > clues:
            row = self.rng.randrange(SIZE)
            col = self.rng.randrange(SIZE)
            while puzzle.is_empty(row, col):
                row = self.rng.randrange(SIZE)
                col = self.rng.randrange(SIZE)
            puzzle.clear(row, col)
            filled -= 1
