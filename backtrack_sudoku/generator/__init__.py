"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, DEFAULT_DIFFICULTY, resolve_difficulty

__all__ = ["SudokuGenerator", "Difficulty", "DEFAULT_DIFFICULTY", "resolve_difficulty"]
