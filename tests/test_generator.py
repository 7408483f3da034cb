"""Unit tests for puzzle generator."""

import random

import pytest
from backtrack_sudoku.core.errors import ConfigurationError
from backtrack_sudoku.core.grid import EMPTY
from backtrack_sudoku.core.validator import is_consistent, is_solved
from backtrack_sudoku.generator import SudokuGenerator, Difficulty, DEFAULT_DIFFICULTY


class TestSudokuGenerator:
    """Tests for SudokuGenerator class."""

    @pytest.mark.parametrize("difficulty", [17, 25, 32, 50, 80])
    def test_filled_cell_count_matches_difficulty(self, difficulty):
        """Exactly 81 - D cells are empty and the rest are consistent."""
        generator = SudokuGenerator(seed=difficulty)
        puzzle = generator.generate(difficulty)

        assert puzzle.count_empty() == 81 - difficulty
        assert puzzle.count_filled() == difficulty
        assert is_consistent(puzzle)

    def test_full_difficulty_keeps_solution(self):
        """Difficulty 81 removes nothing."""
        puzzle, solution = SudokuGenerator(seed=7).generate_with_solution(81)
        assert puzzle == solution
        assert is_solved(puzzle)

    def test_zero_difficulty_clears_everything(self):
        puzzle = SudokuGenerator(seed=7).generate(0)
        assert puzzle.count_empty() == 81
        assert (puzzle.cells == EMPTY).all()

    def test_default_difficulty(self):
        puzzle = SudokuGenerator(seed=3).generate()
        assert puzzle.count_filled() == DEFAULT_DIFFICULTY

    def test_preset_difficulty(self):
        puzzle = SudokuGenerator(seed=3).generate(Difficulty.EASY)
        assert puzzle.count_filled() == Difficulty.EASY.clues

    def test_generate_with_solution(self):
        """The puzzle is a subset of its solution."""
        generator = SudokuGenerator(seed=42)
        puzzle, solution = generator.generate_with_solution(Difficulty.MEDIUM)

        assert is_consistent(puzzle)
        assert is_solved(solution)

        for row, col in puzzle.filled_cells():
            assert puzzle.get(row, col) == solution.get(row, col)

    def test_same_seed_same_puzzle(self):
        first = SudokuGenerator(seed=123).generate(30)
        second = SudokuGenerator(seed=123).generate(30)
        assert first == second

    def test_injected_rng(self):
        first = SudokuGenerator(rng=random.Random(5)).generate(30)
        second = SudokuGenerator(rng=random.Random(5)).generate(30)
        assert first == second

    def test_generate_batch(self):
        """Test batch generation."""
        generator = SudokuGenerator(seed=42)
        puzzles = generator.generate_batch(3, 35)

        assert len(puzzles) == 3
        for puzzle in puzzles:
            assert puzzle.count_filled() == 35
            assert is_consistent(puzzle)

    def test_fill_grid_is_solved(self):
        for seed in range(5):
            assert is_solved(SudokuGenerator(seed=seed).fill_grid())

    def test_fill_survives_single_draw_per_cell(self):
        """Greedy placement stalls almost immediately; the fallback still completes the grid."""
        generator = SudokuGenerator(seed=11, max_draws_per_cell=1)
        assert is_solved(generator.fill_grid())

    def test_fallback_discards_partial_grid(self):
        """A stalled greedy pass leaves cells behind; the fallback starts over."""

        class StallingGenerator(SudokuGenerator):
            def _fill_greedy(self, grid):
                grid.set(0, 0, 1)
                grid.set(0, 1, 1)
                return False

        grid = StallingGenerator(seed=2).fill_grid()
        assert is_solved(grid)


class TestConfiguration:
    """Invalid settings are configuration errors."""

    @pytest.mark.parametrize("difficulty", [-1, 82, 1000])
    def test_difficulty_out_of_range(self, difficulty):
        with pytest.raises(ConfigurationError):
            SudokuGenerator(seed=1).generate(difficulty)

    @pytest.mark.parametrize("difficulty", ["30", 30.0, True, None])
    def test_difficulty_not_an_integer(self, difficulty):
        with pytest.raises(ConfigurationError):
            SudokuGenerator(seed=1).generate(difficulty)

    def test_seed_and_rng_are_exclusive(self):
        with pytest.raises(ConfigurationError):
            SudokuGenerator(seed=1, rng=random.Random(1))

    def test_max_draws_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            SudokuGenerator(max_draws_per_cell=0)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            SudokuGenerator(seed=1).generate(82)


class TestDifficultyLevels:
    """Test difficulty presets."""

    def test_presets_ordered(self):
        assert (Difficulty.EASY.clues > Difficulty.MEDIUM.clues
                > Difficulty.HARD.clues > Difficulty.EXPERT.clues)

    def test_expert_keeps_at_least_17(self):
        assert Difficulty.EXPERT.clues >= 17


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
