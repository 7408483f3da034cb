"""Search-effort report: how hard backtracking works as filled cells drop."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Any, Optional, Sequence
import json
import os

import numpy as np
from tqdm import tqdm

from ..core.grid import SudokuGrid
from ..core.validator import validate_solution
from ..generator import SudokuGenerator, resolve_difficulty
from ..generator.generator import DifficultyLike, Difficulty
from ..solvers import BaseSolver, BacktrackingSolver

REPORT_FILENAME = "benchmark_report.json"
EFFORT_METRICS = ("nodes_explored", "backtracks", "time_seconds")


@dataclass
class BenchmarkResult:
    """Search effort spent on one puzzle."""
    puzzle_id: int
    clues: int
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "clues": self.clues,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
        }


def describe(values: Sequence[float]) -> Dict[str, float]:
    """Mean, median and max of a metric."""
    arr = np.asarray(values, dtype=float)
    return {
        "mean": float(np.mean(arr)),
        "median": float(np.median(arr)),
        "max": float(np.max(arr)),
    }


class Benchmark:
    """
    Measures search effort per filled-cell count.

    Puzzles are generated once per filled-cell count from a seeded
    generator, so two runs with the same seed see identical puzzles and
    report identical assignment and backtrack counts.
    """

    def __init__(
        self,
        puzzles_per_difficulty: int = 10,
        difficulties: Optional[Sequence[DifficultyLike]] = None,
        solver: Optional[BaseSolver] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles_per_difficulty: Number of puzzles to generate per difficulty.
            difficulties: Filled-cell counts or presets (default: all presets).
            solver: Solver to measure (default: BacktrackingSolver).
            seed: Random seed for reproducibility.
        """
        self.puzzles_per_difficulty = puzzles_per_difficulty
        self.clue_counts = [
            resolve_difficulty(d) for d in (difficulties or list(Difficulty))
        ]
        self.solver = solver or BacktrackingSolver()
        self.seed = seed

        self.puzzles: Dict[int, List[SudokuGrid]] = {}
        self.results: List[BenchmarkResult] = []

    def generate_puzzles(self) -> None:
        """Generate all puzzles for benchmarking."""
        generator = SudokuGenerator(seed=self.seed)

        for clues in tqdm(self.clue_counts, desc="Generating"):
            self.puzzles[clues] = generator.generate_batch(
                self.puzzles_per_difficulty,
                clues
            )

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Solve every generated puzzle once.

        Returns:
            List of BenchmarkResult objects.
        """
        if not self.puzzles:
            self.generate_puzzles()

        self.results = []
        total_tests = sum(len(p) for p in self.puzzles.values())

        with tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress) as pbar:
            for clues, puzzles in self.puzzles.items():
                for puzzle_id, puzzle in enumerate(puzzles):
                    self.results.append(self._run_single(puzzle, puzzle_id, clues))
                    pbar.update(1)

        return self.results

    def _run_single(self, puzzle: SudokuGrid, puzzle_id: int, clues: int) -> BenchmarkResult:
        solution, stats = self.solver.solve_copy(puzzle)
        solved = solution is not None and validate_solution(puzzle, solution)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            clues=clues,
            solved=solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
        )

    def results_for(self, clues: int) -> List[BenchmarkResult]:
        return [r for r in self.results if r.clues == clues]

    def get_summary(self) -> Dict[str, Any]:
        """
        Summarize effort per filled-cell count.

        ``by_clues`` is keyed by the clue count as a string (JSON keys) and
        holds the solved/tested counts plus mean, median and max of each
        effort metric.
        """
        summary = {
            "algorithm": self.solver.name,
            "seed": self.seed,
            "total_puzzles": len(self.results),
            "total_solved": sum(1 for r in self.results if r.solved),
            "clue_counts": list(self.clue_counts),
            "by_clues": {}
        }

        for clues in self.clue_counts:
            rows = self.results_for(clues)
            if not rows:
                continue
            entry = {
                "tested": len(rows),
                "solved": sum(1 for r in rows if r.solved),
            }
            for metric in EFFORT_METRICS:
                entry[metric] = describe([getattr(r, metric) for r in rows])
            summary["by_clues"][str(clues)] = entry

        return summary

    def save_results(self, output_dir: str) -> str:
        """Write the summary and the per-puzzle results to one JSON report."""
        os.makedirs(output_dir, exist_ok=True)

        report_file = os.path.join(output_dir, REPORT_FILENAME)
        with open(report_file, "w") as f:
            json.dump({
                "summary": self.get_summary(),
                "results": [r.to_dict() for r in self.results],
            }, f, indent=2)

        return report_file
