"""Charts for benchmark results and images of grids and search effort."""

from __future__ import annotations
import os
from typing import List, Optional

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult
from ..core.grid import SudokuGrid, SIZE, BOX_SIZE, EMPTY
from ..solvers.base_solver import SolverStats


class Visualizer:
    """
    Visualization generator for benchmark results.

    Charts how search effort grows as the number of filled cells drops.
    """

    COLOR = "#3498db"

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    @property
    def clue_counts(self) -> List[int]:
        """Filled-cell counts present in the results, most filled first."""
        return sorted({r.clues for r in self.results}, reverse=True)

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_effort_distribution(),
            self.plot_time_by_clues(),
        ]

    def _save(self, fig, filename: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        return path

    def plot_effort_distribution(self) -> str:
        """Box plot of tentative assignments per puzzle for each filled-cell count."""
        fig, ax = plt.subplots(figsize=(12, 6))

        order = self.clue_counts
        sns.boxplot(
            x=[str(r.clues) for r in self.results],
            y=[max(r.nodes_explored, 1) for r in self.results],
            order=[str(c) for c in order],
            color=self.COLOR,
            ax=ax,
        )
        ax.set_yscale('log')

        ax.set_xlabel('Filled Cells', fontsize=12)
        ax.set_ylabel('Assignments per Puzzle (Log Scale)', fontsize=12)
        ax.set_title('Search Effort by Filled Cells', fontsize=14, fontweight='bold')

        return self._save(fig, "effort_by_clues.png")

    def plot_time_by_clues(self) -> str:
        """Bar chart of mean solve time per filled-cell count."""
        fig, ax = plt.subplots(figsize=(12, 6))

        order = self.clue_counts
        x = np.arange(len(order))
        means = [np.mean([r.time_seconds for r in self.results if r.clues == clues])
                 for clues in order]

        ax.bar(x, means, 0.6, color=self.COLOR, edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Filled Cells', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Time by Filled Cells', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([str(c) for c in order])

        return self._save(fig, "time_by_clues.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown table with one row per filled-cell count."""
        lines = [
            "# Benchmark Summary\n",
            "| Filled Cells | Solved | Mean Assignments | Median Assignments "
            "| Max Assignments | Mean Backtracks | Mean Time |",
            "|--------------|--------|------------------|--------------------"
            "|-----------------|-----------------|-----------|"
        ]

        for clues in self.clue_counts:
            rows = [r for r in self.results if r.clues == clues]
            solved = sum(1 for r in rows if r.solved)
            nodes = [r.nodes_explored for r in rows]
            avg_backtracks = np.mean([r.backtracks for r in rows])
            avg_time = np.mean([r.time_seconds for r in rows])

            lines.append(
                f"| {clues} | {solved}/{len(rows)} | {int(np.mean(nodes)):,} "
                f"| {int(np.median(nodes)):,} | {max(nodes):,} "
                f"| {int(avg_backtracks):,} | {avg_time:.4f}s |"
            )

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path


def _draw_box_lines(ax) -> None:
    for k in range(SIZE + 1):
        lw = 2.5 if k % BOX_SIZE == 0 else 0.5
        ax.axhline(k, color='black', linewidth=lw)
        ax.axvline(k, color='black', linewidth=lw)


def plot_grid(grid: SudokuGrid, path: str, givens: Optional[SudokuGrid] = None,
              title: str = "") -> str:
    """
    Save an image of the grid.

    Cells filled in ``givens`` are drawn in black, every other value in blue.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_xlim(0, SIZE)
    ax.set_ylim(SIZE, 0)
    ax.set_aspect('equal')
    ax.axis('off')
    _draw_box_lines(ax)

    for row in range(SIZE):
        for col in range(SIZE):
            value = grid.get(row, col)
            if value == EMPTY:
                continue
            given = givens is None or not givens.is_empty(row, col)
            ax.text(col + 0.5, row + 0.5, str(value),
                    ha='center', va='center', fontsize=18,
                    fontweight='bold' if given else 'normal',
                    color='black' if given else '#2266cc')

    if title:
        ax.set_title(title, fontsize=14, fontweight='bold')

    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_assignment_heatmap(stats: SolverStats, path: str) -> str:
    """Save a heatmap of how often each cell was tentatively assigned."""
    fig, ax = plt.subplots(figsize=(7, 6))
    sns.heatmap(stats.assignments, annot=True, fmt="d", cmap="rocket_r",
                cbar_kws={"label": "Tentative assignments"},
                linewidths=0.5, linecolor='white', square=True, ax=ax)
    for k in range(0, SIZE + 1, BOX_SIZE):
        ax.axhline(k, color='black', linewidth=2)
        ax.axvline(k, color='black', linewidth=2)

    ax.set_xlabel('Column', fontsize=12)
    ax.set_ylabel('Row', fontsize=12)
    ax.set_title(f'Search Effort per Cell ({stats.algorithm})', fontsize=14, fontweight='bold')

    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path
