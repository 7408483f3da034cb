"""Search-effort benchmark and plotting helpers."""

from .benchmark import Benchmark, BenchmarkResult
from .visualizer import Visualizer, plot_grid, plot_assignment_heatmap

__all__ = ["Benchmark", "BenchmarkResult", "Visualizer", "plot_grid", "plot_assignment_heatmap"]
