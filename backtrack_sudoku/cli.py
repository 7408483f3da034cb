"""Command-line interface for the Sudoku generator and solver."""

import argparse
import sys
import json
from typing import Callable, List, Optional

from tqdm import tqdm

from .core.errors import SudokuError, InputClosedError
from .core.grid import SudokuGrid, check_coordinate
from .display.console import (
    format_grid,
    clear_terminal,
    read_line,
    read_user_move,
    apply_user_move,
)
from .generator import SudokuGenerator, Difficulty, DEFAULT_DIFFICULTY
from .solvers import SOLVERS, DEFAULT_DELAY_MS
from .solvers.base_solver import BaseSolver


def parse_difficulty(value: str):
    """Accept a preset name or a filled-cell count."""
    try:
        return Difficulty(value.lower())
    except ValueError:
        pass
    try:
        return int(value)
    except ValueError:
        presets = ", ".join(d.value for d in Difficulty)
        raise argparse.ArgumentTypeError(
            f"expected an integer 0-81 or one of: {presets}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sudoku Puzzle Generator & Backtracking Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate 5 puzzles keeping 30 filled cells
  backtrack-sudoku generate --count 5 --difficulty 30

  # Solve a puzzle and animate the search
  backtrack-sudoku solve --puzzle "5300700..." --visualize

  # Play: generate, optionally watch it solve, then enter a move
  backtrack-sudoku play --difficulty easy
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--difficulty", "-d", type=parse_difficulty, default=DEFAULT_DIFFICULTY,
        help=f"Filled cells to keep, 0-81, or a preset name (default: {DEFAULT_DIFFICULTY})"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output file for puzzles (JSON format)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--algorithm", "-a", choices=sorted(SOLVERS), default="recursive",
        help="Search implementation to use (default: recursive)"
    )
    solve_parser.add_argument(
        "--visualize", action="store_true",
        help="Animate every tentative assignment in the terminal"
    )
    solve_parser.add_argument(
        "--delay", type=int, default=DEFAULT_DELAY_MS,
        help=f"Pause between animation steps in ms (default: {DEFAULT_DELAY_MS})"
    )
    solve_parser.add_argument(
        "--plot", type=str, default=None,
        help="Save an image of the solved grid to this path"
    )
    solve_parser.add_argument(
        "--heatmap", type=str, default=None,
        help="Save a heatmap of per-cell search effort to this path"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Play command
    play_parser = subparsers.add_parser("play", help="Generate a puzzle and edit it interactively")
    play_parser.add_argument(
        "--difficulty", "-d", type=parse_difficulty, default=DEFAULT_DIFFICULTY,
        help=f"Filled cells to keep, 0-81, or a preset name (default: {DEFAULT_DIFFICULTY})"
    )
    play_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    play_parser.add_argument(
        "--moves", "-m", type=int, default=1,
        help="Number of cell edits to read (default: 1)"
    )
    play_parser.add_argument(
        "--strict", action="store_true",
        help="Reject moves that break a row, column or box"
    )
    play_parser.add_argument(
        "--delay", type=int, default=DEFAULT_DELAY_MS,
        help=f"Pause between animation steps in ms (default: {DEFAULT_DELAY_MS})"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Measure search effort per filled-cell count")
    bench_parser.add_argument(
        "--puzzles", "-n", type=int, default=10,
        help="Puzzles per difficulty (default: 10)"
    )
    bench_parser.add_argument(
        "--difficulty", "-d", type=parse_difficulty, nargs="+", default=None,
        help="Difficulties to benchmark (default: all presets)"
    )
    bench_parser.add_argument(
        "--algorithm", "-a", choices=sorted(SOLVERS), default="recursive",
        help="Search implementation to measure (default: recursive)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    commands = {
        "generate": cmd_generate,
        "solve": cmd_solve,
        "play": cmd_play,
        "benchmark": cmd_benchmark,
    }

    try:
        commands[args.command](args)
    except SudokuError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _describe(difficulty) -> str:
    if isinstance(difficulty, Difficulty):
        return f"{difficulty.value} ({difficulty.clues} clues)"
    return f"{difficulty} clues"


def cmd_generate(args):
    """Handle the generate command."""
    generator = SudokuGenerator(seed=args.seed)

    puzzles = [
        generator.generate(args.difficulty)
        for _ in tqdm(range(args.count), desc="Generating", disable=args.count < 2)
    ]

    all_puzzles = []
    for i, puzzle in enumerate(puzzles, 1):
        all_puzzles.append({
            "index": i,
            "puzzle": puzzle.to_string(),
            "clues": puzzle.count_filled()
        })
        print(f"\n--- Puzzle {i}: {_describe(args.difficulty)} ---")
        print(puzzle)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(all_puzzles, f, indent=2)
        print(f"\nAll puzzles saved to {args.output}")

    print(f"\nTotal puzzles generated: {len(all_puzzles)}")


def cmd_solve(args):
    """Handle the solve command."""
    grid = SudokuGrid.from_string(args.puzzle)
    original = grid.copy()

    solver: BaseSolver = SOLVERS[args.algorithm](delay_ms=args.delay)

    if args.visualize:
        clear_terminal()
    else:
        print("Input puzzle:")
        print(grid)
        print()

    solved = solver.solve(grid, visualize=args.visualize)
    stats = solver.stats

    if solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        print(grid)
    else:
        print("✗ No solution exists for this puzzle")

    if args.verbose:
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Assignments: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Solutions counter: {stats.solutions}")

    if args.plot or args.heatmap:
        from .benchmark.visualizer import plot_grid, plot_assignment_heatmap

        if args.plot:
            plot_grid(grid, args.plot, givens=original, title=stats.algorithm)
            print(f"Grid image saved to {args.plot}")
        if args.heatmap:
            plot_assignment_heatmap(stats, args.heatmap)
            print(f"Heatmap saved to {args.heatmap}")

    if not solved:
        sys.exit(1)


def cmd_play(args, input_fn: Callable[[str], str] = input):
    """Handle the play command."""
    generator = SudokuGenerator(seed=args.seed)
    puzzle = generator.generate(args.difficulty)
    origin = puzzle.copy()

    print(format_grid(puzzle, clear_screen=True))

    answer = read_line("Solve puzzle (y/n): ", input_fn).strip().lower()
    if answer == "y":
        solver = SOLVERS["recursive"](delay_ms=args.delay)
        clear_terminal()
        if solver.solve(puzzle, visualize=True):
            print(f"\nSolved after {solver.stats.nodes_explored:,} assignments.")
        else:
            print("\nNo solution exists for this puzzle.")

    for _ in range(args.moves):
        try:
            row, col, value = read_user_move(input_fn)
            check_coordinate(row, col)
            if not origin.is_empty(row, col):
                print(f"Cell ({row}, {col}) is a given and cannot be changed.")
                continue
            apply_user_move(puzzle, row, col, value, check_constraints=args.strict)
        except InputClosedError:
            raise
        except SudokuError as e:
            print(f"Invalid move: {e}")
            continue
        print(format_grid(puzzle))

    return puzzle


def cmd_benchmark(args):
    """Handle the benchmark command."""
    from .benchmark import Benchmark, Visualizer

    print("=" * 60)
    print("SUDOKU SEARCH EFFORT BENCHMARK")
    print("=" * 60)

    benchmark = Benchmark(
        puzzles_per_difficulty=args.puzzles,
        difficulties=args.difficulty,
        solver=SOLVERS[args.algorithm](),
        seed=args.seed
    )

    print(f"Puzzles per difficulty: {args.puzzles}")
    print(f"Filled cells: {benchmark.clue_counts}")
    print(f"Algorithm: {benchmark.solver.name}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Filled Cells:")
    print("-" * 50)
    for clues, stats in summary["by_clues"].items():
        nodes = stats["nodes_explored"]
        print(f"\n{clues} filled:")
        print(f"  Solved: {stats['solved']}/{stats['tested']}")
        print(f"  Assignments: mean {nodes['mean']:,.0f}, "
              f"median {nodes['median']:,.0f}, max {nodes['max']:,.0f}")
        print(f"  Mean Backtracks: {stats['backtracks']['mean']:,.0f}")
        print(f"  Mean Time: {stats['time_seconds']['mean']:.4f}s")

    report = benchmark.save_results(args.output)
    print(f"\nReport saved to {report}")

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        charts.append(visualizer.generate_summary_table())
        for chart in charts:
            print(f"  - {chart}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
