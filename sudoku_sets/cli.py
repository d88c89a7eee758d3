"""Command-line interface for the candidate-set Sudoku solver."""

import argparse
import logging
import sys

from .core.grid import Grid
from .core.validator import conflicting_givens
from .solvers import SearchSolver
from .harness import TrialRunner


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using candidate propagation and backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle
  sudoku-sets solve --puzzle "530070000600195000..."

  # Solve 100 random grids and save results and charts
  sudoku-sets trials --count 100 --seed 1 --output results/
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    solve_parser.add_argument(
        "--pretty", action="store_true",
        help="Draw the grid with box borders"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Trials command
    trials_parser = subparsers.add_parser("trials", help="Solve a batch of random grids")
    trials_parser.add_argument(
        "--count", "-n", type=int, default=100,
        help="Number of random grids (default: 100)"
    )
    trials_parser.add_argument(
        "--range", "-u", type=int, default=100, dest="density_range",
        help="Each cell draws from [0, RANGE); 1-9 become givens (default: 100)"
    )
    trials_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    trials_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for results and charts"
    )
    trials_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "trials":
        return cmd_trials(args)
    return 1


def _render(grid: Grid, pretty: bool) -> str:
    return grid.pretty() if pretty else str(grid)


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        grid = Grid.from_string(args.puzzle)
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        return 1

    print("Input puzzle:")
    print(_render(grid, args.pretty))
    print()

    solver = SearchSolver()
    solution, stats = solver.solve(grid)

    if stats.solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
    else:
        print("✗ No solution")
        for a, b, digit in conflicting_givens(grid):
            print(f"  {digit} given at {a} and {b}")

    if args.verbose:
        print(f"  Search nodes: {stats.iterations:,}")
        print(f"  Branches: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Propagation passes: {stats.extra.get('propagation_passes', 0):,}")
        print(f"  Max depth: {stats.extra.get('max_depth', 0)}")

    if solution is not None:
        print(_render(solution, args.pretty))
        return 0
    return 1


def cmd_trials(args) -> int:
    """Handle the trials command."""
    try:
        runner = TrialRunner(
            count=args.count,
            density_range=args.density_range,
            seed=args.seed
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print("RANDOM GRID TRIALS")
    print("=" * 60)
    print(f"Trials: {args.count}")
    print(f"Draw range: {args.density_range}")
    print(f"Seed: {args.seed}")
    print("=" * 60)

    results = runner.run(show_progress=False)
    for result in results:
        print(result.line())

    summary = runner.get_summary()
    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"  Solved: {summary['solved']}/{summary['total_trials']}")
    print(f"  Inconsistent solutions: {summary['inconsistent']}")
    if results:
        print(f"  Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"  Max Time: {summary['max_time_seconds']:.4f}s")

    if args.output:
        runner.save_results(args.output)
        print(f"\nResults saved to {args.output}")

        if not args.no_charts:
            from .harness.visualizer import Visualizer

            print("\nGenerating charts...")
            visualizer = Visualizer(results, args.output)
            charts = visualizer.generate_all()
            visualizer.generate_summary_table()
            for chart in charts:
                print(f"  - {chart.split('/')[-1]}")

    return 0 if summary["inconsistent"] == 0 and summary["errors"] == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
