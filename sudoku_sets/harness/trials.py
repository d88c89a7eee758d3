"""Random-grid trial harness for the solver."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

import numpy as np
from tqdm import tqdm

from ..core.grid import Grid, DIGITS, SIZE
from ..solvers import BaseSolver, SearchSolver

log = logging.getLogger(__name__)


@dataclass
class TrialResult:
    """Outcome of solving one random grid."""
    trial_id: int
    givens: int
    solved: bool
    consistent: bool
    time_seconds: float
    iterations: int
    backtracks: int
    nodes_explored: int
    puzzle: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "trial_id": self.trial_id,
            "givens": self.givens,
            "solved": self.solved,
            "consistent": self.consistent,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "puzzle": self.puzzle,
            **self.extra
        }

    def line(self) -> str:
        """One-line report: 'n: millis<TAB>solved<TAB>consistent'."""
        millis = int(round(self.time_seconds * 1000))
        return f"{self.trial_id}: {millis}\t{str(self.solved).lower()}\t{str(self.consistent).lower()}"


class RandomGridFactory:
    """
    Builds random candidate grids.

    Each cell draws an integer uniformly from [0, density_range); a draw of
    1-9 becomes a given digit, anything else leaves the cell unknown. Givens
    are not checked against each other, so most grids with many givens have
    no solution.
    """

    def __init__(self, density_range: int = 100, seed: Optional[int] = None):
        """
        Args:
            density_range: Upper bound of the draw. Must be at least 10 so that
                           every digit can appear; larger values mean fewer givens.
            seed: Random seed for reproducibility.
        """
        if density_range < SIZE + 1:
            raise ValueError(f"density_range must be at least {SIZE + 1}, got {density_range}")
        self.density_range = density_range
        self.rng = np.random.default_rng(seed)

    def generate(self) -> Grid:
        draws = self.rng.integers(0, self.density_range, size=(SIZE, SIZE))
        return Grid([
            [{int(v)} if 1 <= v <= SIZE else DIGITS for v in row]
            for row in draws
        ])

    def generate_batch(self, count: int) -> List[Grid]:
        return [self.generate() for _ in range(count)]


class TrialRunner:
    """
    Runs the solver on a batch of random grids and collects timings.

    Every solution is re-checked with Grid.is_consistent, so a solved but
    inconsistent trial points at a solver bug.
    """

    def __init__(
        self,
        count: int = 100,
        density_range: int = 100,
        seed: Optional[int] = None,
        solver: Optional[BaseSolver] = None
    ):
        """
        Args:
            count: Number of random grids to solve.
            density_range: See RandomGridFactory.
            seed: Random seed for reproducibility.
            solver: Solver to run (default: SearchSolver).
        """
        self.count = count
        self.factory = RandomGridFactory(density_range=density_range, seed=seed)
        self.solver = solver or SearchSolver()
        self.grids: List[Grid] = []
        self.results: List[TrialResult] = []

    def run(self, show_progress: bool = True) -> List[TrialResult]:
        """
        Generate the grids (once) and solve each of them.

        Returns:
            List of TrialResult objects, one per grid, in trial order.
        """
        if not self.grids:
            self.grids = self.factory.generate_batch(self.count)

        self.results = []
        for trial_id, grid in enumerate(
            tqdm(self.grids, desc="Trials", disable=not show_progress), start=1
        ):
            self.results.append(self._run_single(trial_id, grid))
        return self.results

    def _run_single(self, trial_id: int, grid: Grid) -> TrialResult:
        solution, stats = self.solver.solve(grid)
        consistent = solution is not None and solution.is_consistent()
        if solution is not None and not consistent:
            log.warning("Trial %d produced an inconsistent solution", trial_id)

        return TrialResult(
            trial_id=trial_id,
            givens=grid.count_resolved(),
            solved=stats.solved,
            consistent=consistent,
            time_seconds=stats.time_seconds,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            puzzle=grid.to_string(),
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from trial results."""
        times = np.array([r.time_seconds for r in self.results], dtype=float)
        solved = [r for r in self.results if r.solved]
        summary: Dict[str, Any] = {
            "algorithm": self.solver.name,
            "total_trials": len(self.results),
            "solved": len(solved),
            "unsolvable": len(self.results) - len(solved),
            "consistent": sum(1 for r in solved if r.consistent),
            "inconsistent": sum(1 for r in solved if not r.consistent),
            "errors": sum(1 for r in self.results if "error" in r.extra),
        }
        if len(times):
            summary.update({
                "avg_time_seconds": float(np.mean(times)),
                "median_time_seconds": float(np.median(times)),
                "max_time_seconds": float(np.max(times)),
                "min_time_seconds": float(np.min(times)),
                "total_time_seconds": float(np.sum(times)),
            })
        return summary

    def save_results(self, output_dir: str) -> None:
        """Save trial results and summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "trial_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "trial_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
