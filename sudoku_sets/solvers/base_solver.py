"""Base solver interface and run statistics."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.grid import Grid

log = logging.getLogger(__name__)


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

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for grid solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = False):
        """
        Args:
            track_memory: Record peak memory with tracemalloc. Slows the
                          solve down noticeably.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> tuple[Optional[Grid], SolverStats]:
        """
        Solve a puzzle with timing and optional memory tracking.

        Args:
            grid: The puzzle to solve. Grids are immutable, so it is passed
                  to the solver as is.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        if self.track_memory:
            tracemalloc.start()

        start_time = time.perf_counter()

        try:
            solution = self._solve(grid)
            self.stats.solved = solution is not None and solution.is_solved()
        except Exception as e:
            log.warning("%s failed: %s", self.name, e)
            self.stats.extra["error"] = str(e)
            solution = None

        self.stats.time_seconds = time.perf_counter() - start_time

        if self.track_memory:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        return solution, self.stats

    @abstractmethod
    def _solve(self, grid: Grid) -> Optional[Grid]:
        """
        Internal solve method to be implemented by subclasses.

        Returns:
            The solved grid, or None if no solution exists.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
