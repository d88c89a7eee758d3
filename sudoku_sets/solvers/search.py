"""Backtracking search over propagated candidate grids."""

from __future__ import annotations
from typing import List, Optional
import logging

from .base_solver import BaseSolver
from .propagation import reduce, reduce_counted
from ..core.grid import Grid, SIZE

log = logging.getLogger(__name__)


def guessed(grid: Grid) -> List[Grid]:
    """
    Generate mutually exclusive branches for the most constrained cell.

    The cell is the unresolved one with the fewest candidates, the first in
    row-major order on ties. One branch is produced per candidate digit, in
    ascending order, with the cell fixed to that digit. Either one of the
    branches has a solution or the grid has none.

    Returns:
        The branches, or an empty list if every cell is resolved.
    """
    best = None
    min_size = SIZE + 1
    for i in range(SIZE):
        for j in range(SIZE):
            size = len(grid.cells[i][j])
            if size != 1 and size < min_size:
                best = (i, j)
                min_size = size

    if best is None:
        return []
    row, col = best
    return [grid.with_cell(row, col, {d}) for d in sorted(grid.cells[row][col])]


def solved(grid: Grid) -> Optional[Grid]:
    """
    Search a reduced grid for a solution.

    Args:
        grid: A grid already at its propagation fixed point.

    Returns:
        The first solution found, or None if no solution exists.
    """
    if grid.is_solved():
        return grid
    if not grid.is_solvable():
        return None

    for branch in guessed(grid):
        solution = solved(reduce(branch))
        if solution is not None:
            return solution
    return None


def solve(grid: Grid) -> Optional[Grid]:
    """Solve a puzzle. Returns the solved grid, or None if there is no solution."""
    return solved(reduce(grid))


class SearchSolver(BaseSolver):
    """
    Propagation + backtracking solver that records search statistics.

    Explores exactly the same branches, in the same order, as solve():
    - iterations: search nodes visited
    - nodes_explored: branches generated
    - backtracks: branches that led to no solution
    - extra["propagation_passes"]: elimination passes over all reductions
    - extra["max_depth"]: deepest guess level reached
    """

    name = "Propagation+Backtracking"

    def _solve(self, grid: Grid) -> Optional[Grid]:
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0
        self.stats.extra["propagation_passes"] = 0
        self.stats.extra["max_depth"] = 0

        return self._search(self._reduce(grid), depth=0)

    def _reduce(self, grid: Grid) -> Grid:
        reduced, passes = reduce_counted(grid)
        self.stats.extra["propagation_passes"] += passes
        return reduced

    def _search(self, grid: Grid, depth: int) -> Optional[Grid]:
        self.stats.iterations += 1
        if depth > self.stats.extra["max_depth"]:
            self.stats.extra["max_depth"] = depth

        if grid.is_solved():
            return grid
        if not grid.is_solvable():
            return None

        branches = guessed(grid)
        self.stats.nodes_explored += len(branches)
        log.debug("depth %d: branching over %d candidates", depth, len(branches))

        for branch in branches:
            solution = self._search(self._reduce(branch), depth + 1)
            if solution is not None:
                return solution
            self.stats.backtracks += 1
        return None
