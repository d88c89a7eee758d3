"""Solvers module: propagation and backtracking search."""

from .base_solver import BaseSolver, SolverStats
from .propagation import resolved_cells, reduce_once, reduce, reduce_counted
from .search import guessed, solved, solve, SearchSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "resolved_cells",
    "reduce_once",
    "reduce",
    "reduce_counted",
    "guessed",
    "solved",
    "solve",
    "SearchSolver",
]
