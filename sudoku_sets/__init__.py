"""Sudoku solver built on candidate-set propagation and backtracking."""

from .core.grid import Grid
from .solvers.search import solve, SearchSolver

__all__ = ["Grid", "solve", "SearchSolver"]
