"""Core module for the candidate grid and validation."""

from .grid import Grid, DIGITS, SIZE, BOX_SIZE
from .validator import conflicting_givens, respects_givens, validate_solution

__all__ = [
    "Grid",
    "DIGITS",
    "SIZE",
    "BOX_SIZE",
    "conflicting_givens",
    "respects_givens",
    "validate_solution",
]
