"""Validation utilities for candidate grids."""

from __future__ import annotations
from typing import List, Tuple, TYPE_CHECKING

from .grid import SIZE, BOX_SIZE

if TYPE_CHECKING:
    from .grid import Grid


Cell = Tuple[int, int]


def _units() -> List[List[Cell]]:
    units = [[(r, c) for c in range(SIZE)] for r in range(SIZE)]
    units += [[(r, c) for r in range(SIZE)] for c in range(SIZE)]
    for br in range(0, SIZE, BOX_SIZE):
        for bc in range(0, SIZE, BOX_SIZE):
            units.append([
                (br + i, bc + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)
            ])
    return units


UNITS = _units()


def conflicting_givens(grid: Grid) -> List[Tuple[Cell, Cell, int]]:
    """
    Find pairs of resolved cells that share a row, column or block and hold
    the same digit.

    Returns:
        List of (cell_a, cell_b, digit) with cell_a before cell_b in
        row-major order. A pair sharing several units is reported once.
    """
    conflicts = set()
    for unit in UNITS:
        seen = {}
        for cell in unit:
            candidates = grid.get(*cell)
            if len(candidates) != 1:
                continue
            digit = next(iter(candidates))
            if digit in seen:
                conflicts.add((min(seen[digit], cell), max(seen[digit], cell), digit))
            else:
                seen[digit] = cell
    return sorted(conflicts)


def respects_givens(puzzle: Grid, solution: Grid) -> bool:
    """Check that every cell of the solution lies within the puzzle's candidates."""
    for i in range(SIZE):
        for j in range(SIZE):
            if not solution.get(i, j) <= puzzle.get(i, j):
                return False
    return True


def validate_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is solved, consistent, and keeps the puzzle's givens.
    """
    return (
        solution.is_solved()
        and solution.is_consistent()
        and respects_givens(puzzle, solution)
    )
