"""Singleton elimination to a fixed point."""

from __future__ import annotations
from typing import List, Tuple

from ..core.grid import Grid, SIZE


def resolved_cells(grid: Grid) -> List[Tuple[int, int, int]]:
    """All resolved cells as (row, col, digit), in row-major order."""
    return [
        (i, j, next(iter(grid.cells[i][j])))
        for i in range(SIZE)
        for j in range(SIZE)
        if len(grid.cells[i][j]) == 1
    ]


def reduce_once(grid: Grid) -> Grid:
    """
    Perform a single elimination pass.

    Every cell resolved at the start of the pass removes its digit from the
    other cells of its row, column and block. A pass may empty a cell; that
    is left for the caller to detect with Grid.is_solvable.
    """
    result = grid
    for row, col, digit in resolved_cells(grid):
        def drop(candidates, digit=digit):
            return candidates - {digit}
        result = (
            result.map_row(row, col, drop)
            .map_column(row, col, drop)
            .map_block(row, col, drop)
        )
    return result


def reduce(grid: Grid) -> Grid:
    """
    Reduce the grid until another pass changes nothing.

    Terminates because candidate sets only shrink.
    """
    return reduce_counted(grid)[0]


def reduce_counted(grid: Grid) -> Tuple[Grid, int]:
    """Like reduce, also returning the number of passes run, the final unchanged one included."""
    current = grid
    passes = 0
    while True:
        reduced = reduce_once(current)
        passes += 1
        if reduced == current:
            return current, passes
        current = reduced
