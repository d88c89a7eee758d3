"""Immutable 9x9 grid of candidate sets."""

from __future__ import annotations
import numpy as np
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Tuple


SIZE = 9
BOX_SIZE = 3
DIGITS: FrozenSet[int] = frozenset(range(1, SIZE + 1))

Candidates = FrozenSet[int]
Line = Tuple[Candidates, ...]


class Grid:
    """
    A Sudoku grid where every cell holds the set of digits still possible there.

    A cell with exactly one candidate is resolved; a cell with no candidates
    is a contradiction. Grids are never mutated: every transform returns a new
    Grid, and rows that a transform does not touch are shared with the parent.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Iterable[Iterable[int]]]):
        """
        Build a grid from an explicit 9x9 matrix of candidate sets.

        Args:
            cells: 9 rows of 9 iterables of digits. Empty sets are allowed.

        Raises:
            ValueError: If the matrix is not 9x9.
        """
        rows = tuple(tuple(frozenset(c) for c in row) for row in cells)
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE})")
        self.cells: Tuple[Line, ...] = rows

    @classmethod
    def _from_rows(cls, rows: Tuple[Line, ...]) -> Grid:
        # Rows are already tuples of frozensets with the right shape.
        grid = cls.__new__(cls)
        grid.cells = rows
        return grid

    @classmethod
    def empty(cls) -> Grid:
        """Create a grid where every cell is unknown."""
        row = (DIGITS,) * SIZE
        return cls._from_rows((row,) * SIZE)

    @classmethod
    def from_digits(cls, data: Sequence[Sequence[Optional[int]]]) -> Grid:
        """
        Create a grid from a 9x9 matrix of digits.

        Args:
            data: Nested lists or a numpy array. 0 or None marks an unknown
                  cell, 1-9 a given digit.
        """
        arr = np.array(
            [[0 if v is None else v for v in row] for row in data], dtype=np.int32
        )
        if arr.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE})")
        return cls(
            [[DIGITS if v == 0 else {int(v)} for v in row] for row in arr]
        )

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from an 81 character puzzle string.

        '0' or '.' for unknown cells, '1'-'9' for givens. Whitespace is ignored.
        """
        chars = "".join(s.split())
        if len(chars) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(chars)}")

        digits: List[List[int]] = []
        for i in range(SIZE):
            row = []
            for c in chars[i * SIZE:(i + 1) * SIZE]:
                if c in "0.":
                    row.append(0)
                elif c in "123456789":
                    row.append(int(c))
                else:
                    raise ValueError(f"Invalid puzzle character: {c!r}")
            digits.append(row)
        return cls.from_digits(digits)

    def get(self, row: int, col: int) -> Candidates:
        """Candidate set of the cell at (row, col)."""
        return self.cells[row][col]

    def is_resolved(self, row: int, col: int) -> bool:
        return len(self.cells[row][col]) == 1

    # Structural views

    def row(self, i: int) -> Line:
        return self.cells[i]

    def column(self, j: int) -> Line:
        return tuple(self.cells[i][j] for i in range(SIZE))

    def block(self, br: int, bc: int) -> Line:
        """Cells of block (br, bc) in row-major order."""
        return tuple(
            self.cells[k][l]
            for k in range(BOX_SIZE * br, BOX_SIZE * (br + 1))
            for l in range(BOX_SIZE * bc, BOX_SIZE * (bc + 1))
        )

    def rows(self) -> Tuple[Line, ...]:
        return self.cells

    def columns(self) -> Tuple[Line, ...]:
        return tuple(self.column(j) for j in range(SIZE))

    def blocks(self) -> Tuple[Line, ...]:
        return tuple(
            self.block(br, bc) for br in range(BOX_SIZE) for bc in range(BOX_SIZE)
        )

    # Predicates

    def is_solved(self) -> bool:
        """True if every cell is resolved."""
        return all(len(c) == 1 for row in self.cells for c in row)

    def is_solvable(self) -> bool:
        """False as soon as any cell has run out of candidates."""
        return not any(len(c) == 0 for row in self.cells for c in row)

    def is_consistent(self) -> bool:
        """
        Check that every row, column and block covers exactly the digits 1-9.

        Only meaningful for a solved grid: an unresolved grid covers all
        digits in most lines without being a valid solution.
        """
        for lines in (self.rows(), self.columns(), self.blocks()):
            for line in lines:
                if frozenset().union(*line) != DIGITS:
                    return False
        return True

    # Copy-on-write transforms

    def with_cell(self, row: int, col: int, candidates: Iterable[int]) -> Grid:
        """Return a new grid with the cell at (row, col) replaced."""
        new_row = list(self.cells[row])
        new_row[col] = frozenset(candidates)
        rows = list(self.cells)
        rows[row] = tuple(new_row)
        return Grid._from_rows(tuple(rows))

    def map_row(self, row: int, col: int, f: Callable[[Candidates], Candidates]) -> Grid:
        """Apply f to every cell in the row of (row, col), except (row, col) itself."""
        new_row = tuple(
            c if j == col else frozenset(f(c)) for j, c in enumerate(self.cells[row])
        )
        rows = list(self.cells)
        rows[row] = new_row
        return Grid._from_rows(tuple(rows))

    def map_column(self, row: int, col: int, f: Callable[[Candidates], Candidates]) -> Grid:
        """Apply f to every cell in the column of (row, col), except (row, col) itself."""
        rows = []
        for i, line in enumerate(self.cells):
            if i == row:
                rows.append(line)
            else:
                new_row = list(line)
                new_row[col] = frozenset(f(line[col]))
                rows.append(tuple(new_row))
        return Grid._from_rows(tuple(rows))

    def map_block(self, row: int, col: int, f: Callable[[Candidates], Candidates]) -> Grid:
        """Apply f to every cell in the block of (row, col), except (row, col) itself."""
        top = (row // BOX_SIZE) * BOX_SIZE
        left = (col // BOX_SIZE) * BOX_SIZE
        rows = list(self.cells)
        for i in range(top, top + BOX_SIZE):
            new_row = list(rows[i])
            for j in range(left, left + BOX_SIZE):
                if (i, j) != (row, col):
                    new_row[j] = frozenset(f(new_row[j]))
            rows[i] = tuple(new_row)
        return Grid._from_rows(tuple(rows))

    # Conversions

    def count_resolved(self) -> int:
        return sum(1 for row in self.cells for c in row if len(c) == 1)

    def candidate_count(self) -> int:
        """Total number of remaining candidates over all 81 cells."""
        return sum(len(c) for row in self.cells for c in row)

    def to_digits(self) -> np.ndarray:
        """9x9 int array with resolved digits and 0 everywhere else."""
        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for i, row in enumerate(self.cells):
            for j, c in enumerate(row):
                if len(c) == 1:
                    grid[i, j] = next(iter(c))
        return grid

    def to_string(self) -> str:
        """Compact 81 character form, '0' for unresolved cells."""
        return "".join(str(v) for v in self.to_digits().flatten())

    def pretty(self) -> str:
        """Boxed rendering with '.' for unresolved cells."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i, row in enumerate(self.cells):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j, c in enumerate(row):
                row_str += f' {next(iter(c))}' if len(c) == 1 else ' .'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __str__(self) -> str:
        return '\n'.join(
            ' '.join(str(next(iter(c))) if len(c) == 1 else '_' for c in row)
            for row in self.cells
        )

    def __repr__(self) -> str:
        return f"Grid(resolved={self.count_resolved()}, candidates={self.candidate_count()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __hash__(self) -> int:
        return hash(self.cells)
