"""Unit tests for the candidate grid and validation."""

import pytest
import numpy as np
from sudoku_sets.core.grid import Grid, DIGITS
from sudoku_sets.core.validator import conflicting_givens, respects_givens, validate_solution


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestGridConstruction:
    """Tests for building grids."""

    def test_empty_grid(self):
        grid = Grid.empty()
        assert all(c == DIGITS for row in grid.cells for c in row)
        assert grid.count_resolved() == 0
        assert grid.candidate_count() == 81 * 9

    def test_explicit_candidate_sets(self):
        cells = [[{1, 2, 3}] * 9 for _ in range(9)]
        cells[4][4] = set()
        grid = Grid(cells)
        assert grid.get(0, 0) == frozenset({1, 2, 3})
        assert grid.get(4, 4) == frozenset()

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            Grid([[DIGITS] * 9 for _ in range(8)])
        with pytest.raises(ValueError):
            Grid([[DIGITS] * 8 for _ in range(9)])

    def test_from_string(self):
        grid = Grid.from_string(TEST_PUZZLE)
        assert grid.get(0, 0) == {5}
        assert grid.get(0, 2) == DIGITS
        assert grid.get(8, 8) == {9}
        assert grid.count_resolved() == 30

    def test_from_string_dots_and_whitespace(self):
        s = "\n".join(TEST_PUZZLE[i:i + 9].replace("0", ".") for i in range(0, 81, 9))
        assert Grid.from_string(s) == Grid.from_string(TEST_PUZZLE)

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Grid.from_string("123")
        with pytest.raises(ValueError):
            Grid.from_string("x" + TEST_PUZZLE[1:])

    def test_from_digits_accepts_numpy(self):
        digits = np.zeros((9, 9), dtype=np.int32)
        digits[3, 7] = 4
        grid = Grid.from_digits(digits)
        assert grid.get(3, 7) == {4}
        assert grid.get(0, 0) == DIGITS

    def test_from_digits_none_is_unknown(self):
        data = [[None] * 9 for _ in range(9)]
        data[0][0] = 9
        grid = Grid.from_digits(data)
        assert grid.get(0, 0) == {9}
        assert grid.get(0, 1) == DIGITS

    def test_to_string_round_trip(self):
        assert Grid.from_string(TEST_PUZZLE).to_string() == TEST_PUZZLE

    def test_to_digits(self):
        digits = Grid.from_string(TEST_SOLUTION).to_digits()
        assert digits.shape == (9, 9)
        assert digits[0, 0] == 5
        assert digits[8, 8] == 9


class TestGridViews:
    """Tests for rows, columns and blocks."""

    def test_column(self):
        grid = Grid.from_string(TEST_SOLUTION)
        assert [next(iter(c)) for c in grid.column(0)] == [5, 6, 1, 8, 4, 7, 9, 2, 3]

    def test_block(self):
        grid = Grid.from_string(TEST_SOLUTION)
        assert [next(iter(c)) for c in grid.block(1, 2)] == [4, 2, 3, 7, 9, 1, 8, 5, 6]

    def test_view_counts(self):
        grid = Grid.empty()
        assert len(grid.rows()) == 9
        assert len(grid.columns()) == 9
        assert len(grid.blocks()) == 9
        assert all(len(line) == 9 for line in grid.blocks())


class TestGridPredicates:
    """Tests for solved, solvable and consistent checks."""

    def test_solved_grid(self):
        grid = Grid.from_string(TEST_SOLUTION)
        assert grid.is_solved()
        assert grid.is_consistent()
        assert grid.is_solvable()

    def test_puzzle_not_solved(self):
        grid = Grid.from_string(TEST_PUZZLE)
        assert not grid.is_solved()
        assert grid.is_solvable()

    def test_duplicate_digits_inconsistent(self):
        swapped = "35" + TEST_SOLUTION[2:]
        grid = Grid.from_string(swapped)
        assert grid.is_solved()
        assert not grid.is_consistent()

    def test_empty_cell_not_solvable(self):
        grid = Grid.empty().with_cell(2, 3, set())
        assert not grid.is_solvable()


class TestGridTransforms:
    """Tests for the copy-on-write transforms."""

    def test_with_cell_leaves_original(self):
        grid = Grid.empty()
        changed = grid.with_cell(0, 0, {7})
        assert changed.get(0, 0) == {7}
        assert grid.get(0, 0) == DIGITS
        assert changed != grid

    def test_unchanged_rows_are_shared(self):
        grid = Grid.empty()
        changed = grid.with_cell(0, 0, {7})
        assert changed.rows()[5] is grid.rows()[5]

    def test_map_row_skips_origin(self):
        drop = lambda c: c - {1}
        grid = Grid.empty().map_row(4, 2, drop)
        assert grid.get(4, 2) == DIGITS
        assert all(grid.get(4, j) == DIGITS - {1} for j in range(9) if j != 2)
        assert grid.get(3, 3) == DIGITS

    def test_map_column_skips_origin(self):
        drop = lambda c: c - {1}
        grid = Grid.empty().map_column(4, 2, drop)
        assert grid.get(4, 2) == DIGITS
        assert all(grid.get(i, 2) == DIGITS - {1} for i in range(9) if i != 4)
        assert grid.get(4, 3) == DIGITS

    def test_map_block_skips_origin(self):
        drop = lambda c: c - {1}
        grid = Grid.empty().map_block(4, 5, drop)
        assert grid.get(4, 5) == DIGITS
        for i in range(3, 6):
            for j in range(3, 6):
                if (i, j) != (4, 5):
                    assert grid.get(i, j) == DIGITS - {1}
        assert grid.get(2, 5) == DIGITS
        assert grid.get(4, 6) == DIGITS

    def test_equality_and_hash(self):
        a = Grid.from_string(TEST_PUZZLE)
        b = Grid.from_string(TEST_PUZZLE)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Grid.empty()


class TestRendering:
    """Tests for text output."""

    def test_str_marks_unresolved(self):
        lines = str(Grid.from_string(TEST_PUZZLE)).split("\n")
        assert len(lines) == 9
        assert lines[0] == "5 3 _ _ 7 _ _ _ _"

    def test_pretty(self):
        text = Grid.from_string(TEST_PUZZLE).pretty()
        assert "+-------+-------+-------+" in text
        assert "| 5 3 . | . 7 . | . . . |" in text


class TestValidator:
    """Tests for validation utilities."""

    def test_conflicting_givens(self):
        grid = Grid.from_string("55" + TEST_PUZZLE[2:])
        assert conflicting_givens(grid) == [((0, 0), (0, 1), 5)]

    def test_no_conflicts(self):
        assert conflicting_givens(Grid.from_string(TEST_PUZZLE)) == []

    def test_validate_solution(self):
        puzzle = Grid.from_string(TEST_PUZZLE)
        solution = Grid.from_string(TEST_SOLUTION)
        assert respects_givens(puzzle, solution)
        assert validate_solution(puzzle, solution)

    def test_solution_must_keep_givens(self):
        puzzle = Grid.from_string(TEST_PUZZLE)
        other = Grid.from_string(TEST_SOLUTION).with_cell(0, 0, {1})
        assert not respects_givens(puzzle, other)
        assert not validate_solution(puzzle, other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
