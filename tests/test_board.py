"""Tests for the board, cell and cell-group model."""

import pytest

from sudoku.board import Board, CellGroup
from sudoku.errors import ConfigurationError, FormatError


SOLVED_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]


class TestBoardConstruction:
    """Tests for board size validation and indexing."""

    @pytest.mark.parametrize("size", [1, 4, 9, 16, 25])
    def test_perfect_square_sizes_are_accepted(self, size):
        board = Board(size)

        assert board.size == size
        assert board.box_size ** 2 == size
        assert list(board.value_range) == list(range(1, size + 1))
        assert len(board.cells) == size * size

    @pytest.mark.parametrize("size", [0, -4, 2, 3, 8, 10, 15])
    def test_non_square_sizes_are_rejected(self, size):
        with pytest.raises(ConfigurationError):
            Board(size)

    def test_configuration_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Board(8)

    def test_default_size_is_nine(self):
        assert Board().size == 9

    def test_new_board_is_empty(self):
        board = Board(4)

        assert all(cell.is_empty() for cell in board.cells)
        assert len(board.empty_cells()) == 16
        assert board.is_complete() is False


class TestCellGroups:
    """Tests for row, column and box partitions."""

    @pytest.mark.parametrize("size", [1, 4, 9, 16])
    def test_each_cell_is_in_its_groups_exactly_once(self, size):
        board = Board(size)

        for cell in board.cells:
            for group in cell.related_cell_groups():
                assert sum(1 for member in group if member is cell) == 1

    @pytest.mark.parametrize("size", [4, 9, 16])
    def test_partitions_cover_board_disjointly(self, size):
        board = Board(size)
        all_ids = {id(cell) for cell in board.cells}

        for groups in (board.rows, board.columns, board.boxes):
            assert len(groups) == size
            member_ids = [id(cell) for group in groups for cell in group]
            assert len(member_ids) == size * size
            assert set(member_ids) == all_ids

    def test_box_lookup_uses_integer_division(self):
        board = Board(9)

        box = board.box_of(board.cell(4, 7))

        assert {(cell.row, cell.column) for cell in box} == {
            (r, c) for r in range(3, 6) for c in range(6, 9)
        }

    def test_row_and_column_lookup(self):
        board = Board(4)
        cell = board.cell(2, 1)

        assert [c.column for c in board.row_of(cell)] == [0, 1, 2, 3]
        assert all(c.row == 2 for c in board.row_of(cell))
        assert [c.row for c in board.column_of(cell)] == [0, 1, 2, 3]
        assert all(c.column == 1 for c in board.column_of(cell))

    def test_contains_and_occurs_exactly_once(self):
        board = Board(4)
        row = board.rows[0]
        board.set_given(0, 0, 3)

        assert row.contains(3) is True
        assert row.contains(2) is False
        assert row.occurs_exactly_once(3) is True

        board.set_given(0, 2, 3)
        assert row.contains(3) is True
        assert row.occurs_exactly_once(3) is False

    def test_group_is_immutable_snapshot_of_cells(self):
        board = Board(4)
        cells = board.rows[0].cells
        group = CellGroup(list(cells))

        assert isinstance(group.cells, tuple)
        assert len(group) == 4
        assert cells[0] in group
        assert board.cell(1, 0) not in group


class TestCell:
    """Tests for cell values, choices and related cells."""

    def test_set_given_marks_cell(self):
        board = Board(4)
        board.set_given(1, 2, 4)
        cell = board.cell(1, 2)

        assert cell.value == 4
        assert cell.given is True
        assert cell.is_empty() is False
        assert cell not in board.empty_cells()

    def test_clear_resets_value(self):
        board = Board(4)
        cell = board.cell(0, 0)
        cell.value = 2

        cell.clear()

        assert cell.is_empty() is True

    def test_related_cells_are_deduplicated_and_cached(self):
        board = Board(9)
        cell = board.cell(0, 0)

        related = cell.related_cells

        # 8 in row, 8 in column, 4 more in the box, plus the cell itself.
        assert len(related) == 21
        assert len({id(c) for c in related}) == 21
        assert cell in related
        assert cell.related_cells is related

    def test_accepts_own_value(self):
        board = Board(4)
        board.set_given(0, 0, 2)
        cell = board.cell(0, 0)

        assert cell.accepts_value(cell.value) is True

    def test_accepts_value_rejects_related_values(self):
        board = Board(4)
        board.set_given(0, 3, 1)  # row
        board.set_given(3, 0, 2)  # column
        board.set_given(1, 1, 3)  # box
        cell = board.cell(0, 0)

        assert cell.accepts_value(1) is False
        assert cell.accepts_value(2) is False
        assert cell.accepts_value(3) is False
        assert cell.accepts_value(4) is True
        assert cell.choices() == [4]

    def test_accepts_value_ignores_given_flag(self):
        board = Board(4)
        board.set_given(0, 0, 1)

        assert board.cell(0, 0).accepts_value(2) is True

    def test_choices_are_ascending(self):
        board = Board(9)
        board.set_given(0, 8, 5)
        board.set_given(8, 0, 2)

        assert board.cell(0, 0).choices() == [1, 3, 4, 6, 7, 8, 9]

    def test_choices_on_complete_board_never_conflict(self):
        board = Board.from_grid(SOLVED_4X4)

        for cell in board.cells:
            assert cell.choices() == [cell.value]
            for value in cell.choices():
                assert cell.related_cells.occurs_exactly_once(value)


class TestFromGrid:
    """Tests for building boards from lists of rows."""

    def test_zero_and_none_are_empty(self):
        board = Board.from_grid([[1, 0, None, 4], [0] * 4, [0] * 4, [0] * 4])

        assert board.cell(0, 0).given is True
        assert board.cell(0, 1).is_empty()
        assert board.cell(0, 2).is_empty()
        assert board.to_grid()[0] == [1, 0, 0, 4]

    def test_ragged_rows_are_rejected(self):
        with pytest.raises(FormatError):
            Board.from_grid([[0] * 4, [0] * 3, [0] * 4, [0] * 4])

    def test_row_count_must_match_row_length(self):
        with pytest.raises(FormatError):
            Board.from_grid([[0] * 4 for _ in range(3)])

    def test_empty_grid_is_rejected(self):
        with pytest.raises(FormatError):
            Board.from_grid([])

    def test_values_outside_range_are_rejected(self):
        with pytest.raises(FormatError):
            Board.from_grid([[5, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])

    def test_non_square_grid_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Board.from_grid([[0, 0], [0, 0]])

    def test_str_renders_rows(self):
        board = Board.from_grid([[1, 0, 0, 4], [0] * 4, [0] * 4, [0] * 4])

        assert str(board).splitlines()[0] == "1 _ _ 4"
        assert str(board).splitlines()[1] == "_ _ _ _"
