"""Board, cell and cell-group model for N x N Sudoku puzzles."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional, Sequence

from .errors import ConfigurationError, FormatError

Grid = list[list[int]]


class CellGroup:
    """An immutable row, column or box of cells."""

    def __init__(self, cells: Iterable[Cell]):
        self._cells: tuple[Cell, ...] = tuple(cells)

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return any(member is cell for member in self._cells)

    def values(self) -> list[Optional[int]]:
        """Current values of the members, ``None`` for empty cells."""
        return [cell.value for cell in self._cells]

    def contains(self, value: int) -> bool:
        """Whether any member currently holds ``value``."""
        return any(cell.value == value for cell in self._cells)

    def occurs_exactly_once(self, value: int) -> bool:
        """Whether precisely one member currently holds ``value``."""
        return sum(1 for cell in self._cells if cell.value == value) == 1


class Cell:
    """
    A single grid position.

    A cell knows its value, whether that value is a puzzle given and the
    board it belongs to. The board reference is used only to look up the
    cell's row, column and box when computing choices.
    """

    def __init__(self, board: Board, row: int, column: int):
        self.board = board
        self.row = row
        self.column = column
        self.value: Optional[int] = None
        self._given = False
        self._related_cells: Optional[CellGroup] = None

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, column={self.column}, value={self.value})"

    @property
    def given(self) -> bool:
        return self._given

    def is_empty(self) -> bool:
        return self.value is None

    def set_given(self, value: int) -> None:
        """Set a predefined value and remember that it is a given."""
        self.value = value
        self._given = True

    def clear(self) -> None:
        self.value = None

    def accepts_value(self, value: int) -> bool:
        """
        Whether ``value`` can currently be placed in this cell.

        The cell's own current value is always accepted. The given flag is
        not consulted here; keeping givens fixed is up to the solver.
        """
        if value == self.value:
            return True
        return not self.related_cells.contains(value)

    def choices(self) -> list[int]:
        """
        Currently feasible values, in ascending order.

        Same result as filtering ``value_range`` through :meth:`accepts_value`,
        with the related values collected once per call.
        """
        taken = set(self.related_cells.values())
        return [
            v for v in self.board.value_range if v == self.value or v not in taken
        ]

    def related_cell_groups(self) -> tuple[CellGroup, CellGroup, CellGroup]:
        return (
            self.board.row_of(self),
            self.board.column_of(self),
            self.board.box_of(self),
        )

    @property
    def related_cells(self) -> CellGroup:
        """All cells sharing a row, column or box with this one (cached)."""
        if self._related_cells is None:
            seen: set[int] = set()
            members: list[Cell] = []
            for group in self.related_cell_groups():
                for cell in group:
                    if id(cell) not in seen:
                        seen.add(id(cell))
                        members.append(cell)
            self._related_cells = CellGroup(members)
        return self._related_cells


class Board:
    """
    An N x N board with N a perfect square.

    Rows, columns and boxes are indexed once at construction, so looking up
    a cell's groups is a list access by its coordinates.
    """

    def __init__(self, size: int = 9):
        box_size = math.isqrt(size) if size > 0 else 0
        if size <= 0 or box_size * box_size != size:
            raise ConfigurationError(f"Board size must be a perfect square, got {size}")

        self.size = size
        self.box_size = box_size
        self.value_range = range(1, size + 1)
        self._grid: list[list[Cell]] = [
            [Cell(self, r, c) for c in range(size)] for r in range(size)
        ]
        self._index_cell_groups()

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[Optional[int]]]) -> Board:
        """
        Build a board from a list of rows.

        Args:
            grid: Square list of rows, 0 or None for empty cells

        Returns:
            Board with every non-empty value set as a given

        Raises:
            FormatError: if the rows are not a uniform square grid or a value
                is outside 0..size
            ConfigurationError: if the row count is not a perfect square
        """
        if not grid:
            raise FormatError("Grid has no rows")
        size = len(grid)
        for index, row in enumerate(grid):
            if len(row) != size:
                raise FormatError(
                    f"Row {index} has {len(row)} cells, expected {size}"
                )

        board = cls(size)
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                if not value:
                    continue
                if not 1 <= value <= size:
                    raise FormatError(
                        f"Value {value} at ({r}, {c}) is outside 1-{size}"
                    )
                board.set_given(r, c, value)
        return board

    def _index_cell_groups(self) -> None:
        size, box = self.size, self.box_size
        self._rows = [CellGroup(row) for row in self._grid]
        self._columns = [
            CellGroup(self._grid[r][c] for r in range(size)) for c in range(size)
        ]
        self._boxes = [
            CellGroup(
                self._grid[r][c]
                for r in range(top, top + box)
                for c in range(left, left + box)
            )
            for top in range(0, size, box)
            for left in range(0, size, box)
        ]

    def _box_index(self, cell: Cell) -> int:
        return (cell.row // self.box_size) * self.box_size + cell.column // self.box_size

    def __str__(self) -> str:
        return "\n".join(
            " ".join("_" if cell.is_empty() else str(cell.value) for cell in row)
            for row in self._grid
        )

    def set_given(self, row: int, column: int, value: int) -> None:
        self._grid[row][column].set_given(value)

    def cell(self, row: int, column: int) -> Cell:
        return self._grid[row][column]

    @property
    def cells(self) -> list[Cell]:
        """All cells in row-major order."""
        return [cell for row in self._grid for cell in row]

    @property
    def rows(self) -> list[CellGroup]:
        return list(self._rows)

    @property
    def columns(self) -> list[CellGroup]:
        return list(self._columns)

    @property
    def boxes(self) -> list[CellGroup]:
        return list(self._boxes)

    def empty_cells(self) -> list[Cell]:
        """Cells without a value, in row-major order."""
        return [cell for cell in self.cells if cell.is_empty()]

    def row_of(self, cell: Cell) -> CellGroup:
        return self._rows[cell.row]

    def column_of(self, cell: Cell) -> CellGroup:
        return self._columns[cell.column]

    def box_of(self, cell: Cell) -> CellGroup:
        return self._boxes[self._box_index(cell)]

    def is_complete(self) -> bool:
        return not any(cell.is_empty() for cell in self.cells)

    def to_grid(self) -> Grid:
        """Current values as a list of rows, 0 for empty cells."""
        return [[cell.value or 0 for cell in row] for row in self._grid]
