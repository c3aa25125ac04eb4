"""Sudoku solver using backtracking algorithm."""

from __future__ import annotations

from ..board import Board, Cell
from .base import Solver


class BruteForceSolver(Solver):
    """
    Depth-first search over the board's empty cells.

    The empty cells are captured once, in row-major order, when the solver
    is created. Given cells are never part of that list and are never
    touched. Each step either advances to the next empty cell after placing
    a candidate or clears the current cell and backs up to the previous one.
    """

    def __init__(self, board: Board):
        super().__init__(board)
        self._cells: list[Cell] = board.empty_cells()
        self._index = 0

    @property
    def cells(self) -> list[Cell]:
        return list(self._cells)

    @property
    def index(self) -> int:
        return self._index

    @property
    def exhausted(self) -> bool:
        """Whether backtracking ran past the first cell, so there is no solution."""
        return self._index < 0

    def step(self) -> bool:
        if self._index < 0 or self._index == len(self._cells):
            return False

        if self._try_next_choice():
            self._index += 1
        else:
            self._cells[self._index].clear()
            self._index -= 1
        return True

    def _try_next_choice(self) -> bool:
        """
        Place the next candidate in the current cell.

        Returns:
            True if a value was placed, False if no candidates are left
        """
        cell = self._cells[self._index]
        choices = cell.choices()
        if not choices:
            return False

        if cell.is_empty():
            cell.value = choices[0]
            return True

        next_choice = next((v for v in choices if v > cell.value), None)
        if next_choice is None:
            return False
        cell.value = next_choice
        return True
