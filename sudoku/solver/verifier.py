"""Consistency check for complete or partially filled boards."""

from __future__ import annotations

from ..board import Board, Cell


class Verifier:
    """Checks that no value repeats within a row, column or box. Empty cells are skipped."""

    def __init__(self, board: Board):
        self.board = board

    def conflicting_cells(self) -> list[Cell]:
        """Filled cells whose value appears more than once among their related cells."""
        return [
            cell
            for cell in self.board.cells
            if not cell.is_empty()
            and not cell.related_cells.occurs_exactly_once(cell.value)
        ]

    def is_valid(self) -> bool:
        return not self.conflicting_cells()
