"""A board bound to its solver and verifier."""

from __future__ import annotations

from typing import Optional

from .board import Board
from .solver.backtracking import BruteForceSolver
from .solver.base import Solver
from .solver.verifier import Verifier


class Game:
    """
    Couples a board with the solver and verifier working on it.

    The board is usually set by the text reader. Solver and verifier are
    created lazily on first access and can be replaced through their setters.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board
        self._solver: Optional[Solver] = None
        self._verifier: Optional[Verifier] = None

    @property
    def solver(self) -> Solver:
        if self._solver is None:
            self._solver = BruteForceSolver(self.board)
        return self._solver

    @solver.setter
    def solver(self, solver: Solver) -> None:
        self._solver = solver

    @property
    def verifier(self) -> Verifier:
        if self._verifier is None:
            self._verifier = Verifier(self.board)
        return self._verifier

    @verifier.setter
    def verifier(self, verifier: Verifier) -> None:
        self._verifier = verifier
