"""Stepping solver interface."""

from __future__ import annotations

import abc
import logging

from ..board import Board

_LOGGER = logging.getLogger(__name__)


class Solver(abc.ABC):
    """
    Base class for solvers that make progress one step at a time.

    Subclasses implement :meth:`step`; :meth:`solve` drives it until no
    further progress is possible.
    """

    def __init__(self, board: Board):
        self.board = board
        self.steps = 0

    def solve(self) -> int:
        """
        Keep calling :meth:`step` until it returns False.

        Returns:
            Total number of steps taken by this solver
        """
        while self.step():
            self.steps += 1

        if self.board.is_complete():
            _LOGGER.info(
                "Solved %dx%d board in %d steps",
                self.board.size,
                self.board.size,
                self.steps,
            )
        else:
            _LOGGER.warning("Search exhausted after %d steps, no solution", self.steps)
        return self.steps

    @abc.abstractmethod
    def step(self) -> bool:
        """Perform one unit of progress and return whether more work remains."""
        raise NotImplementedError
