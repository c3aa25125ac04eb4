"""Backtracking solver for N x N Sudoku puzzles."""

from .board import Board, Cell, CellGroup
from .errors import ConfigurationError, FormatError, SudokuError
from .game import Game
from .solver import BruteForceSolver, Solver, Verifier

__all__ = [
    "Board",
    "Cell",
    "CellGroup",
    "ConfigurationError",
    "FormatError",
    "SudokuError",
    "Game",
    "Solver",
    "BruteForceSolver",
    "Verifier",
]
