"""Solver module exports."""

from .base import Solver
from .backtracking import BruteForceSolver
from .verifier import Verifier

__all__ = ["Solver", "BruteForceSolver", "Verifier"]
