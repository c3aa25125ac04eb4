"""Render boards as text."""

from __future__ import annotations

from typing import TextIO

from ..board import Board


def render_board(board: Board) -> str:
    """Board as ``size`` lines of space-separated tokens, ``_`` for empty cells."""
    return str(board)


def write_board(board: Board, output: TextIO) -> None:
    output.write(render_board(board))
    output.write("\n")
