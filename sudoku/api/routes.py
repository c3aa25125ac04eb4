"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import math
import os
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from ..board import Board, Grid
from ..errors import SudokuError
from ..game import Game
from ..models.schemas import (
    CellPosition,
    HealthResponse,
    SolveRequest,
    SolveResponse,
    SolveTextRequest,
    VerifyRequest,
    VerifyResponse,
)
from ..text.reader import read_board
from ..text.writer import render_board

router = APIRouter()
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


def _max_board_size() -> int:
    return _env("SUDOKU_MAX_BOARD_SIZE", 16)


def _config_error() -> str | None:
    """Describe what is wrong with the service configuration, if anything."""
    size = _max_board_size()
    if size <= 0 or math.isqrt(size) ** 2 != size:
        return f"SUDOKU_MAX_BOARD_SIZE must be a positive perfect square, got {size}"
    return None


def _size_error(size: int) -> str | None:
    limit = _max_board_size()
    if size > limit:
        return f"Board size {size} exceeds the maximum of {limit}"
    return None


def _solve_board(board: Board, original: Grid) -> SolveResponse:
    """Check the givens, run the backtracking search and build the response."""
    game = Game(board)

    if not game.verifier.is_valid():
        return SolveResponse(
            success=False,
            original=original,
            solved=None,
            message="Puzzle givens conflict",
        )

    steps = game.solver.solve()
    if not board.is_complete():
        return SolveResponse(
            success=False,
            original=original,
            solved=None,
            message="Puzzle has no solution",
            steps=steps,
        )

    return SolveResponse(
        success=True,
        original=original,
        solved=board.to_grid(),
        message="Puzzle solved successfully",
        steps=steps,
        solved_text=render_board(board),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", max_board_size=_max_board_size())


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of N integers (0 for empty), N a perfect square.
    """
    try:
        grid = request.grid.cells

        size_error = _size_error(len(grid))
        if size_error:
            _LOGGER.warning("Rejected grid: %s", size_error)
            return SolveResponse(
                success=False, original=grid, solved=None, message=size_error
            )

        try:
            board = Board.from_grid(grid)
        except SudokuError as e:
            _LOGGER.warning("Rejected grid: %s", e)
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message=f"Invalid Sudoku grid format: {e}",
            )

        return _solve_board(board, original=grid)

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/v1/sudoku:solveText",
    response_model=SolveResponse,
    tags=["Sudoku"],
)
def solve_sudoku_text(request: SolveTextRequest):
    """
    Solve a Sudoku puzzle given as text.

    Each non-blank line that does not start with '#' is a row of
    space-separated digits, with '_' or '-' marking empty cells.
    """
    try:
        try:
            board = read_board(request.board)
        except SudokuError as e:
            _LOGGER.warning("Rejected text board: %s", e)
            return SolveResponse(
                success=False,
                original=None,
                solved=None,
                message=f"Invalid Sudoku board text: {e}",
            )

        original = board.to_grid()
        size_error = _size_error(board.size)
        if size_error:
            _LOGGER.warning("Rejected text board: %s", size_error)
            return SolveResponse(
                success=False, original=original, solved=None, message=size_error
            )

        return _solve_board(board, original=original)

    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/v1/sudoku:verify", response_model=VerifyResponse, tags=["Sudoku"])
async def verify_sudoku(request: VerifyRequest):
    """Check a complete or partial grid for repeated values."""
    grid = request.grid.cells

    size_error = _size_error(len(grid))
    if size_error:
        raise HTTPException(status_code=400, detail=size_error)

    try:
        board = Board.from_grid(grid)
    except SudokuError as e:
        raise HTTPException(status_code=400, detail=str(e))

    game = Game(board)
    conflicts = [
        CellPosition(row=cell.row, col=cell.column, value=cell.value)
        for cell in game.verifier.conflicting_cells()
    ]
    valid = not conflicts
    complete = board.is_complete()

    if not valid:
        message = f"{len(conflicts)} cell(s) conflict"
    elif complete:
        message = "Grid is complete and valid"
    else:
        message = "Grid is valid so far"

    return VerifyResponse(
        valid=valid, complete=complete, conflicts=conflicts, message=message
    )
