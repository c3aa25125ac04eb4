"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CellPosition(BaseModel):
    """Position and value of a single cell."""

    row: int = Field(ge=0, description="Row index")
    col: int = Field(ge=0, description="Column index")
    value: int = Field(ge=0, description="Cell value (0 for empty)")


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[int]] = Field(
        description="N x N grid, N a perfect square (0 for empty cells)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "cells": [
                    [1, 0, 0, 4],
                    [0, 0, 1, 0],
                    [0, 1, 0, 0],
                    [4, 0, 0, 1],
                ]
            }
        }


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveTextRequest(BaseModel):
    """Request to solve a Sudoku given as text."""

    board: str = Field(
        description="One row per line, '_' or '-' for empty cells, '#' comments"
    )


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] | None = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    steps: int | None = Field(default=None, description="Solver steps taken")
    solved_text: str | None = Field(
        default=None, description="Solved grid rendered as text"
    )


class VerifyRequest(BaseModel):
    """Request to verify a (possibly partial) grid."""

    grid: SudokuGrid = Field(description="The grid to verify")


class VerifyResponse(BaseModel):
    """Result of verifying a grid."""

    valid: bool = Field(description="Whether no value repeats in a row, column or box")
    complete: bool = Field(description="Whether every cell holds a value")
    conflicts: list[CellPosition] = Field(
        default_factory=list, description="Cells whose value repeats"
    )
    message: str = Field(description="Status message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    max_board_size: int = Field(description="Largest board size accepted")
