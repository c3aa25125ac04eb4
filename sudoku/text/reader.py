"""Read boards from line-based text."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, TextIO, Union

from ..board import Board
from ..errors import FormatError
from ..game import Game

_LOGGER = logging.getLogger(__name__)

# Comment and blank lines are skipped.
_SKIP_LINE = re.compile(r"^\s*(#|$)")
# "_" and "-" mark empty cells.
_TOKEN = re.compile(r"[_-]|\d+")

Rows = list[list[Optional[int]]]


def _parse_token(token: str) -> Optional[int]:
    if token in ("_", "-"):
        return None
    value = int(token)
    return value or None


def _validate_rows(rows: Rows) -> None:
    if not rows:
        raise FormatError("Input contains no rows")

    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise FormatError("Number of cells in input rows don't match")

    if len(rows) != width:
        raise FormatError(
            f"Number of input rows ({len(rows)}) doesn't match "
            f"number of cells per row ({width})"
        )


def read_rows(source: Union[str, TextIO]) -> Rows:
    """
    Parse rows of values from text.

    Args:
        source: Board text or a readable text stream

    Returns:
        One list per row, None for empty cells

    Raises:
        FormatError: if the rows are ragged or do not form a square
    """
    lines = source.splitlines() if isinstance(source, str) else source

    rows: Rows = []
    for line in lines:
        if _SKIP_LINE.match(line):
            continue
        rows.append([_parse_token(token) for token in _TOKEN.findall(line)])

    _validate_rows(rows)
    _LOGGER.debug("Read %dx%d board", len(rows), len(rows))
    return rows


def read_board(source: Union[str, TextIO]) -> Board:
    """
    Create a board of the proper size with all given values set.

    Raises:
        FormatError: if the rows are malformed or a value is outside 1..size
        ConfigurationError: if the row count is not a perfect square
    """
    rows = read_rows(source)
    board = Board(len(rows))
    for r, values in enumerate(rows):
        for c, value in enumerate(values):
            if value is None:
                continue
            if not 1 <= value <= board.size:
                raise FormatError(
                    f"Value {value} at ({r}, {c}) is outside 1-{board.size}"
                )
            board.set_given(r, c, value)
    return board


def read_game(source: Union[str, TextIO]) -> Game:
    return Game(read_board(source))


def read_board_file(path: Union[str, Path]) -> Board:
    """Read a board from a text file."""
    with open(path, encoding="utf-8") as handle:
        return read_board(handle)
