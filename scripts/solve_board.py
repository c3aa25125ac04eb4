"""Solve a Sudoku board read from a text file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku.errors import SudokuError
from sudoku.game import Game
from sudoku.text.reader import read_board, read_board_file
from sudoku.text.writer import write_board

LOGGER = logging.getLogger("solve_board")


@dataclass
class SolveConfig:
    puzzle: str = "-"
    verify: bool = True
    debug: bool = False


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _parse_args(argv: Optional[list[str]] = None) -> SolveConfig:
    parser = argparse.ArgumentParser(description="Solve a Sudoku board by backtracking")
    parser.add_argument(
        "puzzle",
        nargs="?",
        default="-",
        help="Puzzle file, a name inside data/puzzles, or '-' for stdin",
    )
    parser.add_argument(
        "--no-verify",
        dest="verify",
        action="store_false",
        help="Skip verifying the solved board",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    return SolveConfig(puzzle=args.puzzle, verify=args.verify, debug=args.debug)


def run_solve(
    config: SolveConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Read, solve and print a board. Returns the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        if config.puzzle == "-":
            board = read_board(stdin)
        else:
            board = read_board_file(resolve_puzzle_path(config.puzzle))
    except (FileNotFoundError, SudokuError) as e:
        LOGGER.error("Cannot read puzzle: %s", e)
        return 2

    game = Game(board)
    game.solver.solve()
    write_board(board, stdout)

    if not board.is_complete():
        LOGGER.error("No solution found")
        return 1

    if config.verify and not game.verifier.is_valid():
        LOGGER.error("Solved board failed verification")
        return 1

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    config = _parse_args(argv)
    _configure_logging(config.debug)
    return run_solve(config)


if __name__ == "__main__":
    raise SystemExit(main())
