"""Benchmark backtracking runtime on puzzle files."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku.solver.backtracking import BruteForceSolver
from sudoku.text.reader import read_board


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark Sudoku solver runtime")
    parser.add_argument(
        "--puzzles",
        nargs="+",
        default=["sample_9x9.txt"],
        help="Puzzle paths to benchmark",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=3,
        help="Number of solves per puzzle",
    )
    return parser.parse_args()


def run_benchmark(texts_by_puzzle: dict[str, str], rounds: int):
    """Solve every puzzle ``rounds`` times from a fresh board.

    Returns:
        (elapsed seconds, average seconds per solve, total solver steps)
    """
    total_steps = 0
    start = time.perf_counter()

    for _ in range(rounds):
        for text in texts_by_puzzle.values():
            solver = BruteForceSolver(read_board(text))
            total_steps += solver.solve()

    elapsed = time.perf_counter() - start
    avg_per_solve = elapsed / (rounds * len(texts_by_puzzle))
    return elapsed, avg_per_solve, total_steps


def main() -> int:
    args = parse_args()

    puzzle_paths = [resolve_puzzle_path(puzzle) for puzzle in args.puzzles]
    texts_by_puzzle = {
        str(path): path.read_text(encoding="utf-8") for path in puzzle_paths
    }

    total, avg, steps = run_benchmark(texts_by_puzzle, max(1, args.rounds))

    print("Solver benchmark results")
    print(f"puzzles={len(puzzle_paths)} rounds={args.rounds}")
    print(f"total={total:.3f}s avg_per_solve={avg:.3f}s steps={steps}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
