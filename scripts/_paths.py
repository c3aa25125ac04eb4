"""Shared path utilities for solver scripts."""

from __future__ import annotations

from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
DATA_PUZZLE_DIR = REPO_ROOT / "data" / "puzzles"


def resolve_puzzle_path(puzzle_ref: str) -> Path:
    """Locate a puzzle file from a reference string.

    Searches in order:
      1. The path as given (absolute or relative to the working directory)
      2. Relative to the repository root
      3. By filename inside ``data/puzzles/``

    Raises ``FileNotFoundError`` when no candidate matches.
    """
    ref = Path(puzzle_ref)
    candidates: list[Path] = [ref]

    if not ref.is_absolute():
        candidates.append(REPO_ROOT / ref)
        candidates.append(DATA_PUZZLE_DIR / ref.name)

    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()

    searched = ", ".join(str(path) for path in candidates)
    raise FileNotFoundError(f"Puzzle not found. ref={puzzle_ref} searched=[{searched}]")
