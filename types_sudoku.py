# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

GivensMask = list[list[bool]]
"""Parallel to Grid; True where the cell is an immutable puzzle clue."""

ConflictMask = list[list[bool]]
"""Parallel to Grid; True where the placed value clashes with a peer."""

Cell = tuple[int, int]
"""(row, col), both 0-based."""


class SolveResult(TypedDict):
    """Outcome of a backtracking solve."""

    solved: bool
    grid: Grid  # completed copy when solved, otherwise the unchanged input


class GenerateResult(TypedDict):
    """A generated puzzle and the full grid it was carved from."""

    puzzle: Grid
    solution: Grid


class GenerateOptions(TypedDict, total=False):
    givens: int  # clamped to [17, 81]
    seed: int
