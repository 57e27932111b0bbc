"""Depth-first backtracking search shared by the solver and the generator, plus an optional solution counter."""

# backtracking.py
# Place, recurse, undo. The buffer handed to `search` is owned by the caller
# of `search` and is mutated in place; public entry points always pass a copy.

from __future__ import annotations

from typing import Callable, Iterable

from types_sudoku import Grid, SolveResult

from .constraints import placement_ok
from .grid import DIGITS, clone_grid, find_first_empty, validate_grid

CandidateOrder = Callable[[int, int], Iterable[int]]


def ascending(r: int, c: int) -> Iterable[int]:
    return DIGITS


def search(g: Grid, order: CandidateOrder = ascending) -> bool:
    """Fill every blank of `g` in place. Returns False (with all tentative
    placements undone) when no completion exists.
    """
    pos = find_first_empty(g)
    if pos is None:
        return True
    r, c = pos
    for val in order(r, c):
        g[r][c] = val
        if placement_ok(g, r, c, val) and search(g, order):
            return True
        g[r][c] = 0
    return False


def solve(grid: Grid) -> SolveResult:
    """Solve `grid` by backtracking with candidates tried in ascending order.

    The caller's grid is never touched. On success `grid` in the result is the
    completed copy; on failure it is an unchanged copy of the input.
    Existing values are not re-checked against each other, so callers should
    reject conflicting grids first (see conflicts.has_conflicts).
    """
    validate_grid(grid)
    work = clone_grid(grid)
    if search(work):
        return {"solved": True, "grid": work}
    return {"solved": False, "grid": clone_grid(grid)}


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Count completions of `grid`, stopping once `limit` have been found."""
    validate_grid(grid)
    if limit < 1:
        raise ValueError("limit must be at least 1")
    work = clone_grid(grid)
    found = 0

    def walk() -> bool:
        # True means stop: the limit was reached
        nonlocal found
        pos = find_first_empty(work)
        if pos is None:
            found += 1
            return found >= limit
        r, c = pos
        for val in DIGITS:
            work[r][c] = val
            if placement_ok(work, r, c, val) and walk():
                work[r][c] = 0
                return True
            work[r][c] = 0
        return False

    walk()
    return found
