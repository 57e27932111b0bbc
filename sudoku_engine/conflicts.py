"""Conflict scanning over a whole grid: per-cell mask, any-conflict flag, and per-unit duplicate reports."""

# conflicts.py

from __future__ import annotations

from types_sudoku import ConflictMask, Grid

from .constraints import placement_ok
from .grid import BOX, SIZE, rc_to_key, validate_grid


def conflict_mask(grid: Grid) -> ConflictMask:
    """mask[r][c] is True when the value at (r, c) clashes with a peer.
    Blank cells are never marked.
    """
    validate_grid(grid)
    # placement_ok skips the cell itself, so no need to blank it first
    return [
        [grid[r][c] != 0 and not placement_ok(grid, r, c, grid[r][c]) for c in range(SIZE)]
        for r in range(SIZE)
    ]


def any_conflict(mask: ConflictMask) -> bool:
    return any(any(row) for row in mask)


def has_conflicts(grid: Grid) -> bool:
    return any_conflict(conflict_mask(grid))


def conflict_cells(mask: ConflictMask) -> list[str]:
    return [rc_to_key(r, c) for r in range(SIZE) for c in range(SIZE) if mask[r][c]]


def _duplicates_in_unit(vals) -> set[int]:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def _unit_issue(unit: str, cells: list[tuple[int, int]], grid: Grid):
    vals = [grid[r][c] for r, c in cells]
    dups = _duplicates_in_unit(vals)
    if not dups:
        return None
    bad = [rc_to_key(r, c) for (r, c), v in zip(cells, vals) if v in dups]
    return {"type": "duplicate", "unit": unit, "digits": sorted(dups), "cells": bad}


def unit_duplicates(grid: Grid) -> list[dict]:
    """One issue per row/column/box holding a repeated digit."""
    validate_grid(grid)
    units = []
    for r in range(SIZE):
        units.append((f"r{r + 1}", [(r, c) for c in range(SIZE)]))
    for c in range(SIZE):
        units.append((f"c{c + 1}", [(r, c) for r in range(SIZE)]))
    for b in range(SIZE):
        r0 = BOX * (b // BOX)
        c0 = BOX * (b % BOX)
        units.append((f"b{b + 1}", [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]))
    issues = []
    for unit, cells in units:
        issue = _unit_issue(unit, cells, grid)
        if issue:
            issues.append(issue)
    return issues
