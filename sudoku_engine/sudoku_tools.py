"""Tool-friendly interface over the engine for the API and CLI layers: conflict-gated solving, puzzle generation with a givens mask, and grid checks. Every function returns a plain JSON-serialisable dict."""

# sudoku_tools.py
from __future__ import annotations

import random
from typing import Dict, Optional

from types_sudoku import Grid

from .backtracking import count_solutions, solve
from .config import DEFAULT_GIVENS, GeneratorConfig
from .conflicts import any_conflict, conflict_cells, conflict_mask, unit_duplicates
from .constraints import is_valid_placement
from .generator import generate
from .grid import SIZE, clone_grid, count_filled, givens_mask, rc_to_key, validate_grid

MSG_SOLVED = "Solved."
MSG_UNSOLVABLE = "No solution found. Check the puzzle inputs."
MSG_CONFLICTS = "Fix conflicts before solving."
MSG_GENERATED = "Generated a new regular puzzle."


def solve_tool(grid: Grid) -> Dict:
    """Refuse conflicting grids, otherwise run the backtracking solver."""
    mask = conflict_mask(grid)
    if any_conflict(mask):
        return {
            "solved": False,
            "status": "conflicts",
            "message": MSG_CONFLICTS,
            "grid": clone_grid(grid),
            "conflicts": conflict_cells(mask),
        }
    result = solve(grid)
    if not result["solved"]:
        return {"solved": False, "status": "unsolvable", "message": MSG_UNSOLVABLE,
                "grid": result["grid"], "conflicts": []}
    return {"solved": True, "status": "solved", "message": MSG_SOLVED,
            "grid": result["grid"], "conflicts": []}


def generate_tool(
    givens: int = DEFAULT_GIVENS,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Dict:
    """Generate a puzzle plus the givens mask the UI uses to lock clue cells."""
    out = generate(GeneratorConfig(givens=givens, seed=seed), rng=rng)
    puzzle = out["puzzle"]
    return {
        "puzzle": puzzle,
        "solution": out["solution"],
        "givens_mask": givens_mask(puzzle),
        "givens": count_filled(puzzle),
        "message": MSG_GENERATED,
    }


def check_tool(grid: Grid, count_limit: int = 0) -> Dict:
    """Conflict mask, conflicting cells and unit issues in one payload.
    With count_limit > 0 and no conflicts, also counts completions up to that limit.
    """
    mask = conflict_mask(grid)
    conflicted = any_conflict(mask)
    out = {
        "ok": not conflicted,
        "has_conflicts": conflicted,
        "conflict_mask": mask,
        "conflicts": conflict_cells(mask),
        "issues": unit_duplicates(grid),
        "filled": count_filled(grid),
    }
    if count_limit > 0 and not conflicted:
        out["solutions"] = count_solutions(grid, limit=count_limit)
    return out


def placement_tool(grid: Grid, row: int, col: int, value: int) -> Dict:
    validate_grid(grid)
    return {"valid": is_valid_placement(grid, row, col, value)}


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens of `original` that `current` overwrote, plus unit duplicates in `current`."""
    validate_grid(original)
    validate_grid(current)
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})
    issues.extend(unit_duplicates(current))
    return {"ok": len(issues) == 0, "issues": issues}
