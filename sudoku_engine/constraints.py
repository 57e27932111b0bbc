"""Row/column/box uniqueness check for a single placement."""

# constraints.py

from __future__ import annotations

from types_sudoku import Grid

from .grid import BOX, SIZE, box_origin


def placement_ok(grid: Grid, r: int, c: int, value: int) -> bool:
    """Unchecked variant used by the search; indices must already be in range."""
    row = grid[r]
    for i in range(SIZE):
        if i != c and row[i] == value:
            return False
        if i != r and grid[i][c] == value:
            return False
    r0, c0 = box_origin(r, c)
    for rr in range(r0, r0 + BOX):
        if rr == r:
            continue  # row already covered
        for cc in range(c0, c0 + BOX):
            if cc != c and grid[rr][cc] == value:
                return False
    return True


def is_valid_placement(grid: Grid, row: int, col: int, value: int) -> bool:
    """True iff no OTHER cell in the same row, column or 3x3 box holds `value`.

    The target cell itself is excluded, so an already placed value can be
    validated in place. Out-of-range arguments raise ValueError.
    """
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"cell ({row}, {col}) is outside the 9x9 grid")
    if not 1 <= value <= 9:
        raise ValueError(f"value {value} must be in 1..9")
    return placement_ok(grid, row, col, value)
