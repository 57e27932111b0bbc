"""Grid primitives: construction, copying, empty-cell lookup, coercion and text rendering."""

# grid.py
# Grid is a 9x9 list of lists of ints (0..9). 0 = blank.
# Rows/cols are 0-based here; reports use 1-based r{row}c{col} keys.

from __future__ import annotations

from typing import Optional

import numpy as np

from types_sudoku import Cell, GivensMask, Grid

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, 10))

_SEPARATORS = set("|-+")
_DIGIT_CHARS = set("0123456789")


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def find_first_empty(grid: Grid) -> Optional[Cell]:
    """First blank cell in row-major order, or None when the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return (r, c)
    return None


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def box_origin(r: int, c: int) -> Cell:
    return (BOX * (r // BOX), BOX * (c // BOX))


def validate_grid(grid) -> None:
    """Raise ValueError unless `grid` is 9x9 with integer entries in 0..9."""
    if not isinstance(grid, (list, tuple)) or len(grid) != SIZE:
        raise ValueError(f"grid must have {SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != SIZE:
            raise ValueError(f"row {r} must have {SIZE} cells")
        for c, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
                raise ValueError(f"cell r{r + 1}c{c + 1} holds {v!r}; expected an int in 0..9")


def parse_grid(text: str) -> Grid:
    """Parse 81 cells from text. Digits 1-9 are values; '0' and '.' are blanks.
    Whitespace and the box separators '|', '-', '+' are ignored.
    """
    cells = []
    for ch in text:
        if ch.isspace() or ch in _SEPARATORS:
            continue
        if ch == ".":
            cells.append(0)
        elif ch in _DIGIT_CHARS:
            cells.append(int(ch))
        else:
            raise ValueError(f"unexpected character {ch!r} in grid text")
    if len(cells) != SIZE * SIZE:
        raise ValueError(f"grid text has {len(cells)} cells; expected {SIZE * SIZE}")
    return [cells[i * SIZE:(i + 1) * SIZE] for i in range(SIZE)]


def as_grid(obj) -> Grid:
    """Coerce a string, nested sequence or numpy array into a fresh validated Grid."""
    if isinstance(obj, str):
        return parse_grid(obj)
    arr = np.asarray(obj)
    if arr.shape != (SIZE, SIZE):
        raise ValueError(f"grid must have shape ({SIZE}, {SIZE}), got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"grid must hold integers, got dtype {arr.dtype}")
    if arr.min() < 0 or arr.max() > 9:
        raise ValueError("grid values must lie in 0..9")
    return [[int(v) for v in row] for row in arr.tolist()]


def grid_to_string(grid: Grid) -> str:
    return "".join(str(v) for row in grid for v in row)


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX == 0:
            lines.append("------+-------+------")
        chunks = []
        for b in range(0, SIZE, BOX):
            chunks.append(" ".join(str(v) if v else "." for v in row[b:b + BOX]))
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v != 0)


def givens_mask(grid: Grid) -> GivensMask:
    return [[v != 0 for v in row] for row in grid]
