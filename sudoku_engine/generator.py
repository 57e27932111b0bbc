"""Puzzle generation: a randomized backtracking fill, then random removal down to the requested number of givens.

No uniqueness check is made on the result; a puzzle may admit several
solutions. Use backtracking.count_solutions separately if that matters.
"""

# generator.py

from __future__ import annotations

import random
from typing import Mapping, Optional, Union

from types_sudoku import GenerateOptions, GenerateResult, Grid

from .backtracking import search
from .config import GeneratorConfig, clamp_givens
from .grid import DIGITS, SIZE, clone_grid, empty_grid


def shuffled_digits(rng: random.Random) -> list[int]:
    return rng.sample(DIGITS, len(DIGITS))


def random_solution(rng: random.Random) -> Grid:
    """A full valid grid; candidate order is reshuffled at every branching cell."""
    g = empty_grid()
    if not search(g, lambda r, c: shuffled_digits(rng)):
        raise RuntimeError("Failed to fill an empty grid")
    return g


def remove_cells(solution: Grid, givens: int, rng: random.Random) -> Grid:
    """Copy `solution` and blank random cells until `givens` (clamped) remain."""
    puzzle = clone_grid(solution)
    indices = list(range(SIZE * SIZE))
    rng.shuffle(indices)  # Fisher-Yates
    to_remove = SIZE * SIZE - clamp_givens(givens)
    for idx in indices[:to_remove]:
        puzzle[idx // SIZE][idx % SIZE] = 0
    return puzzle


def generate(
    options: Union[GeneratorConfig, GenerateOptions, Mapping, None] = None,
    rng: Optional[random.Random] = None,
) -> GenerateResult:
    """Generate a puzzle with `givens` clues (default 32, clamped to 17..81).

    `rng` takes precedence over a `seed` given in `options`; with neither,
    the output differs on every call.
    """
    if not isinstance(options, GeneratorConfig):
        options = GeneratorConfig.from_mapping(options)
    if rng is None:
        rng = random.Random(options.seed)
    solution = random_solution(rng)
    puzzle = remove_cells(solution, options.givens, rng)
    return {"puzzle": puzzle, "solution": solution}
