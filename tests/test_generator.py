# tests/test_generator.py
import random

import pytest

from sudoku_engine.config import GeneratorConfig
from sudoku_engine.conflicts import has_conflicts
from sudoku_engine.generator import generate, random_solution, remove_cells, shuffled_digits
from sudoku_engine.grid import count_filled


def test_givens_count_and_consistency():
    out = generate({"givens": 30}, rng=random.Random(7))
    puzzle, solution = out["puzzle"], out["solution"]
    assert count_filled(puzzle) == 30
    assert count_filled(solution) == 81
    # zeroing the blanked positions in the solution gives back the puzzle
    rebuilt = [[s if p else 0 for p, s in zip(prow, srow)] for prow, srow in zip(puzzle, solution)]
    assert rebuilt == puzzle


@pytest.mark.parametrize("requested,expected", [(5, 17), (-3, 17), (17, 17), (90, 81), (81, 81)])
def test_givens_are_clamped(requested, expected):
    out = generate({"givens": requested}, rng=random.Random(1))
    assert count_filled(out["puzzle"]) == expected


def test_full_givens_returns_unmodified_solution():
    out = generate({"givens": 90}, rng=random.Random(3))
    assert out["puzzle"] == out["solution"]
    assert out["puzzle"] is not out["solution"]


def test_generated_grids_have_no_conflicts():
    for seed in range(5):
        out = generate({"givens": 25}, rng=random.Random(seed))
        assert not has_conflicts(out["puzzle"])
        assert not has_conflicts(out["solution"])


def test_same_seed_same_output():
    a = generate({"givens": 30, "seed": 42})
    b = generate(GeneratorConfig(givens=30, seed=42))
    assert a == b


def test_injected_rng_wins_over_seed():
    a = generate({"givens": 30, "seed": 1}, rng=random.Random(99))
    b = generate({"givens": 30, "seed": 2}, rng=random.Random(99))
    assert a == b


def test_different_seeds_differ():
    a = generate({"seed": 1})
    b = generate({"seed": 2})
    assert a["solution"] != b["solution"]


def test_default_givens_is_32():
    out = generate(rng=random.Random(0))
    assert count_filled(out["puzzle"]) == 32


def test_unknown_option_rejected():
    with pytest.raises(ValueError):
        generate({"difficulty": "hard"})


def test_shuffled_digits_is_permutation():
    digits = shuffled_digits(random.Random(5))
    assert sorted(digits) == list(range(1, 10))


def test_remove_cells_leaves_solution_alone():
    rng = random.Random(11)
    solution = random_solution(rng)
    snapshot = [row[:] for row in solution]
    puzzle = remove_cells(solution, 20, rng)
    assert solution == snapshot
    assert count_filled(puzzle) == 20
