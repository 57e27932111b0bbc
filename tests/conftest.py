# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "sudoku_engine", "tools" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def rows(text):
    return [[int(ch) for ch in text[i * 9:(i + 1) * 9]] for i in range(9)]


@pytest.fixture
def puzzle():
    return rows(PUZZLE)


@pytest.fixture
def solution():
    return rows(SOLUTION)


@pytest.fixture
def dead_end():
    # r1c1 has no legal digit: row 1 holds 1..8, column 1 holds 9. No conflicts.
    g = [[0] * 9 for _ in range(9)]
    g[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    g[1][0] = 9
    return g
