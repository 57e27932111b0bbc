# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app


@pytest.fixture
def client():
    return TestClient(app)


def test_solve_endpoint(client, puzzle, solution):
    resp = client.post("/solve", json={"grid": puzzle})
    assert resp.status_code == 200
    body = resp.json()
    assert body["solved"] is True
    assert body["grid"] == solution


def test_solve_endpoint_refuses_conflicts(client, puzzle):
    g = [row[:] for row in puzzle]
    g[0][2] = 5
    body = client.post("/solve", json={"grid": g}).json()
    assert body["status"] == "conflicts"
    assert body["message"] == "Fix conflicts before solving."


def test_generate_endpoint_clamps(client):
    body = client.post("/generate", json={"givens": 5, "seed": 3}).json()
    assert body["givens"] == 17
    assert len(body["puzzle"]) == 9 and len(body["givens_mask"]) == 9


def test_generate_endpoint_defaults(client):
    body = client.post("/generate", json={"seed": 1}).json()
    assert body["givens"] == 32


def test_placement_endpoint(client, puzzle):
    ok = client.post("/is_valid_placement", json={"grid": puzzle, "row": 0, "col": 2, "value": 4})
    assert ok.json() == {"valid": True}
    bad = client.post("/is_valid_placement", json={"grid": puzzle, "row": 0, "col": 2, "value": 3})
    assert bad.json() == {"valid": False}


def test_placement_endpoint_rejects_out_of_range(client, puzzle):
    resp = client.post("/is_valid_placement", json={"grid": puzzle, "row": 9, "col": 0, "value": 1})
    assert resp.status_code == 422
    resp = client.post("/is_valid_placement", json={"grid": puzzle, "row": 0, "col": 0, "value": 0})
    assert resp.status_code == 422


def test_conflicts_endpoint(client, puzzle):
    g = [row[:] for row in puzzle]
    g[0][2] = 3
    body = client.post("/conflicts", json={"grid": g}).json()
    assert body["has_conflicts"] is True
    assert body["conflicts"] == ["r1c2", "r1c3"]


def test_malformed_grid_rejected(client, puzzle):
    assert client.post("/solve", json={"grid": puzzle[:8]}).status_code == 422
    g = [row[:] for row in puzzle]
    g[4][4] = 12
    assert client.post("/conflicts", json={"grid": g}).status_code == 422


def test_sanity_endpoint(client, puzzle, solution):
    body = client.post("/sanity_check", json={"original": puzzle, "current": solution}).json()
    assert body == {"ok": True, "issues": []}
