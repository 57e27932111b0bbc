# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from sudoku_engine.config import DEFAULT_GIVENS
from sudoku_engine.sudoku_tools import (
    check_tool, generate_tool, placement_tool, sanity_check, solve_tool,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Sudoku Engine API")

CellValue = Annotated[int, Field(ge=0, le=9)]
Row = Annotated[List[CellValue], Field(min_length=9, max_length=9)]
GridField = Annotated[List[Row], Field(min_length=9, max_length=9)]


class GridModel(BaseModel):
    grid: GridField


class CheckRequest(GridModel):
    count_limit: int = Field(0, ge=0, le=10)


class GenerateRequest(BaseModel):
    givens: int = DEFAULT_GIVENS  # clamped, never rejected
    seed: Optional[int] = None


class PlacementRequest(GridModel):
    row: int = Field(ge=0, le=8)
    col: int = Field(ge=0, le=8)
    value: int = Field(ge=1, le=9)


class SanityRequest(BaseModel):
    original: GridField
    current: GridField


@app.post("/solve")
def api_solve(payload: GridModel):
    out = solve_tool(payload.grid)
    logger.info("solve: status=%s", out["status"])
    return out


@app.post("/generate")
def api_generate(req: GenerateRequest):
    out = generate_tool(req.givens, req.seed)
    logger.info("generate: requested=%d givens=%d seed=%s", req.givens, out["givens"], req.seed)
    return out


@app.post("/is_valid_placement")
def api_placement(req: PlacementRequest):
    return placement_tool(req.grid, req.row, req.col, req.value)


@app.post("/conflicts")
def api_conflicts(req: CheckRequest):
    return check_tool(req.grid, req.count_limit)


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)
