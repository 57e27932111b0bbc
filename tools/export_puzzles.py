"""
Generate a batch of puzzles with the backtracking generator and write them to disk.

Run from the repo root (tools/ is not an installed package; it imports
sudoku_engine from the checkout):
  python -m tools.export_puzzles --out datasets/puzzles.npz --num 500 --givens 30 --seed 42
  python -m tools.export_puzzles --out datasets/puzzles.jsonl --num 100 --format jsonl

Options:
  --out <path>          Output file (parent folders are created)
  --num N               Number of puzzles
  --givens G            Clues per puzzle (clamped to 17..81, default 32)
  --seed S              Seed for the whole batch (same seed -> same file)
  --format npz|jsonl|txt
                        npz: int8 arrays `puzzles`, `solutions` of shape (N, 9, 9)
                        jsonl: one {"puzzle", "solution", "givens"} object per line
                        txt: "<puzzle> <solution>" as 81-digit strings, one pair per line
  --config <yaml>       Generator options file; --givens/--seed override it
"""

from __future__ import annotations

import argparse
import json
import random
import sys
import time
from pathlib import Path

import numpy as np

from sudoku_engine.config import load_config
from sudoku_engine.generator import generate
from sudoku_engine.grid import count_filled, grid_to_string


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


def build_puzzle_set(num: int, givens: int, seed=None, *, quiet: bool = True, log_every: int = 100):
    """Return (puzzles, solutions) as int8 arrays of shape (num, 9, 9).
    One Random instance drives the whole batch, so a seed fixes every puzzle.
    """
    rng = random.Random(seed)
    puzzles = np.zeros((num, 9, 9), dtype=np.int8)
    solutions = np.zeros((num, 9, 9), dtype=np.int8)
    for i in range(num):
        out = generate({"givens": givens}, rng=rng)
        puzzles[i] = out["puzzle"]
        solutions[i] = out["solution"]
        if log_every and (i + 1) % log_every == 0:
            log(f"progress: {i + 1}/{num}", quiet=quiet)
    return puzzles, solutions


def write_npz(path: Path, puzzles: np.ndarray, solutions: np.ndarray) -> None:
    np.savez_compressed(path, puzzles=puzzles, solutions=solutions)


def write_jsonl(path: Path, puzzles: np.ndarray, solutions: np.ndarray) -> None:
    with path.open("w", encoding="utf-8") as f:
        for p, s in zip(puzzles.tolist(), solutions.tolist()):
            f.write(json.dumps({"puzzle": p, "solution": s, "givens": count_filled(p)}) + "\n")


def write_txt(path: Path, puzzles: np.ndarray, solutions: np.ndarray) -> None:
    with path.open("w", encoding="utf-8") as f:
        for p, s in zip(puzzles.tolist(), solutions.tolist()):
            f.write(f"{grid_to_string(p)} {grid_to_string(s)}\n")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Export generated Sudoku puzzles.")
    ap.add_argument("--out", required=True)
    ap.add_argument("--num", type=int, default=100)
    ap.add_argument("--givens", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--format", choices=["npz", "jsonl", "txt"], default=None,
                    help="Defaults to the --out suffix, else npz")
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args(argv)

    if args.num < 1:
        ap.error("--num must be at least 1")
    try:
        cfg = load_config(args.config, givens=args.givens, seed=args.seed)
    except (OSError, ValueError) as e:
        ap.error(str(e))

    out = Path(args.out)
    fmt = args.format or {".jsonl": "jsonl", ".txt": "txt"}.get(out.suffix, "npz")
    out.parent.mkdir(parents=True, exist_ok=True)

    log(f"Generating {args.num} puzzles (givens={cfg.givens}, seed={cfg.seed})", quiet=args.quiet)
    t0 = time.time()
    puzzles, solutions = build_puzzle_set(args.num, cfg.givens, cfg.seed, quiet=args.quiet)
    if fmt == "npz":
        write_npz(out, puzzles, solutions)
    elif fmt == "jsonl":
        write_jsonl(out, puzzles, solutions)
    else:
        write_txt(out, puzzles, solutions)
    log(f"[ok] Wrote {args.num} puzzles to {out} in {time.time() - t0:.1f}s", quiet=args.quiet)
    return 0


if __name__ == "__main__":
    sys.exit(main())
