"""Command-line front end for the engine: generate a puzzle, solve a grid, or check a grid for conflicts. Prints a JSON payload (or a text rendering with --pretty)."""

# sudoku_cli.py
#
# Usage:
#   python -m apps.cli.sudoku_cli generate --givens 30 --seed 123
#   python -m apps.cli.sudoku_cli generate --config generator.yaml --pretty
#   python -m apps.cli.sudoku_cli solve --grid "530070000600195000..."
#   python -m apps.cli.sudoku_cli check --file puzzle.txt --count-limit 2
#   python -m apps.cli.sudoku_cli solve --file grid.json   # [[5,3,0,...], ...]
#
# Exit codes: 0 ok, 1 unsolved / conflicts found, 2 bad arguments.

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path

from sudoku_engine.config import load_config
from sudoku_engine.grid import as_grid, format_grid
from sudoku_engine.sudoku_tools import check_tool, generate_tool, solve_tool


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    # stderr keeps stdout clean for the JSON payload
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


def read_grid(ap: argparse.ArgumentParser, args):
    """--grid text, a text file, or a .json file holding a 9x9 list of rows."""
    if args.grid:
        source = args.grid
    else:
        path = Path(args.file)
        try:
            source = path.read_text(encoding="utf-8")
            if path.suffix == ".json":
                source = json.loads(source)
        except OSError as e:
            ap.error(f"cannot read {args.file}: {e}")
        except json.JSONDecodeError as e:
            ap.error(f"{args.file}: invalid JSON: {e}")
    try:
        return as_grid(source)
    except ValueError as e:
        ap.error(str(e))


def cmd_generate(ap, args) -> int:
    try:
        cfg = load_config(args.config, givens=args.givens, seed=args.seed)
    except (OSError, ValueError) as e:
        ap.error(str(e))
    log(f"[generate] givens={cfg.givens} seed={cfg.seed}", quiet=args.quiet)
    t0 = time.time()
    out = generate_tool(cfg.givens, cfg.seed)
    log(f"[generate] done in {time.time() - t0:.3f}s, {out['givens']} givens", quiet=args.quiet)
    if args.pretty:
        print(format_grid(out["puzzle"]))
        print()
        print(format_grid(out["solution"]))
    else:
        print(json.dumps(out, indent=2))
    return 0


def cmd_solve(ap, args) -> int:
    grid = read_grid(ap, args)
    t0 = time.time()
    out = solve_tool(grid)
    log(f"[solve] {out['status']} in {time.time() - t0:.3f}s", quiet=args.quiet)
    if args.pretty:
        print(out["message"])
        print(format_grid(out["grid"]))
    else:
        print(json.dumps(out, indent=2))
    return 0 if out["solved"] else 1


def cmd_check(ap, args) -> int:
    grid = read_grid(ap, args)
    out = check_tool(grid, count_limit=args.count_limit)
    log(f"[check] conflicts={len(out['conflicts'])} filled={out['filled']}", quiet=args.quiet)
    if args.pretty:
        print("No conflicts detected." if out["ok"] else "Conflicts: " + ", ".join(out["conflicts"]))
        if "solutions" in out:
            print(f"Solutions found (limit {args.count_limit}): {out['solutions']}")
    else:
        print(json.dumps(out, indent=2))
    return 0 if out["ok"] else 1


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--quiet", action="store_true", help="No progress lines on stderr")
    common.add_argument("--pretty", action="store_true", help="Print grids as text instead of JSON")

    ap = argparse.ArgumentParser(description="Sudoku engine: generate, solve, check.")
    sub = ap.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", parents=[common], help="Generate a puzzle and its solution")
    g.add_argument("--givens", type=int, default=None, help="Clue count (clamped to 17..81, default 32)")
    g.add_argument("--seed", type=int, default=None)
    g.add_argument("--config", type=str, default=None, help="YAML file with generator options")
    g.set_defaults(func=cmd_generate)

    for name, func, helptext in (
        ("solve", cmd_solve, "Solve a grid by backtracking"),
        ("check", cmd_check, "Report conflicts in a grid"),
    ):
        p = sub.add_parser(name, parents=[common], help=helptext)
        src = p.add_mutually_exclusive_group(required=True)
        src.add_argument("--grid", type=str, help="81 cells, '0' or '.' for blanks")
        src.add_argument("--file", type=str, help="Text file holding the grid, or a .json list of rows")
        p.set_defaults(func=func)
        if name == "check":
            p.add_argument("--count-limit", type=int, default=0,
                           help="Also count solutions up to this many (0 = skip)")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    return args.func(ap, args)


if __name__ == "__main__":
    sys.exit(main())
