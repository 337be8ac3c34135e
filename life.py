"""
life.py

Run a Game of Life board from the command line and print JSON snapshots.

Example (grid from a file)
-------
python life.py --grid data/blinker.json --mode final

Example (random grid)
-------
python life.py --height 16 --width 16 --density 0.3 --seed 7 \
       --mode generations --count 10 \
       --outfile out/glider_run.jsonl

The grid file holds a JSON nested list of booleans, or an object with a
"grid" key. Output is one compact JSON line for the created board followed by
one for the result.
"""

from __future__ import annotations
import argparse, json, pathlib, sys
from typing import Any, Dict, List

from api import GameApi, Response
from config import Settings, load_settings
from errors import InvalidDimensions
from generate import RandomGridGenerator
from registry import BoardRegistry
from transfer import grid_to_transfer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Advance a Game of Life board and print JSON snapshots.")

    p.add_argument("--grid", type=pathlib.Path, help="JSON file with the starting grid.")
    p.add_argument("--height", type=int, default=16, help="Rows of a random starting grid.")
    p.add_argument("--width", type=int, default=16, help="Columns of a random starting grid.")
    p.add_argument("--density", type=float, default=None, help="Probability a cell starts alive.")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for the random grid.")
    p.add_argument(
        "--allow-trivial", action="store_true",
        help="Keep random grids that are empty, full or already stable.",
    )
    p.add_argument(
        "--mode", choices=["next", "generations", "final"], default="next",
        help="Advance one generation, --count generations, or to the final state.",
    )
    p.add_argument("--count", type=int, default=1, help="Generations for --mode generations.")
    p.add_argument("--max-iterations", type=int, default=None, help="Bound for --mode final.")
    p.add_argument("--config", type=pathlib.Path, help="YAML settings file.")
    p.add_argument("--event-log", type=pathlib.Path, help="Append one JSON record per operation here.")
    p.add_argument("--outfile", type=pathlib.Path, help="Where to write the JSONL (default: stdout).")
    return p


def read_grid_file(path: pathlib.Path) -> Any:
    """
    Load the starting grid from a JSON file; both `[[...]]` and
    `{"grid": [[...]]}` are accepted.
    """
    obj = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(obj, dict):
        return obj.get("grid")
    return obj


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    sys.exit(1)


def _dump(body: Dict[str, Any]) -> str:
    return json.dumps(body, separators=(",", ":"))


def run(api: GameApi, grid: Any, mode: str, count: int = 1) -> List[Response]:
    """
    Create a board and advance it once according to `mode`.
    Stops after the first failed response.
    """
    created = api.create(grid)
    if not created.ok:
        return [created]
    board_id = created.body["id"]
    if mode == "next":
        result = api.get_next(board_id)
    elif mode == "generations":
        result = api.get_after_generations(board_id, count)
    elif mode == "final":
        result = api.get_final(board_id)
    else:
        raise ValueError(f"unknown mode {mode!r}")
    return [created, result]


def main(argv: List[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        settings: Settings = load_settings(args.config).merged(
            max_iterations=args.max_iterations,
            event_log=args.event_log,
            density=args.density,
            seed=args.seed,
        )
    except (OSError, ValueError) as e:
        _fail(f"Bad settings: {e}")

    if args.grid is not None:
        try:
            grid = read_grid_file(args.grid)
        except (OSError, json.JSONDecodeError) as e:
            _fail(f"Could not read grid from {args.grid}: {e}")
    else:
        try:
            gen = RandomGridGenerator(args.height, args.width, seed=settings.seed, density=settings.density)
            grid = grid_to_transfer(gen.generate(trim_trivial=not args.allow_trivial))
        except (InvalidDimensions, RuntimeError) as e:
            _fail(str(e))

    api = GameApi(BoardRegistry(max_iterations=settings.max_iterations, event_log=settings.event_log))
    responses = run(api, grid, args.mode, args.count)
    lines = [_dump(r.body) for r in responses]

    if args.outfile is not None:
        args.outfile.parent.mkdir(parents=True, exist_ok=True)
        with args.outfile.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    else:
        for line in lines:
            print(line)

    last = responses[-1]
    if not last.ok:
        _fail(f"[{last.status}] {last.body['error']}: {last.body['message']}")

    if args.outfile is not None:
        print(f"Wrote {len(lines)} snapshots to {args.outfile}")


if __name__ == "__main__":
    main()
