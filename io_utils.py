# io_utils.py
from dataclasses import asdict
from pathlib import Path
from datetime import datetime
import json
import re
from typing import Any, List, Union
import uuid

from config import Config
from grid import CellKind, Grid, Pos

PathLike = Union[str, Path]


# ---------------------------------------------------------------------
# Maze text format
# ---------------------------------------------------------------------
#
#   [5,11]                 grid size: rows, cols
#   (0,1)                  start: x, y
#   (7,0) | (10,3)         goals, separated by '|'
#   (2,0,2,2)              wall rectangles: x, y, width, height
#   (8,0,1,2)
#   ...

def _numbers(source: str, expected: int, what: str) -> List[int]:
    """Parse '[a, b]' / '(a, b, c)' style tuples; brackets and spaces are optional."""
    text = re.sub(r"[\[\]()]", " ", source).strip()
    parts = [p.strip() for p in text.split(",")]
    try:
        values = [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Malformed {what}: {source.strip()!r}") from None
    if len(values) != expected or any(v < 0 for v in values):
        raise ValueError(
            f"Malformed {what}: {source.strip()!r} (expected {expected} non-negative integers)"
        )
    return values


def parse_grid(text: str) -> Grid:
    """
    Build a Grid from the maze text format.

    Walls are painted first and the start and goals stamped on top, so a
    wall rectangle never hides them. Raises ValueError on malformed input.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 3:
        raise ValueError("Maze text needs a size line, a start line and a goal line")

    rows, cols = _numbers(lines[0], 2, "grid size")
    sx, sy = _numbers(lines[1], 2, "start position")
    targets: List[Pos] = []
    for chunk in lines[2].split("|"):
        gx, gy = _numbers(chunk, 2, "goal position")
        targets.append((gx, gy))

    walls: List[Pos] = []
    for line in lines[3:]:
        wx, wy, ww, wh = _numbers(line, 4, "wall")
        for x in range(wx, wx + ww):
            for y in range(wy, wy + wh):
                walls.append((x, y))

    for p in [(sx, sy), *targets, *walls]:
        x, y = p
        if not (0 <= x < cols and 0 <= y < rows):
            raise ValueError(f"Coordinate {p} lies outside a {rows}x{cols} maze")

    return Grid.create(rows, cols, (sx, sy), targets, walls)


def serialize_grid(grid: Grid) -> str:
    """Inverse of parse_grid(); every wall cell is written as a 1x1 rectangle."""
    out = [
        f"[{grid.rows}, {grid.cols}]",
        f"({grid.initial[0]}, {grid.initial[1]})",
        " | ".join(f"({x}, {y})" for x, y in grid.targets),
    ]
    for i, cell in enumerate(grid.cells):
        if cell.kind is CellKind.WALL:
            out.append(f"({i % grid.cols}, {i // grid.cols}, 1, 1)")
    return "\n".join(out) + "\n"


def load_grid(path: PathLike) -> Grid:
    with Path(path).open("r", encoding="utf-8") as f:
        return parse_grid(f.read())


def save_grid(grid: Grid, path: PathLike) -> Path:
    """Write the maze text to `path`; refuses to overwrite an existing file."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("x", encoding="utf-8") as f:
        f.write(serialize_grid(grid))
    return out_path


# ---------------------------------------------------------------------
# Run directories
# ---------------------------------------------------------------------

def make_run_dir(cfg: Config, grid: Grid, base: PathLike = "outputs") -> Path:
    """
    Create and return a unique directory for one search run.

    The folder name encodes the maze size, the method, the cost model and
    the seed, plus a timestamp and a short UUID so repeated runs with the
    same config never collide:

        outputs/run_R20x40_AStar_uniform_seed0_20251216-213012_ab12cd34/
    """
    base_path = Path(base)
    base_path.mkdir(parents=True, exist_ok=True)

    parts = [
        f"R{grid.rows}x{grid.cols}",
        cfg.method,
        cfg.cost_model,
        f"seed{cfg.seed}",
    ]
    base_name = "run_" + "_".join(parts)

    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    uid = uuid.uuid4().hex[:8]
    run_dir = base_path / f"{base_name}_{ts}-{uid}"

    # exist_ok=False => raise if directory somehow already exists
    run_dir.mkdir(exist_ok=False)
    return run_dir


def save_config(cfg: Config, run_dir: Path, filename: str = "config.json") -> None:
    """Serialize the Config of this run into JSON, for reproducibility."""
    data: dict[str, Any] = asdict(cfg)
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_summary(summary: dict[str, Any], run_dir: Path, filename: str = "summary.json") -> None:
    """
    Save the summary metrics for a run as a JSON file.

    The structure is nested ("grid.rows", "search.nodes_expanded", ...) so it
    flattens directly into the CSV columns used by batch_run.py.
    """
    out_path = run_dir / filename
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
