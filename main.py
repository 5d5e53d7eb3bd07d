import argparse
import random
from typing import List, Optional

from config import Config
from viz import draw_grid
from io_utils import make_run_dir, save_config, save_grid, save_summary
from runner import SearchRunner, build_grid, format_solution


def parse_args(argv: Optional[List[str]] = None) -> Config:
    """
    Build a Config from the command line. Anything not given keeps the
    default declared in config.py.
    """
    defaults = Config()
    parser = argparse.ArgumentParser(description="Search a grid maze for a path to the nearest goal.")
    parser.add_argument("map_file", nargs="?", default=defaults.map_file,
                        help="maze text file, or RANDOM to generate one")
    parser.add_argument("method", nargs="?", default=defaults.method,
                        help="BFS, DFS, IDDFS, GBFS, AStar, WAStar, UCS (or an alias)")
    parser.add_argument("--cost", dest="cost_model", default=defaults.cost_model,
                        choices=["uniform", "custom"])
    parser.add_argument("--rows", type=int, default=defaults.rows)
    parser.add_argument("--cols", type=int, default=defaults.cols)
    parser.add_argument("--targets", dest="n_targets", type=int, default=defaults.n_targets)
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--save-map", dest="save_map", default=defaults.save_map,
                        help="write the maze to this file (never overwrites)")
    parser.add_argument("--out-dir", dest="output_dir", default=defaults.output_dir)
    parser.add_argument("--no-output", dest="output_dir", action="store_const", const=None,
                        help="skip the run directory (PNG + summary.json)")
    parser.add_argument("--verbose", dest="log_events", action="store_true")
    args = parser.parse_args(argv)
    return Config(**vars(args))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Single-run entry point.

    Typical usage:
        python main.py RANDOM AStar --seed 3
        python main.py maps/robotnav.txt BFS --cost custom

    Prints "<map> <method> <nodes expanded>" (method by its registered name,
    whatever alias was typed) followed by the solution, and
    (unless --no-output) writes a PNG of the explored maze and summary.json
    to a fresh directory under outputs/.
    """
    cfg = parse_args(argv)
    rng = random.Random(cfg.seed)

    grid = build_grid(cfg, rng)

    if cfg.save_map:
        try:
            path = save_grid(grid, cfg.save_map)
            print(f"Maze saved to: {path}")
        except FileExistsError:
            print(f"[WARN] {cfg.save_map} already exists, maze not saved")

    runner = SearchRunner(
        grid=grid,
        method=cfg.method,
        cost_model=cfg.cost_model,
        log_events=cfg.log_events,
    )
    report = runner.run()

    print(f"{cfg.map_file} {runner.algo.name} {report.nodes_expanded}")
    print(format_solution(report))

    if cfg.output_dir is None:
        return 0

    run_dir = make_run_dir(cfg, grid, base=cfg.output_dir)
    save_config(cfg, run_dir)

    draw_grid(
        grid,
        run_dir / "maze.png",
        path=report.solution,
        title=f"{runner.algo.name} ({runner.move_cost.name} cost)",
    )

    algo = runner.algo
    summary: dict = {
        "grid": {
            "rows": grid.rows,
            "cols": grid.cols,
            "targets": len(grid.targets),
            "walls": sum(1 for c in grid.cells if not c.passable),
        },
        "search": {
            "algorithm": algo.name,
            "cost_model": runner.move_cost.name,
            "solved": report.solved,
            "nodes_expanded": report.nodes_expanded,
            "cells_visited": grid.count_visited(),
            "path_length": len(report.solution) if report.solution is not None else None,
            "path_cost": runner.path_cost(),
            "runtime": algo.last_runtime,
        },
    }
    save_summary(summary, run_dir)

    print(f"Run directory: {run_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
