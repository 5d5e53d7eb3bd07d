# runner.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from config import Config
from grid import Grid
from io_utils import load_grid
from maze_gen import generate_maze
from pathfinding import get_algorithm
from pathfinding.base import SearchReport
from pathfinding.move_cost import get_move_cost


@dataclass
class SearchRunner:
    """
    Wires a grid to one registered search algorithm and a cost model.

    The grid's visited marks are cleared before every run, so the same
    runner (or grid) can be run again and gives the same report.
    """
    grid: Grid
    method: str = "BFS"
    cost_model: str = "uniform"

    # control terminal logging
    log_events: bool = False

    report: Optional[SearchReport] = None

    def __post_init__(self) -> None:
        self.algo = get_algorithm(self.method)
        self.move_cost = get_move_cost(self.cost_model)
        self._log(f"[INIT] SearchRunner with method={self.algo.name}, "
                  f"cost={self.move_cost.name}, maze={self.grid.rows}x{self.grid.cols}")

    # ---------- logging helper ---------- #

    def _log(self, msg: str) -> None:
        if self.log_events:
            print(msg)

    # ---------------- running ---------------- #

    def run(self) -> SearchReport:
        self.grid.clear_visited()
        self._log(
            f"[SEARCH] {self.algo.name} from {self.grid.initial} "
            f"to {len(self.grid.targets)} goal(s): {self.grid.targets}"
        )

        self.report = self.algo.search(self.grid, self.move_cost)

        if self.report.solved:
            self._log(
                f"[RESULT] solved: {len(self.report.solution)} moves, "
                f"cost {self.path_cost()}, {self.report.nodes_expanded} nodes"
            )
        else:
            self._log(f"[RESULT] no solution, {self.report.nodes_expanded} nodes")
        return self.report

    def path_cost(self) -> Optional[int]:
        if self.report is None or self.report.solution is None:
            return None
        return self.move_cost.total(self.report.solution)


def run_search(grid: Grid, method: str, cost_model: str = "uniform") -> SearchReport:
    """Run one search on a freshly cleared grid and return its report."""
    return SearchRunner(grid=grid, method=method, cost_model=cost_model).run()


def build_grid(cfg: Config, rng: random.Random) -> Grid:
    """Load cfg.map_file, or generate a random maze when it is 'RANDOM'."""
    if cfg.map_file.strip().upper() == "RANDOM":
        rows, cols = cfg.rand_size(rng)
        return generate_maze(rows, cols, cfg.n_targets, rng)
    return load_grid(cfg.map_file)


def format_solution(report: SearchReport) -> str:
    if report.solution is None:
        return "No solution found."
    return " ".join(f"{d};" for d in report.solution)
