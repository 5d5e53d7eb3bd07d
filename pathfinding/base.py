# pathfinding/base.py
from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import List, Optional, Protocol

from grid import Direction, Grid
from .move_cost import MoveCost, UNIFORM


@dataclass
class SearchReport:
    """Outcome of one search run. `solution` is None when no goal was reached."""
    nodes_expanded: int
    solution: Optional[List[Direction]] = None

    @property
    def solved(self) -> bool:
        return self.solution is not None


class SearchAlgorithm(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float

    def search(self, grid: Grid, move_cost: MoveCost = UNIFORM) -> SearchReport:
        ...

    def reset_stats(self) -> None:
        ...


class BaseSearch:
    """
    Shared plumbing for the registered algorithms: contract checks and
    timing statistics. Subclasses implement _search().
    """

    name = ""

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- main search API ----

    def search(self, grid: Grid, move_cost: MoveCost = UNIFORM) -> SearchReport:
        """
        Run the search on `grid`, marking explored cells as visited.
        The caller clears the marks (grid.clear_visited()) between runs.
        """
        if not grid.targets:
            raise ValueError(f"{self.name}: grid has no goal cells")

        t0 = perf_counter()
        report = self._search(grid, move_cost)
        self._update_stats(perf_counter() - t0)
        return report

    def _search(self, grid: Grid, move_cost: MoveCost) -> SearchReport:
        raise NotImplementedError
