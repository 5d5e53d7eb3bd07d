# pathfinding/ucs.py
from __future__ import annotations

from grid import Grid
from .cursors import DijkstraCursor
from .graph_search import InformedSearch
from .heuristics import Heuristic, ZeroHeuristic
from .move_cost import MoveCost


class UniformCostSearch(InformedSearch):
    """Uniform-cost search (Dijkstra): f(n) = g(n), no heuristic."""

    name = "UCS"
    cursor_cls = DijkstraCursor

    def make_heuristic(self, grid: Grid, move_cost: MoveCost) -> Heuristic:
        return ZeroHeuristic()


ALGORITHM = UniformCostSearch()
