# pathfinding/greedy_best_first.py
from __future__ import annotations

from .cursors import GreedyCursor
from .graph_search import InformedSearch


class GreedyBestFirstSearch(InformedSearch):
    """
    Greedy Best-First Search (GBFS) on a 4-connected grid.

    Uses only the heuristic value to order the frontier:

        f(n) = h(n)

    This often expands far fewer nodes than BFS, but is not guaranteed
    to find an optimal path. It is still complete on finite grids because
    claimed cells are never expanded twice.
    """

    name = "GBFS"
    cursor_cls = GreedyCursor


ALGORITHM = GreedyBestFirstSearch()
