# pathfinding/astar.py
from __future__ import annotations

from .cursors import AStarCursor
from .graph_search import InformedSearch


class AStarSearch(InformedSearch):
    """
    A* on a 4-connected grid.

    f(n) = g(n) + h(n), with Manhattan distance under the uniform cost model
    and the cost-adjusted Manhattan distance under the custom one. Both are
    consistent, so the first goal dequeued is reached by a cheapest path.
    """

    name = "AStar"
    cursor_cls = AStarCursor


ALGORITHM = AStarSearch()
