# pathfinding/weighted_astar.py
from __future__ import annotations

from .cursors import WeightedAStarCursor
from .graph_search import InformedSearch


class WeightedAStarSearch(InformedSearch):
    """
    Weighted A* on a 4-connected grid.

    The evaluation function is:

        f(n) = g(n) + 2 * h(n)

    Inflating h pulls the search towards the goal, usually with fewer
    expansions than A*, at the price of possibly sub-optimal paths.
    """

    name = "WAStar"
    cursor_cls = WeightedAStarCursor


ALGORITHM = WeightedAStarSearch()
