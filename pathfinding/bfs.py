# pathfinding/bfs.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from grid import CellKind, Direction, Grid, Pos
from .base import BaseSearch, SearchReport
from .move_cost import MoveCost
from .queues import FIFOQueue


@dataclass
class BFSCursor:
    position: Pos
    path: List[Direction] = field(default_factory=list)


class BreadthFirstSearch(BaseSearch):
    """
    Breadth-first tree search.

    Every in-bounds neighbour of an expanded cell is queued; repeats are
    dropped when dequeued by checking the visited mark on the grid. Each
    dequeue counts as a search node. Move costs are ignored, so the path is
    shortest in number of moves.
    """

    name = "BFS"

    def _search(self, grid: Grid, move_cost: MoveCost) -> SearchReport:
        q: FIFOQueue[BFSCursor] = FIFOQueue()
        q.enqueue(BFSCursor(position=grid.initial))

        count = 0
        while True:
            cur = q.dequeue()
            if cur is None:
                return SearchReport(nodes_expanded=count, solution=None)
            count += 1

            cell = grid.cell_at(cur.position)
            if cell.kind is CellKind.TARGET:
                return SearchReport(nodes_expanded=count, solution=cur.path)
            if cell.visited:
                continue
            cell.visited = True

            if not cell.passable:
                continue
            for direction, pos in grid.neighbors(cur.position):
                q.enqueue(BFSCursor(position=pos, path=cur.path + [direction]))


ALGORITHM = BreadthFirstSearch()
