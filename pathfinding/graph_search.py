# pathfinding/graph_search.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Type

from grid import CellKind, Grid
from .base import BaseSearch, SearchReport
from .cursors import Cursor
from .filters import DuplicateFilter, global_duped
from .heuristics import Heuristic, heuristic_for
from .move_cost import MoveCost, UNIFORM
from .queues import QueueStrategy, SortedQueue


class SearchState(Enum):
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class GraphSearch:
    """
    Generalised frontier-expansion loop.

    Every informed algorithm is one configuration of four policies:

      - heuristic:        estimate of the remaining cost, cached per cursor
      - queue:            frontier ordering (SortedQueue orders on weigh())
      - cursor_cls:       decides weigh(), i.e. which algorithm this is
      - duplicate_filter: decides whether a dequeued cursor is a repeat

    Every dequeue is counted in nodes_expanded, including cursors the filter
    throws away. Cells are marked visited when they are claimed; walls are
    marked but never expanded.
    """

    def __init__(
        self,
        grid: Grid,
        heuristic: Heuristic,
        queue: QueueStrategy[Cursor],
        cursor_cls: Type[Cursor],
        move_cost: MoveCost = UNIFORM,
        duplicate_filter: DuplicateFilter = global_duped,
    ) -> None:
        self.grid = grid
        self.heuristic = heuristic
        self.queue = queue
        self.cursor_cls = cursor_cls
        self.move_cost = move_cost
        self.duplicate_filter = duplicate_filter

        self.state: Optional[SearchState] = None
        self.nodes_expanded = 0

    def search(self) -> SearchReport:
        """
        Run from a fresh frontier. The engine can be run again, but the
        grid's visited marks are the caller's: clear them first.
        """
        start = self.grid.initial
        self.queue.clear()
        self.queue.enqueue(
            self.cursor_cls(
                position=start,
                heuristic=self.heuristic.estimate(start),
                move_cost=self.move_cost,
            )
        )
        self.nodes_expanded = 0
        self.state = SearchState.RUNNING

        while True:
            cur = self.queue.dequeue()
            if cur is None:
                self.state = SearchState.EXHAUSTED
                return SearchReport(nodes_expanded=self.nodes_expanded, solution=None)

            self.nodes_expanded += 1

            if self.duplicate_filter(self.grid, cur):
                continue

            cell = self.grid.cell_at(cur.position)
            if cell.kind is CellKind.TARGET:
                self.state = SearchState.SOLVED
                return SearchReport(nodes_expanded=self.nodes_expanded, solution=list(cur.path))

            cell.visited = True
            if cell.passable:
                self._expose_next_layer(cur)

    def _expose_next_layer(self, cur: Cursor) -> None:
        for direction, pos in self.grid.neighbors(cur.position):
            self.queue.enqueue(cur.child(direction, pos, self.heuristic.estimate(pos)))


class InformedSearch(BaseSearch):
    """
    Registered best-first algorithm: a GraphSearch over a SortedQueue whose
    ordering comes from `cursor_cls`.
    """

    cursor_cls: Type[Cursor] = Cursor

    def __init__(self, duplicate_filter: DuplicateFilter = global_duped) -> None:
        super().__init__()
        self.duplicate_filter = duplicate_filter

    def make_heuristic(self, grid: Grid, move_cost: MoveCost) -> Heuristic:
        return heuristic_for(grid, move_cost)

    def _search(self, grid: Grid, move_cost: MoveCost) -> SearchReport:
        engine = GraphSearch(
            grid,
            self.make_heuristic(grid, move_cost),
            SortedQueue(),
            self.cursor_cls,
            move_cost=move_cost,
            duplicate_filter=self.duplicate_filter,
        )
        return engine.search()
