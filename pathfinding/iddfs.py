# pathfinding/iddfs.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from grid import CellKind, Direction, Grid, Pos
from .base import BaseSearch, SearchReport
from .dfs import Frame, Outcome, stack_path
from .move_cost import MoveCost


class IterativeDeepeningSearch(BaseSearch):
    """
    Iterative-deepening depth-first search (IDDFS).

    Runs a depth-limited DFS with limit 0, 1, 2, ... and clears the visited
    marks between rounds. A round reports whether it was cut short by the
    limit; the search gives up only after a round that failed without being
    cut short, so it always terminates.

    Within a round a cell is skipped only if it was already expanded with at
    least as much depth left. A cell first reached along a long detour is
    therefore expanded again when a shorter route reaches it, which keeps
    the returned path shortest in number of moves.

    nodes_expanded is the node count of the final round.
    """

    name = "IDDFS"

    def _search(self, grid: Grid, move_cost: MoveCost) -> SearchReport:
        limit = 0
        while True:
            path, count, more = self._deepen(grid, limit)
            if path is not None:
                return SearchReport(nodes_expanded=count, solution=path)
            if not more:
                return SearchReport(nodes_expanded=count, solution=None)
            limit += 1
            grid.clear_visited()

    def _deepen(self, grid: Grid, limit: int) -> Tuple[Optional[List[Direction]], int, bool]:
        """
        One depth-limited round.

        Returns (path or None, nodes examined, whether the limit truncated
        the search somewhere).
        """
        # most depth left with which each cell has been expanded this round
        expanded: Dict[Pos, int] = {}
        more = False

        def examine(pos: Pos, remaining: int) -> Outcome:
            nonlocal more
            cell = grid.cell_at(pos)
            if cell.kind is CellKind.TARGET:
                return Outcome.HIT
            if cell.kind is CellKind.WALL:
                cell.visited = True
                return Outcome.DEAD
            if remaining == 0:
                if not cell.visited:
                    more = True
                return Outcome.DEAD
            if expanded.get(pos, -1) >= remaining:
                return Outcome.DEAD
            expanded[pos] = remaining
            cell.visited = True
            return Outcome.OPEN

        count = 1
        outcome = examine(grid.initial, limit)
        if outcome is Outcome.HIT:
            return [], count, more
        if outcome is Outcome.DEAD:
            return None, count, more

        stack = [Frame(grid.initial, iter(grid.neighbors(grid.initial)), remaining=limit)]
        while stack:
            frame = stack[-1]
            step = next(frame.moves, None)
            if step is None:
                stack.pop()
                continue

            direction, pos = step
            count += 1
            outcome = examine(pos, frame.remaining - 1)
            if outcome is Outcome.HIT:
                return stack_path(stack, direction), count, more
            if outcome is Outcome.OPEN:
                stack.append(
                    Frame(pos, iter(grid.neighbors(pos)), via=direction, remaining=frame.remaining - 1)
                )

        return None, count, more


ALGORITHM = IterativeDeepeningSearch()
