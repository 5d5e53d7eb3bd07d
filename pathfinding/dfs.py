# pathfinding/dfs.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from grid import CellKind, Direction, Grid, Pos
from .base import BaseSearch, SearchReport
from .move_cost import MoveCost


class Outcome(Enum):
    HIT = "hit"    # goal reached
    DEAD = "dead"  # wall, or a cell that must not be entered again
    OPEN = "open"  # freshly claimed cell, its neighbours are next


@dataclass
class Frame:
    """One level of the depth-first stack."""
    position: Pos
    moves: Iterator[Tuple[Direction, Pos]]
    via: Optional[Direction] = None
    remaining: int = 0


def stack_path(stack: List[Frame], last: Direction) -> List[Direction]:
    """Moves from the start to the cell reached by `last` from the top frame."""
    return [f.via for f in stack[1:]] + [last]


def _examine(grid: Grid, pos: Pos) -> Outcome:
    cell = grid.cell_at(pos)
    if cell.kind is CellKind.TARGET:
        return Outcome.HIT
    if cell.kind is CellKind.WALL:
        # marked for inspection only, walls are never entered
        cell.visited = True
        return Outcome.DEAD
    if cell.visited:
        return Outcome.DEAD
    cell.visited = True
    return Outcome.OPEN


class DepthFirstSearch(BaseSearch):
    """
    Depth-first search with an explicit stack.

    Neighbours are tried Up, Left, Down, Right and the first branch that
    reaches a goal wins; its siblings are never looked at. Every cell
    examined (walls and repeats included) counts as one search node.
    """

    name = "DFS"

    def _search(self, grid: Grid, move_cost: MoveCost) -> SearchReport:
        count = 1
        outcome = _examine(grid, grid.initial)
        if outcome is Outcome.HIT:
            return SearchReport(nodes_expanded=count, solution=[])
        if outcome is Outcome.DEAD:
            return SearchReport(nodes_expanded=count, solution=None)

        stack = [Frame(grid.initial, iter(grid.neighbors(grid.initial)))]
        while stack:
            frame = stack[-1]
            step = next(frame.moves, None)
            if step is None:
                stack.pop()
                continue

            direction, pos = step
            count += 1
            outcome = _examine(grid, pos)
            if outcome is Outcome.HIT:
                return SearchReport(nodes_expanded=count, solution=stack_path(stack, direction))
            if outcome is Outcome.OPEN:
                stack.append(Frame(pos, iter(grid.neighbors(pos)), via=direction))

        return SearchReport(nodes_expanded=count, solution=None)


ALGORITHM = DepthFirstSearch()
