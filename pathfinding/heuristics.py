# pathfinding/heuristics.py
from __future__ import annotations

from typing import List, Protocol

from grid import Direction, Grid, Pos
from .move_cost import CUSTOM, MoveCost


class Heuristic(Protocol):
    def estimate(self, p: Pos) -> int:
        ...


class ZeroHeuristic:
    """Always 0; turns a best-first search into uniform-cost search."""

    def estimate(self, p: Pos) -> int:
        return 0


class ManhattanHeuristic:
    """
    Manhattan distance to the nearest goal.
    Admissible and consistent under the uniform cost model.
    """

    def __init__(self, targets: List[Pos]) -> None:
        if not targets:
            raise ValueError("Manhattan heuristic needs at least one goal")
        self.targets = list(targets)

    @classmethod
    def from_grid(cls, grid: Grid) -> "ManhattanHeuristic":
        return cls(grid.targets)

    def estimate(self, p: Pos) -> int:
        x, y = p
        return min(abs(x - gx) + abs(y - gy) for gx, gy in self.targets)


class CustomManhattanHeuristic:
    """
    Manhattan distance where each axis is weighted by the custom cost of the
    move that closes the gap on that axis, minimised over all goals.

    With dx = x - goal_x: dx < 0 means the goal lies to the right, so the
    remaining columns are priced at the cost of moving Right; dx > 0 at the
    cost of moving Left. Likewise dy < 0 uses Down and dy > 0 uses Up.
    """

    def __init__(self, targets: List[Pos]) -> None:
        if not targets:
            raise ValueError("Cost-adjusted heuristic needs at least one goal")
        self.targets = list(targets)

    @classmethod
    def from_grid(cls, grid: Grid) -> "CustomManhattanHeuristic":
        return cls(grid.targets)

    def _to_goal(self, p: Pos, goal: Pos) -> int:
        dx = p[0] - goal[0]
        dy = p[1] - goal[1]

        if dx < 0:
            x_weight = CUSTOM.cost(Direction.RIGHT) * -dx
        else:
            x_weight = CUSTOM.cost(Direction.LEFT) * dx

        if dy < 0:
            y_weight = CUSTOM.cost(Direction.DOWN) * -dy
        else:
            y_weight = CUSTOM.cost(Direction.UP) * dy

        return x_weight + y_weight

    def estimate(self, p: Pos) -> int:
        return min(self._to_goal(p, g) for g in self.targets)


def heuristic_for(grid: Grid, move_cost: MoveCost) -> Heuristic:
    """Goal-distance heuristic that stays admissible under `move_cost`."""
    if move_cost.name == CUSTOM.name:
        return CustomManhattanHeuristic.from_grid(grid)
    return ManhattanHeuristic.from_grid(grid)
