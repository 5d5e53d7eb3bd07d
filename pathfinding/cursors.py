# pathfinding/cursors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from grid import Direction, Pos
from .move_cost import MoveCost, UNIFORM

# Weighted A* inflates the heuristic by this factor.
WEIGHT_MODIFIER = 2


@dataclass
class Cursor:
    """
    One frontier entry: the moves taken from the start, where they lead,
    the heuristic estimate there and the move cost paid so far.

    Subclasses only differ in weigh(), which is what the sorted frontier
    orders on.
    """
    position: Pos
    path: List[Direction] = field(default_factory=list)
    heuristic: int = 0
    travelled: int = 0
    move_cost: MoveCost = field(default=UNIFORM, repr=False, compare=False)

    def weigh(self) -> int:
        raise NotImplementedError

    def direction(self) -> Optional[Direction]:
        return self.path[-1] if self.path else None

    def child(self, direction: Direction, position: Pos, heuristic: int) -> "Cursor":
        return type(self)(
            position=position,
            path=self.path + [direction],
            heuristic=heuristic,
            travelled=self.travelled + self.move_cost.cost(direction),
            move_cost=self.move_cost,
        )


class GreedyCursor(Cursor):
    """f(n) = h(n)"""

    def weigh(self) -> int:
        return self.heuristic


class DijkstraCursor(Cursor):
    """f(n) = g(n)"""

    def weigh(self) -> int:
        return self.travelled


class AStarCursor(Cursor):
    """f(n) = g(n) + h(n)"""

    def weigh(self) -> int:
        return self.travelled + self.heuristic


class WeightedAStarCursor(Cursor):
    """f(n) = g(n) + w * h(n), w = WEIGHT_MODIFIER"""

    def weigh(self) -> int:
        return self.travelled + WEIGHT_MODIFIER * self.heuristic
