# pathfinding/move_cost.py
from __future__ import annotations

from typing import Dict, Iterable, Protocol

from grid import Direction


class MoveCost(Protocol):
    name: str

    def cost(self, direction: Direction) -> int:
        ...

    def total(self, path: Iterable[Direction]) -> int:
        ...


class UniformMoveCost:
    """Every move costs 1."""

    name = "uniform"

    def cost(self, direction: Direction) -> int:
        return 1

    def total(self, path: Iterable[Direction]) -> int:
        return sum(self.cost(d) for d in path)


class CustomMoveCost:
    """
    Asymmetric move costs for the variable-move-weight experiment:

        Up = 4, Left = 3, Right = 2, Down = 1
    """

    name = "custom"

    COSTS: Dict[Direction, int] = {
        Direction.UP: 4,
        Direction.DOWN: 1,
        Direction.LEFT: 3,
        Direction.RIGHT: 2,
    }

    def cost(self, direction: Direction) -> int:
        return self.COSTS[direction]

    def total(self, path: Iterable[Direction]) -> int:
        return sum(self.cost(d) for d in path)


UNIFORM = UniformMoveCost()
CUSTOM = CustomMoveCost()

MOVE_COSTS: Dict[str, MoveCost] = {UNIFORM.name: UNIFORM, CUSTOM.name: CUSTOM}


def get_move_cost(name: str) -> MoveCost:
    key = name.strip().lower()
    if key not in MOVE_COSTS:
        raise ValueError(f"Unknown cost model: {name}")
    return MOVE_COSTS[key]
