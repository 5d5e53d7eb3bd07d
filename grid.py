# grid.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Iterator, List, Optional, Tuple

Pos = Tuple[int, int]  # (x, y) with x = col, y = row


class Direction(IntEnum):
    """
    Moves available to the agent.

    The numeric value doubles as the tie-break priority: lower values win,
    so Up is preferred over Left, Left over Down and Down over Right.
    """
    UP = 0
    LEFT = 1
    DOWN = 2
    RIGHT = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}


class CellKind(Enum):
    INITIAL = "I"
    TARGET = "T"
    WALL = "X"
    BLANK = " "


@dataclass
class Cell:
    kind: CellKind = CellKind.BLANK
    visited: bool = False

    @property
    def passable(self) -> bool:
        return self.kind is not CellKind.WALL


@dataclass
class Grid:
    """
    Row-major grid of cells with one start and one or more goals.

    Cells carry a mutable `visited` flag that searches set while they run;
    call clear_visited() before reusing the grid for another search.
    """
    rows: int
    cols: int
    initial: Pos
    targets: List[Pos]
    cells: List[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid size must be positive, got {self.rows}x{self.cols}")
        if not self.cells:
            self.cells = [Cell() for _ in range(self.rows * self.cols)]
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"Expected {self.rows * self.cols} cells, got {len(self.cells)}"
            )

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        initial: Pos,
        targets: Iterable[Pos],
        walls: Iterable[Pos] = (),
    ) -> "Grid":
        """
        Build a validated grid. Walls are painted first; the start and the
        goals are stamped on top of them.
        """
        unique_targets: List[Pos] = []
        for t in targets:
            t = (int(t[0]), int(t[1]))
            if t not in unique_targets:
                unique_targets.append(t)

        grid = cls(rows=rows, cols=cols, initial=(int(initial[0]), int(initial[1])),
                   targets=unique_targets)
        for w in walls:
            grid.set_kind(w, CellKind.WALL)
        grid.set_kind(grid.initial, CellKind.INITIAL)
        for t in grid.targets:
            if t == grid.initial:
                raise ValueError(f"Goal {t} coincides with the start cell")
            grid.set_kind(t, CellKind.TARGET)

        grid.validate()
        return grid

    def validate(self) -> None:
        """Raise ValueError unless the start/goal invariants hold."""
        if not self.targets:
            raise ValueError("Grid has no goal cells")
        if not self.in_bounds(self.initial):
            raise ValueError(f"Start {self.initial} is outside a {self.rows}x{self.cols} grid")

        initials = [i for i, c in enumerate(self.cells) if c.kind is CellKind.INITIAL]
        if initials != [self.index(self.initial)]:
            raise ValueError("Grid must contain exactly one start cell, at `initial`")

        target_cells = {self._pos(i) for i, c in enumerate(self.cells) if c.kind is CellKind.TARGET}
        if target_cells != set(self.targets):
            raise ValueError("Goal cells do not match the `targets` list")

    def copy(self) -> "Grid":
        return copy.deepcopy(self)

    # ------------------------------------------------------------------ #
    # Basic queries & helpers                                            #
    # ------------------------------------------------------------------ #
    def in_bounds(self, p: Pos) -> bool:
        x, y = p
        return 0 <= x < self.cols and 0 <= y < self.rows

    def index(self, p: Pos) -> int:
        if not self.in_bounds(p):
            raise IndexError(f"{p} is outside a {self.rows}x{self.cols} grid")
        x, y = p
        return x + y * self.cols

    def _pos(self, i: int) -> Pos:
        return (i % self.cols, i // self.cols)

    def cell_at(self, p: Pos) -> Cell:
        return self.cells[self.index(p)]

    def set_kind(self, p: Pos, kind: CellKind) -> None:
        cell = self.cell_at(p)
        cell.kind = kind
        cell.visited = False

    def adjacent(self, p: Pos, direction: Direction) -> Optional[Pos]:
        """Neighbor of `p` in `direction`, or None at the grid boundary."""
        x, y = p
        if direction is Direction.UP and y > 0:
            return (x, y - 1)
        if direction is Direction.LEFT and x > 0:
            return (x - 1, y)
        if direction is Direction.DOWN and y < self.rows - 1:
            return (x, y + 1)
        if direction is Direction.RIGHT and x < self.cols - 1:
            return (x + 1, y)
        return None

    def neighbors(self, p: Pos) -> List[Tuple[Direction, Pos]]:
        """In-bounds neighbors, always in Up, Left, Down, Right order."""
        result = []
        for d in Direction:
            q = self.adjacent(p, d)
            if q is not None:
                result.append((d, q))
        return result

    def subdivision(self, topleft: Pos, rows: int, cols: int) -> Iterator[Tuple[Pos, Cell]]:
        """
        Iterate the cells of a rectangle, yielding ((dx, dy), cell) with
        offsets relative to `topleft`.
        """
        cx, cy = topleft
        for dy in range(rows):
            for dx in range(cols):
                yield (dx, dy), self.cell_at((cx + dx, cy + dy))

    def follow(self, path: Iterable[Direction]) -> List[Pos]:
        """Positions visited when walking `path` from the start, start included."""
        cur = self.initial
        positions = [cur]
        for d in path:
            nxt = self.adjacent(cur, d)
            if nxt is None:
                raise ValueError(f"Move {d} from {cur} leaves the grid")
            cur = nxt
            positions.append(cur)
        return positions

    # ------------------------------------------------------------------ #
    # Visit markers                                                      #
    # ------------------------------------------------------------------ #
    def clear_visited(self) -> None:
        for c in self.cells:
            c.visited = False

    def count_visited(self) -> int:
        """Cells marked during the last search (not the number of search nodes)."""
        return sum(1 for c in self.cells if c.visited and c.kind is not CellKind.TARGET)

    def render(self) -> str:
        lines = []
        for y in range(self.rows):
            row = self.cells[y * self.cols:(y + 1) * self.cols]
            lines.append("".join(c.kind.value for c in row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
