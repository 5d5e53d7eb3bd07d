# pathfinding/filters.py
from __future__ import annotations

from typing import Callable

from grid import CellKind, Grid
from .cursors import Cursor

# Decides whether a dequeued cursor is a repeat that should be dropped.
DuplicateFilter = Callable[[Grid, Cursor], bool]


def global_duped(grid: Grid, cursor: Cursor) -> bool:
    """True when the cursor's cell was already claimed by any branch."""
    cell = grid.cell_at(cursor.position)
    if cell.kind is CellKind.TARGET:
        return False
    return cell.visited


def branch_duped(grid: Grid, cursor: Cursor) -> bool:
    """
    True when the cursor's own path loops back onto itself.

    Walks the path backwards summing the displacement; if some suffix of the
    path nets out to (0, 0) the current cell was already on this branch.
    Cells reached by other branches are not considered.
    """
    lateral, longitudinal = 0, 0
    for d in reversed(cursor.path):
        dx, dy = d.delta
        lateral += dx
        longitudinal += dy
        if lateral == 0 and longitudinal == 0:
            return True
    return False
