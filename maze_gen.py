# maze_gen.py
from __future__ import annotations

import random
from typing import Optional

from grid import CellKind, Grid, Pos

# Arms of the wall cross, in the order the closed one is drawn from.
NORTH, EAST, SOUTH, WEST = range(4)


def generate_maze(
    rows: int,
    cols: int,
    goal_count: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Generate a random maze by recursive division.

    Each region is split by a wall cross into four quadrants. One arm of the
    cross stays closed and the other three get a single gap, so every
    quadrant stays reachable and the result may contain cycles. Quadrants
    are divided again, shrunk by one cell on each side, which leaves an open
    corridor along their border.

    Every open cell is reachable from every other: regions of 3 or fewer
    rows or columns stay open rooms, and each divided quadrant borders the
    corridor left around it.

    The start cell is stamped before dividing so walls never cover it, and
    no wall cross is centred on it. Goals are drawn afterwards from the
    remaining cells and may land on walls.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Maze size must be positive, got {rows}x{cols}")
    if goal_count < 1:
        raise ValueError("A maze needs at least one goal")
    if goal_count >= rows * cols:
        raise ValueError(
            f"Cannot place {goal_count} goals next to the start in a {rows}x{cols} maze"
        )

    rng = rng or random.Random()

    initial: Pos = (rng.randrange(cols), rng.randrange(rows))
    grid = Grid(rows=rows, cols=cols, initial=initial, targets=[])
    grid.set_kind(initial, CellKind.INITIAL)

    _divide(grid, rng, (0, 0), rows, cols)

    candidates = [
        (x, y)
        for y in range(rows)
        for x in range(cols)
        if (x, y) != initial
    ]
    for t in rng.sample(candidates, goal_count):
        grid.targets.append(t)
        grid.set_kind(t, CellKind.TARGET)

    grid.validate()
    return grid


def _carve(grid: Grid, p: Pos) -> None:
    if grid.cell_at(p).kind is CellKind.WALL:
        grid.set_kind(p, CellKind.BLANK)


def _divide(grid: Grid, rng: random.Random, topleft: Pos, rows: int, cols: int) -> None:
    """Split the rectangle at `topleft` and recurse into its quadrants."""
    if rows <= 3 or cols <= 3:
        # too small to split, stays an open room
        return

    left, top = topleft
    start = (grid.initial[0] - left, grid.initial[1] - top)

    # odd offsets, at least one cell away from every edge
    row_choices = range(1, rows - 1, 2)
    col_choices = range(1, cols - 1, 2)

    # the start may sit on a wall line but never on the crossing, where all
    # four of its neighbours would be wall
    if len(row_choices) == 1 and len(col_choices) == 1 and start == (col_choices[0], row_choices[0]):
        return

    while True:
        wall_row = rng.randrange(1, rows - 1, 2)
        wall_col = rng.randrange(1, cols - 1, 2)
        if (wall_col, wall_row) != start:
            break

    for (dx, dy), cell in grid.subdivision(topleft, rows, cols):
        if cell.kind is CellKind.INITIAL:
            continue
        if dx == wall_col or dy == wall_row:
            cell.kind = CellKind.WALL
            cell.visited = False

    # gaps sit on even offsets, so they never land on the crossing wall
    closed = rng.randrange(4)
    if closed != NORTH:
        _carve(grid, (left + wall_col, top + rng.randrange(0, wall_row, 2)))
    if closed != SOUTH:
        _carve(grid, (left + wall_col, top + rng.randrange(wall_row + 1, rows, 2)))
    if closed != EAST:
        _carve(grid, (left + rng.randrange(wall_col + 1, cols, 2), top + wall_row))
    if closed != WEST:
        _carve(grid, (left + rng.randrange(0, wall_col, 2), top + wall_row))

    north_rows = wall_row
    south_rows = rows - wall_row - 1
    west_cols = wall_col
    east_cols = cols - wall_col - 1

    if north_rows > 3 and west_cols > 3:
        _divide(grid, rng, (left + 1, top + 1), north_rows - 2, west_cols - 2)

    if south_rows > 3 and west_cols > 3:
        _divide(grid, rng, (left + 1, top + wall_row + 2), south_rows - 2, west_cols - 2)

    if north_rows > 3 and east_cols > 3:
        _divide(grid, rng, (left + wall_col + 2, top + 1), north_rows - 2, east_cols - 2)

    if south_rows > 3 and east_cols > 3:
        _divide(grid, rng, (left + wall_col + 2, top + wall_row + 2), south_rows - 2, east_cols - 2)
