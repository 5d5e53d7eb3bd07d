from grid import Direction
from pathfinding.cursors import AStarCursor
from pathfinding.filters import branch_duped, global_duped
from pathfinding.graph_search import GraphSearch
from pathfinding.heuristics import ManhattanHeuristic
from pathfinding.queues import SortedQueue

U, L, D, R = Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT


def test_global_duped_uses_visited_marks(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    cursor = AStarCursor(position=(1, 0), path=[R])
    assert not global_duped(grid, cursor)
    grid.cell_at((1, 0)).visited = True
    assert global_duped(grid, cursor)


def test_global_duped_never_drops_a_goal(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    grid.cell_at((2, 2)).visited = True
    assert not global_duped(grid, AStarCursor(position=(2, 2), path=[R, R, D, D]))


def test_branch_duped_detects_loops_on_own_path(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    assert branch_duped(grid, AStarCursor(position=(0, 0), path=[R, L]))
    assert branch_duped(grid, AStarCursor(position=(1, 0), path=[R, D, R, U, L]))
    assert not branch_duped(grid, AStarCursor(position=(2, 1), path=[R, D, R]))
    assert not branch_duped(grid, AStarCursor(position=(0, 0), path=[]))


def test_branch_duped_ignores_other_branches(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    grid.cell_at((1, 0)).visited = True
    assert not branch_duped(grid, AStarCursor(position=(1, 0), path=[R]))


def test_engine_with_branch_filter_finds_shortest_path(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    engine = GraphSearch(
        grid,
        ManhattanHeuristic.from_grid(grid),
        SortedQueue(),
        AStarCursor,
        duplicate_filter=branch_duped,
    )
    report = engine.search()
    assert report.solution is not None
    assert len(report.solution) == 4
    assert grid.follow(report.solution)[-1] == (2, 2)
