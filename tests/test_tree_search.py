import random

import pytest

from grid import Direction, Grid
from maze_gen import generate_maze
from runner import run_search

U, L, D, R = Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT


def assert_valid(grid, path):
    cells = grid.follow(path)
    assert all(grid.cell_at(p).passable for p in cells)
    assert cells[-1] in grid.targets


def test_bfs_and_iddfs_agree_on_length(robotnav):
    bfs = run_search(robotnav, "BFS")
    iddfs = run_search(robotnav, "IDDFS")
    assert len(bfs.solution) == len(iddfs.solution) == 10
    assert_valid(robotnav, iddfs.solution)


@pytest.mark.parametrize("seed", range(4))
def test_bfs_and_iddfs_agree_on_small_mazes(seed):
    grid = generate_maze(9, 11, 1, random.Random(seed))
    bfs = run_search(grid, "BFS")
    iddfs = run_search(grid, "IDDFS")
    assert bfs.solved == iddfs.solved
    if bfs.solved:
        assert len(bfs.solution) == len(iddfs.solution)


def test_iddfs_shortest_despite_detour_first(open_grid):
    # DFS order (Up, Left, Down, Right) reaches (1, 1) by a detour first
    grid = open_grid(3, 3, (0, 0), [(2, 1)])
    report = run_search(grid, "IDDFS")
    assert len(report.solution) == 3


def test_dfs_follows_fixed_move_order(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    report = run_search(grid, "DFS")
    # always the first open move in Up, Left, Down, Right order
    assert report.solution == [D, D, R, U, U, R, D, D]
    # every examined cell counts, walls and repeats included
    assert report.nodes_expanded == 16


def test_dfs_returns_valid_path(robotnav):
    report = run_search(robotnav, "DFS")
    assert report.solved
    assert_valid(robotnav, report.solution)


def test_adjacent_goal(open_grid):
    grid = open_grid(1, 2, (0, 0), [(1, 0)])
    for method in ["BFS", "DFS", "IDDFS"]:
        assert run_search(grid, method).solution == [R]


def test_walled_in_start():
    grid = Grid.create(3, 3, (1, 1), [(0, 0)], walls=[(1, 0), (0, 1), (2, 1), (1, 2)])
    for method in ["BFS", "DFS", "IDDFS"]:
        report = run_search(grid, method)
        assert report.solution is None
        # the start plus its four walls
        assert report.nodes_expanded == 5


def test_bfs_marks_walls_it_dequeues():
    grid = Grid.create(1, 3, (0, 0), [(2, 0)], walls=[(1, 0)])
    report = run_search(grid, "BFS")
    assert report.solution is None
    assert grid.cell_at((1, 0)).visited
