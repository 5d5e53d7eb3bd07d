import heapq
import random

import pytest

from grid import CellKind, Grid
from maze_gen import generate_maze
from pathfinding import SEARCH_ALGOS, get_algorithm
from pathfinding.cursors import AStarCursor, DijkstraCursor
from pathfinding.graph_search import GraphSearch, SearchState
from pathfinding.heuristics import ManhattanHeuristic, ZeroHeuristic
from pathfinding.move_cost import CUSTOM, UNIFORM
from pathfinding.queues import SortedQueue
from runner import run_search

INFORMED = ["GBFS", "AStar", "WAStar", "UCS"]


def cheapest_cost(grid, move_cost):
    """Plain Dijkstra over passable cells, used as the reference answer."""
    best = {grid.initial: 0}
    heap = [(0, grid.initial)]
    goals = set(grid.targets)
    while heap:
        g, p = heapq.heappop(heap)
        if p in goals:
            return g
        if g > best[p]:
            continue
        for d, q in grid.neighbors(p):
            if not grid.cell_at(q).passable:
                continue
            ng = g + move_cost.cost(d)
            if ng < best.get(q, float("inf")):
                best[q] = ng
                heapq.heappush(heap, (ng, q))
    return None


def assert_valid(grid, path):
    cells = grid.follow(path)
    assert all(grid.cell_at(p).passable for p in cells)
    assert cells[-1] in grid.targets


def test_open_five_by_five(open_grid):
    bfs_grid = open_grid(5, 5, (0, 0), [(4, 4)])
    astar_grid = bfs_grid.copy()

    bfs = run_search(bfs_grid, "BFS")
    astar = run_search(astar_grid, "AStar")

    assert len(bfs.solution) == 8
    assert len(astar.solution) == 8
    assert astar.nodes_expanded <= bfs.nodes_expanded
    assert_valid(astar_grid, astar.solution)


def test_robotnav_shortest_route(robotnav):
    for method in ["BFS", "AStar", "UCS"]:
        report = run_search(robotnav, method)
        assert len(report.solution) == 10
        assert robotnav.follow(report.solution)[-1] == (7, 0)


@pytest.mark.parametrize("method", INFORMED)
def test_informed_methods_return_valid_paths(robotnav, method):
    report = run_search(robotnav, method)
    assert report.solved
    assert_valid(robotnav, report.solution)


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("method", ["AStar", "UCS"])
def test_cost_optimal_under_custom_costs(seed, method):
    grid = generate_maze(16, 30, 2, random.Random(seed))
    expected = cheapest_cost(grid, CUSTOM)

    report = run_search(grid, method, cost_model="custom")

    if expected is None:
        assert report.solution is None
    else:
        assert CUSTOM.total(report.solution) == expected
        assert_valid(grid, report.solution)


@pytest.mark.parametrize("seed", range(6))
def test_ucs_is_cost_optimal_under_uniform_costs(seed):
    grid = generate_maze(20, 20, 1, random.Random(100 + seed))
    expected = cheapest_cost(grid, UNIFORM)
    report = run_search(grid, "UCS")
    if expected is None:
        assert not report.solved
    else:
        assert len(report.solution) == expected


def test_cost_optimal_on_robotnav(robotnav):
    expected = cheapest_cost(robotnav, CUSTOM)
    for method in ["AStar", "UCS"]:
        report = run_search(robotnav, method, cost_model="custom")
        assert CUSTOM.total(report.solution) == expected


def test_unreachable_goal_reports_no_solution():
    # goal boxed in by walls
    grid = Grid.create(4, 4, (0, 0), [(3, 3)], walls=[(2, 3), (3, 2), (2, 2)])
    for name in SEARCH_ALGOS:
        report = run_search(grid, name)
        assert report.solution is None
        assert report.nodes_expanded > 0


def test_rerun_after_clear_gives_identical_report(robotnav):
    algo = get_algorithm("AStar")
    first = algo.search(robotnav, UNIFORM)
    robotnav.clear_visited()
    second = algo.search(robotnav, UNIFORM)
    assert first == second


@pytest.mark.parametrize("method", INFORMED + ["BFS", "DFS", "IDDFS"])
def test_deterministic_on_equal_grids(robotnav, method):
    other = robotnav.copy()
    assert run_search(robotnav, method) == run_search(other, method)


def test_empty_goal_set_is_rejected(open_grid):
    grid = open_grid(3, 3, (0, 0), [(2, 2)])
    grid.targets = []
    for name in SEARCH_ALGOS:
        with pytest.raises(ValueError):
            get_algorithm(name).search(grid)


def test_engine_states_and_counts(open_grid):
    grid = open_grid(1, 3, (0, 0), [(2, 0)])
    engine = GraphSearch(grid, ZeroHeuristic(), SortedQueue(), DijkstraCursor)
    assert engine.state is None

    report = engine.search()
    assert engine.state is SearchState.SOLVED
    assert report.solution is not None and len(report.solution) == 2
    # start, (1, 0), the repeat of the start, then the goal
    assert report.nodes_expanded == engine.nodes_expanded == 4
    assert grid.cell_at((0, 0)).visited
    assert grid.cell_at((1, 0)).visited


def test_engine_exhausts_when_walled_in():
    grid = Grid.create(1, 3, (0, 0), [(2, 0)], walls=[(1, 0)])
    engine = GraphSearch(grid, ManhattanHeuristic.from_grid(grid), SortedQueue(), AStarCursor)
    report = engine.search()
    assert engine.state is SearchState.EXHAUSTED
    assert report.solution is None
    # the start, then the wall: walls are dequeued and marked but not expanded
    assert report.nodes_expanded == 2
    assert grid.cell_at((1, 0)).visited
    assert grid.cell_at((1, 0)).kind is CellKind.WALL


def test_timing_stats(open_grid):
    algo = get_algorithm("WAStar")
    algo.reset_stats()
    run_search(open_grid(4, 4, (0, 0), [(3, 3)]), "WAStar")
    run_search(open_grid(4, 4, (0, 0), [(3, 3)]), "WAStar")
    assert algo.call_count == 2
    assert algo.total_runtime >= algo.last_runtime >= 0.0
    algo.reset_stats()
    assert algo.call_count == 0


def test_engine_rerun_starts_from_an_empty_frontier(robotnav):
    engine = GraphSearch(
        robotnav, ManhattanHeuristic.from_grid(robotnav), SortedQueue(), AStarCursor,
    )
    first = engine.search()
    assert len(engine.queue) > 0

    robotnav.clear_visited()
    second = engine.search()

    assert second == first
    assert engine.state is SearchState.SOLVED
