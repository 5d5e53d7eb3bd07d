import pytest

from grid import Direction
from pathfinding.heuristics import (
    CustomManhattanHeuristic,
    ManhattanHeuristic,
    ZeroHeuristic,
    heuristic_for,
)
from pathfinding.move_cost import CUSTOM, UNIFORM, get_move_cost


def test_move_costs():
    assert [UNIFORM.cost(d) for d in Direction] == [1, 1, 1, 1]
    assert CUSTOM.cost(Direction.UP) == 4
    assert CUSTOM.cost(Direction.LEFT) == 3
    assert CUSTOM.cost(Direction.RIGHT) == 2
    assert CUSTOM.cost(Direction.DOWN) == 1
    assert CUSTOM.total([Direction.UP, Direction.RIGHT, Direction.RIGHT]) == 8


def test_move_cost_lookup():
    assert get_move_cost("Custom") is CUSTOM
    assert get_move_cost(" uniform ") is UNIFORM
    with pytest.raises(ValueError):
        get_move_cost("diagonal")


def test_manhattan_takes_nearest_goal():
    h = ManhattanHeuristic([(0, 0), (10, 10)])
    assert h.estimate((2, 3)) == 5
    assert h.estimate((9, 9)) == 2
    assert h.estimate((10, 10)) == 0


def test_custom_manhattan_prices_each_axis_by_the_move_needed():
    h = CustomManhattanHeuristic([(5, 5)])
    # goal right and below: Right=2 per column, Down=1 per row
    assert h.estimate((2, 3)) == 3 * 2 + 2 * 1
    # goal left and above: Left=3 per column, Up=4 per row
    assert h.estimate((7, 9)) == 2 * 3 + 4 * 4
    assert h.estimate((5, 5)) == 0


def test_custom_manhattan_never_exceeds_the_cheapest_route():
    h = CustomManhattanHeuristic([(0, 0)])
    # from (3, 2) the only moves that help are Left and Up
    cheapest = 3 * CUSTOM.cost(Direction.LEFT) + 2 * CUSTOM.cost(Direction.UP)
    assert h.estimate((3, 2)) == cheapest


def test_empty_goal_list_is_rejected():
    with pytest.raises(ValueError):
        ManhattanHeuristic([])
    with pytest.raises(ValueError):
        CustomManhattanHeuristic([])


def test_zero_heuristic():
    assert ZeroHeuristic().estimate((12, 4)) == 0


def test_heuristic_follows_cost_model(open_grid):
    grid = open_grid(4, 4, (0, 0), [(3, 3)])
    assert isinstance(heuristic_for(grid, UNIFORM), ManhattanHeuristic)
    assert isinstance(heuristic_for(grid, CUSTOM), CustomManhattanHeuristic)
