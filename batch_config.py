# batch_config.py
from __future__ import annotations

from typing import Dict, List, Any

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Example:
#   CPU_COUNT = 8        # use 8 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Parameter grid for batch_run.py
# ---------------------------------------------------------------------------
# PARAM_GRID will run all permutations (Cartesian product) of the values.
#
# Example:
#   "rows": [16, 31]
#   "cols": [16, 64]
# will generate 4 maze shapes:
#   (16x16), (16x64), (31x16), (31x64)
#
# Every method sees the same maze for a given (rows, cols, n_targets, seed),
# so the "method" list is what gets compared.
#
# Be careful: experiment count grows exponentially in the number of values
# per key, i.e.  prod(len(v) for v in PARAM_GRID.values()).
PARAM_GRID: Dict[str, List[Any]] = {
    # --- meta ---
    "purpose": ["method_comparison"],  # free-text label for this batch

    # --- maze parameters ---
    "rows": [16, 31],                  # number of grid rows in the maze
    "cols": [16, 64],                  # number of grid columns in the maze
    "n_targets": [2],                  # how many goal cells are placed

    # --- search ---
    "cost_model": ["uniform"],         # "uniform" or "custom" (Up=4, Left=3, Right=2, Down=1)

    # "method": ["BFS","DFS","IDDFS","GBFS","AStar","WAStar","UCS"],
    "method": ["BFS", "DFS", "GBFS", "AStar", "WAStar", "UCS"],  # IDDFS is slow on open mazes

    # --- randomness ---
    "seed": [i for i in range(10)],    # RNG seeds, one random maze per seed and shape
}


# -----------------------------------------------------------------------
# Algorithm details, no modification is needed below
# -----------------------------------------------------------------------

    # Search methods (see pathfinding/__init__.py for aliases):
    #
    #   "BFS"     - Breadth-first search (shortest path in moves).
    #   "DFS"     - Depth-first search (any path, Up/Left/Down/Right order).
    #   "IDDFS"   - Iterative deepening DFS (shortest in moves, low memory; alias CUS1).
    #   "GBFS"    - Greedy best-first on the heuristic alone (fast, not optimal).
    #   "AStar"   - A* with Manhattan heuristic (cost-optimal).
    #   "WAStar"  - Weighted A*, heuristic doubled (bounded-suboptimal; alias CUS2).
    #   "UCS"     - Uniform-cost search / Dijkstra (cost-optimal, no heuristic).
    #
    # Cost models:
    #
    #   "uniform" - every move costs 1, heuristic is plain Manhattan distance.
    #   "custom"  - Up=4, Left=3, Right=2, Down=1; the heuristic weights the
    #               Manhattan components by the direction that must be taken.
