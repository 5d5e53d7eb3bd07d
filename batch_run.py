#!/usr/bin/env python3
"""
Batch comparison of search methods on random mazes.

Every combination of PARAM_GRID (batch_config.py) is one experiment: the
maze for (rows, cols, n_targets, seed) is generated, searched once with
`method` under `cost_model`, and its metrics become one CSV row. Runs are
spread over worker processes and appended to

    outputs_batch/batch_results.csv

An existing CSV keeps its header; new rows are written in that column
order. Once the sweep is done the rows are grouped by maze, and any maze
on which some methods found a path while others did not is reported with
a [WARN] line. Sound methods never disagree, so such a line means a bug.

Usage, from the repo root:

    python batch_run.py
    python plot_utils.py      # boxplots of the CSV
"""

import csv
import itertools
import multiprocessing as mp
import random
from pathlib import Path
from typing import Dict, Any, Iterable, List, Optional, Tuple
import traceback

from batch_config import CPU_COUNT, PARAM_GRID
from maze_gen import generate_maze
from runner import SearchRunner

# Parameters that identify one maze; rows sharing them searched the same grid.
MAZE_KEYS: Tuple[str, ...] = ("rows", "cols", "n_targets", "cost_model", "seed")


def iter_param_combinations(grid: Dict[str, List[Any]]):
    """Yield one params dict per point of the Cartesian product."""
    keys = list(grid)
    for values in itertools.product(*(grid[k] for k in keys)):
        yield dict(zip(keys, values))


def flatten_dict(d: Dict[str, Any], prefix: str = "", sep: str = ".") -> Dict[str, Any]:
    """{"a": {"b": 1}, "c": 2} -> {"a.b": 1, "c": 2}"""
    flat: Dict[str, Any] = {}
    for key, value in d.items():
        name = f"{prefix}{sep}{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_dict(value, name, sep=sep))
        else:
            flat[name] = value
    return flat


# ---------------------------------------------------------------------
# One experiment
# ---------------------------------------------------------------------

def run_single_experiment(
    purpose: str,                # meta label, only for the CSV
    rows: int,
    cols: int,
    n_targets: int,
    cost_model: str,
    method: str,
    seed: int,
) -> Dict[str, Any]:
    """
    Generate the maze for `seed`, search it once and return a flat dict of
    metrics. The maze depends only on (rows, cols, n_targets, seed), so
    every method in a sweep is compared on identical grids.
    """
    grid = generate_maze(rows, cols, n_targets, random.Random(seed))

    runner = SearchRunner(grid=grid, method=method, cost_model=cost_model)
    runner.algo.reset_stats()
    report = runner.run()

    algo = runner.algo
    summary: Dict[str, Any] = {
        "grid": {
            "rows": grid.rows,
            "cols": grid.cols,
            "targets": len(grid.targets),
            "walls": sum(1 for c in grid.cells if not c.passable),
        },
        "search": {
            "algorithm": algo.name,
            "solved": report.solved,
            "nodes_expanded": report.nodes_expanded,
            "cells_visited": grid.count_visited(),
            "path_length": len(report.solution) if report.solution is not None else None,
            "path_cost": runner.path_cost(),
            "runtime": algo.last_runtime,
        },
    }

    # 'purpose' and the other params are merged in by run_one()
    return flatten_dict(summary)


def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Pool worker: params plus the experiment's metrics as one row, or None
    (with the traceback printed) when the experiment raised.
    """
    params = dict(params)
    try:
        metrics = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] experiment failed for params={params}: {e}")
        traceback.print_exc()
        return None
    return {**params, **metrics}


# ---------------------------------------------------------------------
# Cross-checking methods
# ---------------------------------------------------------------------

def _as_bool(value: Any) -> bool:
    # rows read back from the CSV carry "True"/"False" strings
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def find_disagreements(rows: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Group result rows by maze and return one entry per maze on which the
    methods disagree about solvability:

        {"maze": {"rows": 16, ..., "seed": 3},
         "solved_by": ["AStar", "BFS"], "unsolved_by": ["DFS"]}
    """
    outcomes: Dict[Tuple[Any, ...], Dict[str, bool]] = {}
    for row in rows:
        key = tuple(row.get(k) for k in MAZE_KEYS)
        outcomes.setdefault(key, {})[str(row["method"])] = _as_bool(row["search.solved"])

    disagreements: List[Dict[str, Any]] = []
    for key, by_method in outcomes.items():
        solved = sorted(m for m, ok in by_method.items() if ok)
        unsolved = sorted(m for m, ok in by_method.items() if not ok)
        if solved and unsolved:
            disagreements.append({
                "maze": dict(zip(MAZE_KEYS, key)),
                "solved_by": solved,
                "unsolved_by": unsolved,
            })
    return disagreements


# ---------------------------------------------------------------------
# CSV output
# ---------------------------------------------------------------------

def _existing_columns(csv_path: Path) -> Optional[List[str]]:
    if not csv_path.exists():
        return None
    with csv_path.open("r", newline="") as f:
        header = next(csv.reader(f), [])
    return header or None


def _columns_for(row: Dict[str, Any]) -> List[str]:
    # 'purpose' first, everything else alphabetical
    rest = sorted(k for k in row if k != "purpose")
    return (["purpose"] if "purpose" in row else []) + rest


def main_batch(out_dir: Path = Path("outputs_batch")) -> List[Dict[str, Any]]:
    combos = list(iter_param_combinations(PARAM_GRID))
    total = len(combos)
    if not combos:
        print("PARAM_GRID is empty, nothing to run.")
        return []
    print(f"Experiments in this sweep: {total}")

    out_dir.mkdir(parents=True, exist_ok=True)
    csv_path = out_dir / "batch_results.csv"

    results: List[Dict[str, Any]] = []
    columns = _existing_columns(csv_path)

    if columns is None:
        # a fresh CSV takes its columns from the first row, so run that one here
        first = run_one(combos[0])
        if first is None:
            print("[ERROR] first experiment failed, cannot infer CSV columns")
            return []
        columns = _columns_for(first)
        with csv_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first)
        results.append(first)
        combos = combos[1:]
        print(f"Started {csv_path} with {len(columns)} columns")
    else:
        print(f"Appending to {csv_path} ({len(columns)} columns)")

    if combos:
        num_procs = CPU_COUNT or mp.cpu_count()
        print(f"Running {len(combos)} experiments on {num_procs} processes ...")

        with csv_path.open("a", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=columns, extrasaction="ignore")
            with mp.Pool(processes=num_procs) as pool:
                for row in pool.imap_unordered(run_one, combos):
                    if row is None:
                        continue
                    writer.writerow(row)
                    f.flush()
                    results.append(row)
                    if len(results) % 10 == 0 or len(results) == total:
                        print(f"Completed {len(results)}/{total} experiments")

    disagreements = find_disagreements(results)
    for d in disagreements:
        print(
            f"[WARN] methods disagree on maze {d['maze']}: "
            f"solved by {d['solved_by']}, unsolved by {d['unsolved_by']}"
        )
    if not disagreements:
        print("All methods agree on solvability for every maze.")

    print(f"Results in {csv_path}")
    return results


if __name__ == "__main__":
    main_batch()
