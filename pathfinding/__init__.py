# pathfinding/__init__.py
import importlib
import pkgutil
from typing import Dict
from .base import SearchAlgorithm, SearchReport

SEARCH_ALGOS: Dict[str, SearchAlgorithm] = {}

# Alternative method names accepted on the command line.
ALIASES: Dict[str, str] = {
    "AS": "AStar",
    "ASTAR": "AStar",
    "CUS1": "IDDFS",
    "CUS2": "WAStar",
    "WAS": "WAStar",
    "WASTAR": "WAStar",
    "WEIGHTED_ASTAR": "WAStar",
    "DIJKSTRA": "UCS",
}


def load_algorithms() -> None:
    global SEARCH_ALGOS
    SEARCH_ALGOS = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        name = info.name
        if name in {"base", "__init__"}:
            continue
        module = importlib.import_module(f"{package}.{name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.name in SEARCH_ALGOS:
            raise ValueError(f"Duplicate search algorithm name: {algo.name}")
        SEARCH_ALGOS[algo.name] = algo


def get_algorithm(name: str) -> SearchAlgorithm:
    """Look up a registered algorithm by name or alias, ignoring case."""
    key = name.strip().upper()
    for algo_name, algo in SEARCH_ALGOS.items():
        if algo_name.upper() == key:
            return algo
    if key in ALIASES:
        return SEARCH_ALGOS[ALIASES[key]]
    raise ValueError(f"Unknown search method: {name}")


load_algorithms()
