# config.py
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Config:
    # maze file to load, or "RANDOM" to generate one
    map_file: str = "RANDOM"

    # BFS, DFS, IDDFS, GBFS, AStar, WAStar, UCS (aliases: AS, CUS1, CUS2, DIJKSTRA, ...)
    method: str = "AStar"
    cost_model: str = "uniform"  # "uniform" or "custom" (Up=4, Left=3, Right=2, Down=1)

    # random maze size; None picks rows in [16, 32) and cols in [16, 128)
    rows: Optional[int] = None
    cols: Optional[int] = None
    n_targets: int = 2
    seed: int = 0

    # copy the maze to this file before searching (never overwrites)
    save_map: Optional[str] = None

    log_events: bool = False

    # where main.py writes PNG + summary.json; None disables run outputs
    output_dir: Optional[str] = "outputs"

    def rand_size(self, rng: random.Random) -> Tuple[int, int]:
        rows = self.rows if self.rows is not None else rng.randrange(16, 32)
        cols = self.cols if self.cols is not None else rng.randrange(16, 128)
        return rows, cols
