# viz.py
from __future__ import annotations
from typing import Optional, Sequence
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from grid import CellKind, Direction, Grid


def draw_grid(
    grid: Grid,
    out_path: str | Path,
    path: Optional[Sequence[Direction]] = None,
    title: str = "Maze search",
) -> None:
    """
    Draw a snapshot of the grid after a search:
      - free cells: light background
      - walls: dark gray
      - cells the search visited: light cyan (walls: slate)
      - start: red star
      - goals: green crosses
      - solution path (if given): green line
    """
    rows, cols = grid.rows, grid.cols
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # --- Color palette (RGB in 0–1) ---
    bgcolor            = np.array([0.96, 0.96, 0.96])  # light gray background
    wall_color         = np.array([0.30, 0.30, 0.30])  # dark gray
    visited_color      = np.array([0.75, 0.90, 0.93])  # light cyan
    visited_wall_color = np.array([0.35, 0.47, 0.52])  # slate

    img = np.zeros((rows, cols, 3), dtype=float)
    img[:, :, :] = bgcolor

    for i, cell in enumerate(grid.cells):
        x, y = i % cols, i // cols
        if cell.kind is CellKind.WALL:
            img[y, x] = visited_wall_color if cell.visited else wall_color
        elif cell.visited:
            img[y, x] = visited_color

    fig, ax = plt.subplots(figsize=(max(4.0, cols / 2.0), max(3.0, rows / 2.0)))
    # row 0 is the top of the maze, as in the text format
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, cols, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, rows, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    handles = []

    # Solution path
    if path is not None:
        points = grid.follow(path)
        px = [p[0] for p in points]
        py = [p[1] for p in points]
        (h_path,) = ax.plot(px, py, color="#2ca02c", linewidth=2.0, alpha=0.8, label="solution")
        handles.append(h_path)

    # Start
    sx, sy = grid.initial
    handles.append(ax.scatter(
        [sx],
        [sy],
        marker="*",
        s=150,
        c="#d62728",          # red
        edgecolors="white",
        linewidths=1.0,
        label="start",
    ))

    # Goals
    tx = [p[0] for p in grid.targets]
    ty = [p[1] for p in grid.targets]
    handles.append(ax.scatter(
        tx,
        ty,
        marker="x",
        s=80,
        c="#2ca02c",           # green
        linewidths=1.5,
        label="goals",
    ))

    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title, fontsize=18, y=0.98)

    handles.extend(
        [
            Patch(facecolor=wall_color, edgecolor="black", label="wall"),
            Patch(facecolor=visited_color, edgecolor="black", label="visited"),
        ]
    )

    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.95),  # just below the title
        ncol=len(handles),            # single line
        fontsize=9,
        frameon=False,
    )

    # Leave space at top for title + legend
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.90])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)
