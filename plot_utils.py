#!/usr/bin/env python3
"""
plot_utils.py

Compare search methods from the batch_results CSV written by batch_run.py.

Typical workflow:

1) Run batch experiments:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import load_results, plot_method_boxplots

        df = load_results("outputs_batch/batch_results.csv")
        plot_method_boxplots(
            df,
            metrics=["search.nodes_expanded", "search.runtime"],
            output_dir="outputs_batch/plots",
        )

   - Or from the command line:
        python plot_utils.py
"""

from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

import seaborn as sns


PathLike = Union[str, Path]

METHOD_COL = "method"

# y-axis labels for the metrics batch_run.py records
METRIC_LABELS: Dict[str, str] = {
    "search.nodes_expanded": "Nodes expanded",
    "search.cells_visited": "Cells visited",
    "search.path_length": "Path length (moves)",
    "search.path_cost": "Path cost",
    "search.runtime": "Runtime (s)",
}


def load_results(csv_path: PathLike) -> pd.DataFrame:
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")
    return pd.read_csv(csv_path)


def summarize_metric(
    df: pd.DataFrame,
    metric: str,
    group_by: str = METHOD_COL,
) -> pd.DataFrame:
    """
    Per-group count, median and quartiles of one metric. Rows with a
    missing value (e.g. path_length of an unsolved maze) are ignored.
    """
    for col in (group_by, metric):
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    sub = df[[group_by, metric]].dropna()
    return (
        sub.groupby(group_by)[metric]
        .agg(
            n="count",
            median="median",
            q1=lambda s: s.quantile(0.25),
            q3=lambda s: s.quantile(0.75),
        )
        .sort_index()
    )


def plot_method_boxplots(
    df: pd.DataFrame,
    metrics: Sequence[str],
    group_by: str = METHOD_COL,
    output_dir: Optional[PathLike] = None,
    show: bool = False,
    log_scale: bool = True,
    palette_name: str = "colorblind",
) -> Dict[str, Path]:
    """
    One seaborn boxplot per metric, one box per method.

    Figures are written as PDF to `output_dir` when it is given; the saved
    paths are returned keyed by metric. Metrics with no data are skipped
    with a [WARN] line.
    """
    saved: Dict[str, Path] = {}
    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    categories = sorted(df[group_by].astype(str).unique())
    palette = dict(zip(categories, sns.color_palette(palette_name, n_colors=len(categories))))

    sns.set_style("whitegrid")
    sns.set_context("paper", font_scale=1.2)

    for metric in metrics:
        stats = summarize_metric(df, metric, group_by)
        if stats.empty:
            print(f"[WARN] No data for metric '{metric}'. Skipping.")
            continue

        print(f"\n[STATS] {metric}")
        print(stats.to_string(float_format=lambda x: f"{x:.4g}"))

        sub = df[[group_by, metric]].dropna().astype({group_by: str})

        fig, ax = plt.subplots(figsize=(max(6.0, 1.5 * len(categories)), 6))
        sns.boxplot(
            data=sub,
            x=group_by,
            y=metric,
            hue=group_by,
            order=categories,
            palette=palette,
            dodge=False,
            ax=ax,
        )

        ax.set_title(f"{METRIC_LABELS.get(metric, metric)} by search method", fontsize=18, pad=28)
        ax.set_xlabel("Search method", fontsize=16)
        ax.set_ylabel(METRIC_LABELS.get(metric, metric), fontsize=16)
        if log_scale:
            ax.set_yscale("log")

        handles = [mpatches.Patch(color=palette[c], label=c) for c in categories]
        ax.legend(
            handles=handles,
            loc="upper center",
            bbox_to_anchor=(0.5, 1.08),
            ncol=min(len(handles), 10),
            frameon=False,
            fontsize=11,
        )
        fig.tight_layout(rect=[0, 0, 1, 0.99])

        if output_dir is not None:
            fname = output_dir / f"box_{metric.replace('.', '_')}_by_{group_by}.pdf"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            saved[metric] = fname
            print(f"Saved boxplot for '{metric}' to {fname}")

        if show:
            plt.show()
        plt.close(fig)

    return saved


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------

DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_METRICS = ["search.nodes_expanded", "search.path_length", "search.runtime"]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"


if __name__ == "__main__":
    print(f"Reading CSV: {DEFAULT_CSV}")
    plot_method_boxplots(
        load_results(DEFAULT_CSV),
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
    )
