"""Charts comparing DFS and best-first search across board sizes.

Generated charts (PNG, written to ``out_dir``):

- 01_steps_vs_N: Expanded states per strategy
    - What: mean ``steps_taken`` of each strategy for every N.
    - X: N (board size). Y: steps (log scale).
- 02_time_vs_N: Wall time per strategy
    - What: mean search time in seconds, including exhausted runs.
    - X: N (board size). Y: time [s] (log scale).
- 03_throughput_vs_N: Search throughput
    - What: expanded states per second with a ±1σ band over repeated runs.
    - X: N (board size). Y: steps/s.
"""
from __future__ import annotations

import os
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import seaborn as sns  # noqa: E402

from .reporting import filename_suffix, records_to_frame  # noqa: E402
from .stats import RunRecord  # noqa: E402

_STRATEGY_LABELS = {"dfs": "DFS", "best_first": "Best-first"}


def _save(fig, out_dir: str, stem: str) -> str:
    fname = os.path.join(out_dir, f"{stem}{filename_suffix()}.png")
    fig.savefig(fname, bbox_inches="tight", dpi=150)
    plt.close(fig)
    return fname


def plot_steps_and_time(records: List[RunRecord], out_dir: str) -> List[str]:
    """Draw steps-vs-N and time-vs-N line charts, one line per strategy.

    Returns the list of written file paths.
    """
    os.makedirs(out_dir, exist_ok=True)
    frame = records_to_frame(records)
    frame["label"] = frame["strategy"].map(lambda s: _STRATEGY_LABELS.get(s, s))
    # Log axes cannot show zero values
    frame["steps_plot"] = np.maximum(frame["steps"].astype(float), 1.0)
    frame["time_plot"] = np.maximum(frame["time"].astype(float), 1e-6)
    written: List[str] = []

    sns.set_theme(style="whitegrid")

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(data=frame, x="n", y="steps_plot", hue="label", marker="o", errorbar=None, ax=ax)
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Expanded states (log scale)")
    ax.set_title("Search effort vs problem size")
    ax.set_xticks(sorted(frame["n"].unique()))
    written.append(_save(fig, out_dir, "01_steps_vs_N"))
    print(f"Saved steps chart: {written[-1]}")

    fig, ax = plt.subplots(figsize=(10, 6))
    sns.lineplot(data=frame, x="n", y="time_plot", hue="label", marker="s", errorbar=None, ax=ax)
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Time [s] (log scale)")
    ax.set_title("Execution time vs problem size")
    ax.set_xticks(sorted(frame["n"].unique()))
    written.append(_save(fig, out_dir, "02_time_vs_N"))
    print(f"Saved execution-time chart: {written[-1]}")

    return written


def plot_throughput(records: List[RunRecord], out_dir: str) -> str:
    """Draw mean throughput per strategy with a ±1σ band; return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    frame = records_to_frame(records)

    fig, ax = plt.subplots(figsize=(10, 6))
    for strategy, group in frame.groupby("strategy", sort=False):
        by_n = group.groupby("n")["rate"]
        n_values = np.array(sorted(group["n"].unique()))
        means = by_n.mean().reindex(n_values).to_numpy(dtype=float)
        stds = by_n.std(ddof=0).reindex(n_values).fillna(0.0).to_numpy(dtype=float)
        ax.plot(n_values, means, marker="o", linewidth=2, label=_STRATEGY_LABELS.get(strategy, strategy))
        ax.fill_between(n_values, means - stds, means + stds, alpha=0.2)

    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Expanded states per second")
    ax.set_title("Search throughput vs problem size")
    ax.legend()
    ax.grid(True, alpha=0.7)
    fname = _save(fig, out_dir, "03_throughput_vs_N")
    print(f"Saved throughput chart: {fname}")
    return fname


def plot_and_save(records: List[RunRecord], out_dir: str) -> List[str]:
    """Generate every benchmark chart; return the written file paths."""
    written = plot_steps_and_time(records, out_dir)
    written.append(plot_throughput(records, out_dir))
    return written
