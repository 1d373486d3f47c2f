"""Typed result shapes and statistics helpers for the benchmark pipeline.

Defines ``TypedDict`` structures for per-run records and per-(strategy, N)
summaries, and provides utilities to aggregate them.
"""
from __future__ import annotations

import statistics
from typing import Dict, List, Optional, Tuple, TypedDict


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class RunRecord(TypedDict):
    strategy: str
    n: int
    solved: bool
    timeout: bool
    steps: int
    time: float
    rate: float


class StrategySummary(TypedDict, total=False):
    strategy: str
    n: int
    total_runs: int
    successes: int
    exhausted: int
    timeouts: int
    success_rate: float
    steps: StatsSummary
    time: StatsSummary
    rate: StatsSummary


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps/items expected. Values <= 0 are coerced to 1 to
        avoid division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single ``[label] index/total (pct%) - detail`` line."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, q25, q75 and
    range. On empty input every numeric field is ``None`` and ``count`` is 0
    so CSV and plot generation stay uniform.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    mean_val = statistics.mean(values)
    median_val = statistics.median(values)
    min_val = min(values)
    max_val = max(values)
    range_val = max_val - min_val
    std_val = statistics.pstdev(values) if n > 1 else 0

    q25 = sorted_vals[n // 4] if n >= 4 else min_val
    q75 = sorted_vals[3 * n // 4] if n >= 4 else max_val

    return {
        "count": n,
        "mean": mean_val,
        "median": median_val,
        "std": std_val,
        "min": min_val,
        "max": max_val,
        "q25": q25,
        "q75": q75,
        "range": range_val,
    }


def summarize_runs(records: List[RunRecord]) -> List[StrategySummary]:
    """Group run records by ``(strategy, n)`` and summarize each group.

    Groups keep first-seen order. ``exhausted`` counts runs that ran out of
    states without a timeout; ``timeouts`` counts runs cut by a time limit.
    Step and time statistics cover every run of the group.
    """
    groups: Dict[Tuple[str, int], List[RunRecord]] = {}
    for record in records:
        groups.setdefault((record["strategy"], record["n"]), []).append(record)

    summaries: List[StrategySummary] = []
    for (strategy, n), runs in groups.items():
        successes = sum(1 for r in runs if r["solved"])
        timeouts = sum(1 for r in runs if r["timeout"])
        summaries.append(
            {
                "strategy": strategy,
                "n": n,
                "total_runs": len(runs),
                "successes": successes,
                "exhausted": len(runs) - successes - timeouts,
                "timeouts": timeouts,
                "success_rate": successes / len(runs),
                "steps": compute_detailed_statistics([float(r["steps"]) for r in runs]),
                "time": compute_detailed_statistics([r["time"] for r in runs]),
                "rate": compute_detailed_statistics([r["rate"] for r in runs]),
            }
        )
    return summaries
