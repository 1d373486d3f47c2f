"""CSV export utilities for benchmark outputs (summaries and raw runs).

Raw per-run records go through a pandas ``DataFrame`` so they can be reused
for plotting; the per-(strategy, N) summary is written row by row with the
``csv`` module using flat snake_case column names.
"""
from __future__ import annotations

import csv
import os
from typing import List

import pandas as pd

from . import settings
from .stats import RunRecord, StrategySummary

RAW_COLUMNS = ["strategy", "n", "solved", "timeout", "steps", "time", "rate"]


def filename_suffix() -> str:
    """Return ``_<RUN_TAG>_<RUN_ID>`` according to settings (or an empty string)."""
    parts: List[str] = []
    run_tag = getattr(settings, "RUN_TAG", None)
    if run_tag:
        parts.append(str(run_tag))
    if getattr(settings, "DATE_IN_FILENAMES", False):
        run_id = getattr(settings, "RUN_ID", None)
        if run_id:
            parts.append(str(run_id))
    return ("_" + "_".join(parts)) if parts else ""


def records_to_frame(records: List[RunRecord]) -> pd.DataFrame:
    """Convert run records to a DataFrame with a fixed column order."""
    return pd.DataFrame.from_records(list(records), columns=RAW_COLUMNS)


def save_raw_runs_to_csv(records: List[RunRecord], out_dir: str) -> str:
    """Write one CSV row per search run and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"raw_runs{filename_suffix()}.csv")
    frame = records_to_frame(records)
    frame["solved"] = frame["solved"].astype(int)
    frame["timeout"] = frame["timeout"].astype(int)
    frame.to_csv(filename, index=False)
    print(f"Saved raw runs: {filename}")
    return filename


def save_summary_to_csv(summaries: List[StrategySummary], out_dir: str) -> str:
    """Write compact per-(strategy, N) aggregate metrics and return the file path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"summary{filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "strategy",
            "n",
            "total_runs",
            "successes",
            "exhausted",
            "timeouts",
            "success_rate",
            "steps_mean",
            "steps_min",
            "steps_max",
            "time_mean",
            "time_median",
            "time_std",
            "rate_mean",
        ])
        for entry in summaries:
            steps = entry.get("steps", {})
            time_stats = entry.get("time", {})
            rate = entry.get("rate", {})
            writer.writerow([
                entry["strategy"],
                entry["n"],
                entry["total_runs"],
                entry["successes"],
                entry["exhausted"],
                entry["timeouts"],
                entry["success_rate"],
                steps.get("mean"),
                steps.get("min"),
                steps.get("max"),
                time_stats.get("mean"),
                time_stats.get("median"),
                time_stats.get("std"),
                rate.get("mean"),
            ])

    print(f"Saved summary: {filename}")
    return filename
