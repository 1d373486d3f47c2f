"""
Benchmark and orchestration package for the N-Queens search engines.

This package contains:
- settings: global knobs and timeouts
- stats: typed run records, summaries and aggregation helpers
- experiments: runners for DFS/best-first with result shaping
- reporting: CSV exports of raw runs and summaries
- plots: visualization utilities
- cli: top-level pipeline entry points and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    RunRecord,
    StrategySummary,
    compute_detailed_statistics,
    summarize_runs,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "RunRecord",
    "StrategySummary",
    # utils
    "compute_detailed_statistics",
    "summarize_runs",
    "ProgressPrinter",
    # settings module
    "settings",
]
