"""Global settings and timeouts for the N-Queens search pipeline.

This module centralizes tunable constants used by the command line and the
benchmark code. Values can be overridden at runtime via the configuration
loader in `queensearch.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

import multiprocessing
from typing import List, Optional
from datetime import datetime

# Board size solved by the plain command line run
DEFAULT_N: int = 14

# Strategy used by the plain command line run: 'dfs' | 'best_first'
DEFAULT_STRATEGY: str = "dfs"

# Tie-breaking heuristic for best-first search: 'none' | 'open_cells'
SECONDARY_SCORE: str = "none"

# Throughput line printed every REPORT_EVERY expanded states
REPORT_EVERY: int = 500_000

# Initial heap size expected by best-first search (hint only)
HEAP_CAPACITY_HINT: int = 1000

# Board sizes to benchmark (in ascending order)
N_VALUES: List[int] = [4, 5, 6, 8, 10, 12]

# Strategies compared by the benchmark
STRATEGIES: List[str] = ["dfs", "best_first"]

# Repetitions per (strategy, N); searches are deterministic, repeats only smooth timings
RUNS_PER_SIZE: int = 3

# Time limits in seconds (None = no limit)
DFS_TIME_LIMIT: Optional[float] = 120.0
BEST_FIRST_TIME_LIMIT: Optional[float] = 120.0

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_search"

# Number of worker processes to use (leave one core for the OS)
NUM_PROCESSES: int = max(1, multiprocessing.cpu_count() - 1)

# Output naming policy --------------------------------------------------------

# When True, results and plots will include a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = True

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run label appended to filenames to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def time_limit_for(strategy: str) -> Optional[float]:
    """Return the configured time limit for ``strategy``."""
    if strategy == "best_first":
        return BEST_FIRST_TIME_LIMIT
    return DFS_TIME_LIMIT


def set_timeouts(
        dfs_timeout: Optional[float] = 120.0,
        best_first_timeout: Optional[float] = 120.0,
) -> None:
        """Configure time limits for both search strategies.

        Parameters
        - dfs_timeout: DFS limit in seconds (None disables the limit).
        - best_first_timeout: best-first limit in seconds (None disables).

        Side effects
        - Updates module-level globals and prints a concise summary to stdout to
            make the active limits explicit at run start.
        """
        global DFS_TIME_LIMIT, BEST_FIRST_TIME_LIMIT
        DFS_TIME_LIMIT = dfs_timeout
        BEST_FIRST_TIME_LIMIT = best_first_timeout

        print("Timeout settings configured:")
        print(f"   - DFS: {DFS_TIME_LIMIT}s" if DFS_TIME_LIMIT else "   - DFS: unlimited")
        print(
                f"   - Best-first: {BEST_FIRST_TIME_LIMIT}s"
                if BEST_FIRST_TIME_LIMIT
                else "   - Best-first: unlimited"
        )
