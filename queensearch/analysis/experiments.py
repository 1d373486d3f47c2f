"""Benchmark runners comparing DFS and best-first search (sequential and parallel).

These routines execute repeatable batches of searches over a set of board
sizes and return flat :class:`~queensearch.analysis.stats.RunRecord` lists
suitable for CSV export and plotting. Validation hooks optionally check that
every solved board is a correct N-Queens solution.
"""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from time import perf_counter
from typing import List, Optional, Tuple

from . import settings
from .stats import ProgressPrinter, RunRecord
from queensearch.search import STRATEGIES, Exhausted, Solved, solve
from queensearch.timing import Stopwatch, ThroughputPrinter
from queensearch.utils import is_valid_solution

_LABELS = {"dfs": "DFS", "best_first": "Best-first"}


def run_single_search(params: Tuple[str, int, Optional[float], str, bool]) -> RunRecord:
    """Worker wrapper running one search and shaping it as a record.

    ``params`` is ``(strategy, n, time_limit, secondary, validate)`` so the
    function can be mapped directly over a process pool.
    """
    strategy, n, time_limit, secondary, validate = params
    clock = Stopwatch()
    start = perf_counter()
    outcome = solve(
        n,
        strategy,
        secondary=secondary,
        capacity_hint=settings.HEAP_CAPACITY_HINT,
        clock=clock,
        reporter=ThroughputPrinter(f"{_LABELS.get(strategy, strategy)} N={n}"),
        report_every=settings.REPORT_EVERY,
        time_limit=time_limit,
    )
    elapsed = perf_counter() - start

    if validate and isinstance(outcome, Solved):
        if not is_valid_solution(outcome.board.placements(), n):
            raise AssertionError(
                f"Invalid {strategy} solution produced for N={n}: {outcome.board.placements()}"
            )

    return {
        "strategy": strategy,
        "n": n,
        "solved": outcome.solved,
        "timeout": isinstance(outcome, Exhausted) and outcome.timed_out,
        "steps": outcome.steps_taken,
        "time": elapsed,
        "rate": outcome.steps_taken / elapsed if elapsed > 0 else 0.0,
    }


def _check_strategies(strategies: List[str]) -> None:
    unknown = [s for s in strategies if s not in STRATEGIES]
    if unknown:
        raise ValueError(
            "Unknown strategy(ies): " + ", ".join(unknown) + ". Available: " + ", ".join(STRATEGIES)
        )


def _build_tasks(
    N_values: List[int],
    strategies: List[str],
    runs: int,
    secondary: str,
    validate: bool,
) -> List[Tuple[str, int, Optional[float], str, bool]]:
    tasks = []
    for N in N_values:
        for strategy in strategies:
            for _ in range(runs):
                tasks.append((strategy, N, settings.time_limit_for(strategy), secondary, validate))
    return tasks


def run_experiments(
    N_values: List[int],
    strategies: Optional[List[str]] = None,
    runs: int = 1,
    secondary: str = "none",
    progress_label: Optional[str] = None,
    validate: bool = False,
) -> List[RunRecord]:
    """Run every ``(N, strategy)`` combination ``runs`` times, sequentially.

    Searches are deterministic, so repeats only vary in timing. Raises
    ``ValueError`` for an unknown strategy before any search runs.
    """
    strategies = list(strategies or settings.STRATEGIES)
    _check_strategies(strategies)
    tasks = _build_tasks(N_values, strategies, runs, secondary, validate)
    progress = ProgressPrinter(len(tasks), progress_label) if progress_label else None

    records: List[RunRecord] = []
    for index, task in enumerate(tasks, start=1):
        if progress:
            progress.update(index, f"{task[0]} N={task[1]}")
        records.append(run_single_search(task))
    return records


def run_experiments_parallel(
    N_values: List[int],
    strategies: Optional[List[str]] = None,
    runs: int = 1,
    secondary: str = "none",
    progress_label: Optional[str] = None,
    validate: bool = False,
    max_workers: Optional[int] = None,
) -> List[RunRecord]:
    """Same as :func:`run_experiments` with independent searches in a process pool.

    Each worker owns its search entirely; results come back in task order.
    """
    strategies = list(strategies or settings.STRATEGIES)
    _check_strategies(strategies)
    tasks = _build_tasks(N_values, strategies, runs, secondary, validate)
    progress = ProgressPrinter(len(tasks), progress_label) if progress_label else None

    records: List[RunRecord] = []
    with ProcessPoolExecutor(max_workers=max_workers or settings.NUM_PROCESSES) as executor:
        for index, record in enumerate(executor.map(run_single_search, tasks), start=1):
            if progress:
                progress.update(index, f"{record['strategy']} N={record['n']}")
            records.append(record)
    return records
