"""Command-line interface and high-level pipelines for the N-Queens search.

This module wires together configuration loading, a single search run that
prints the solved board with timing figures, and the benchmark pipeline
(experiments, CSV export, charts). It isolates I/O, argument parsing, and
progress reporting from the core search modules so that the rest of the
codebase remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from typing import List, Optional

from . import settings
from .experiments import run_experiments, run_experiments_parallel
from .reporting import save_raw_runs_to_csv, save_summary_to_csv
from .stats import summarize_runs
from config_manager import ConfigManager
from queensearch.board import BoardConfigurationError, new_board
from queensearch.render import render_board
from queensearch.search import STRATEGIES, Exhausted, Solved, run_dfs, solve
from queensearch.timing import Stopwatch, ThroughputPrinter, silent_reporter
from queensearch.utils import is_valid_solution

_LABELS = {"dfs": "DFS", "best_first": "Best-first"}


# ------------- Utils --------------------------------------------------------

def parse_n_values(n_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize ``--n`` inputs into a sorted list of unique board sizes.

    Accepts repeated flags (``--n 4 --n 8``) and comma-separated lists
    (``--n 4,8``). Returns ``None`` when nothing is provided.
    """
    if not n_args:
        return None
    values: List[int] = []
    for entry in n_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                values.append(int(token))
            except ValueError:
                raise ValueError(f"Board size must be an integer, got '{token}'") from None
    return sorted(set(values)) or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into the ``settings`` module."""
    config_mgr = ConfigManager(config_path)

    search = config_mgr.get_search_settings()
    settings.DEFAULT_N = int(search.get("n", settings.DEFAULT_N))
    settings.DEFAULT_STRATEGY = search.get("strategy", settings.DEFAULT_STRATEGY)
    settings.SECONDARY_SCORE = search.get("secondary_score", settings.SECONDARY_SCORE)
    settings.REPORT_EVERY = int(search.get("report_every", settings.REPORT_EVERY))
    settings.HEAP_CAPACITY_HINT = int(search.get("heap_capacity_hint", settings.HEAP_CAPACITY_HINT))

    timeouts = config_mgr.get_timeout_settings()
    if timeouts:
        settings.set_timeouts(
            dfs_timeout=timeouts.get("dfs_timeout", settings.DFS_TIME_LIMIT),
            best_first_timeout=timeouts.get("best_first_timeout", settings.BEST_FIRST_TIME_LIMIT),
        )

    bench = config_mgr.get_benchmark_settings()
    settings.N_VALUES = [int(n) for n in bench.get("n_values", settings.N_VALUES)]
    settings.STRATEGIES = list(bench.get("strategies", settings.STRATEGIES))
    settings.RUNS_PER_SIZE = int(bench.get("runs_per_size", settings.RUNS_PER_SIZE))
    settings.OUT_DIR = bench.get("output_dir", settings.OUT_DIR)

    if settings.DEFAULT_STRATEGY not in STRATEGIES:
        raise ValueError(
            f"Unknown strategy '{settings.DEFAULT_STRATEGY}' in {config_path}. Allowed: {', '.join(STRATEGIES)}"
        )
    return config_mgr


# ------------- Pipelines ----------------------------------------------------

def run_single(
    n: int,
    strategy: str,
    secondary: str,
    time_limit: Optional[float],
    report_every: int,
    show_board: bool = True,
):
    """Solve one board and print the result with timing and throughput."""
    label = _LABELS.get(strategy, strategy)
    print(f"Solving N={n} with {label} search...")
    clock = Stopwatch()
    outcome = solve(
        n,
        strategy,
        secondary=secondary,
        capacity_hint=settings.HEAP_CAPACITY_HINT,
        clock=clock,
        reporter=ThroughputPrinter(label),
        report_every=report_every,
        time_limit=time_limit,
    )
    elapsed_ms = clock.elapsed_ms()
    rate = (outcome.steps_taken / elapsed_ms) * 1000 if elapsed_ms > 0 else 0.0

    if isinstance(outcome, Solved):
        if show_board:
            print(render_board(outcome.board))
        print(f"{label} Iterations in {elapsed_ms:.3f}ms: {outcome.steps_taken}\nRate: {rate:.1f}/s")
    elif outcome.timed_out:
        print(f"{label} search timed out after {elapsed_ms:.3f}ms and {outcome.steps_taken} steps (N={n}).")
    else:
        print(f"No solution exists for N={n}: search space exhausted after {outcome.steps_taken} steps.")
    return outcome


def run_benchmark(
    n_values: List[int],
    strategies: List[str],
    runs: int,
    secondary: str,
    out_dir: str,
    parallel: bool = False,
    validate: bool = False,
    plots: bool = True,
) -> None:
    """Run the benchmark, then export CSV tables and (optionally) charts."""
    print(f"Benchmark: N={n_values}, strategies={strategies}, runs={runs}")
    runner = run_experiments_parallel if parallel else run_experiments
    records = runner(
        n_values,
        strategies=strategies,
        runs=runs,
        secondary=secondary,
        progress_label="Benchmark",
        validate=validate,
    )
    summaries = summarize_runs(records)
    save_raw_runs_to_csv(records, out_dir)
    save_summary_to_csv(summaries, out_dir)

    if plots:
        # Deferred so the solve path does not pay for the plotting stack.
        from .plots import plot_and_save

        plot_and_save(records, out_dir)

    for entry in summaries:
        steps_mean = entry["steps"].get("mean")
        time_mean = entry["time"].get("mean")
        print(
            f"  {_LABELS.get(entry['strategy'], entry['strategy'])} N={entry['n']}: "
            f"solved {entry['successes']}/{entry['total_runs']}, "
            f"steps={steps_mean:.0f}, time={time_mean:.4f}s"
        )


def run_quick_regression_tests() -> None:
    """Lightweight end-to-end checks for both engines and CSV export."""
    print("Running quick regression tests...")

    for strategy in STRATEGIES:
        for n in (1, 4, 5, 6, 8):
            outcome = solve(n, strategy, reporter=silent_reporter)
            if not isinstance(outcome, Solved):
                raise AssertionError(f"{strategy} did not solve N={n}.")
            if not is_valid_solution(outcome.board.placements(), n):
                raise AssertionError(f"{strategy} produced an invalid board for N={n}: {outcome.board.placements()}")
        for n in (2, 3):
            outcome = solve(n, strategy, reporter=silent_reporter)
            if not isinstance(outcome, Exhausted) or outcome.timed_out:
                raise AssertionError(f"{strategy} should report exhaustion for N={n}.")
        print(f"  {_LABELS[strategy]}: ok")

    base = run_dfs(new_board(1), 1, reporter=silent_reporter)
    if not isinstance(base, Solved) or base.steps_taken != 1:
        raise AssertionError(f"N=1 should be solved in exactly one step, got {base}.")

    records = run_experiments([4, 5], runs=1, validate=True)
    with tempfile.TemporaryDirectory() as tmpdir:
        raw_path = Path(save_raw_runs_to_csv(records, tmpdir))
        summary_path = Path(save_summary_to_csv(summarize_runs(records), tmpdir))
        for path in (raw_path, summary_path):
            if not path.exists() or path.stat().st_size == 0:
                raise AssertionError(f"CSV was not generated during quick tests: {path}")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(description="Solve N-Queens with DFS or best-first frontier search.")
    parser.add_argument(
        "--n",
        "-n",
        action="append",
        help="Board size; with --benchmark accepts comma-separated values or multiple flags.",
    )
    parser.add_argument(
        "--strategy",
        "-s",
        choices=list(STRATEGIES) + ["all"],
        help="Search strategy (default from config). 'all' is only valid with --benchmark.",
    )
    parser.add_argument(
        "--secondary",
        choices=["none", "open_cells"],
        help="Best-first tie-breaking heuristic (default from config).",
    )
    parser.add_argument("--time-limit", type=float, help="Time limit in seconds for each search.")
    parser.add_argument("--report-every", type=int, help="Print a throughput line every K expanded states.")
    parser.add_argument("--no-board", action="store_true", help="Do not print the solved board.")
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--benchmark", action="store_true", help="Run the benchmark pipeline instead of a single search.")
    parser.add_argument("--parallel", action="store_true", help="Run benchmark searches in a process pool.")
    parser.add_argument("--runs", type=int, help="Benchmark repetitions per (strategy, N).")
    parser.add_argument("--out-dir", help="Benchmark output directory.")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation in the benchmark.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests and exit.")
    parser.add_argument("--validate", action="store_true", help="Validate every solved board in the benchmark.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and dispatch to the chosen pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        apply_configuration(args.config)
        n_values = parse_n_values(args.n)
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    secondary = args.secondary or settings.SECONDARY_SCORE
    if args.report_every is not None:
        settings.REPORT_EVERY = args.report_every

    try:
        if args.benchmark:
            if args.strategy in (None, "all"):
                strategies = settings.STRATEGIES
            else:
                strategies = [args.strategy]
            if args.time_limit is not None:
                settings.set_timeouts(dfs_timeout=args.time_limit, best_first_timeout=args.time_limit)
            run_benchmark(
                n_values or settings.N_VALUES,
                strategies,
                args.runs if args.runs is not None else settings.RUNS_PER_SIZE,
                secondary,
                args.out_dir or settings.OUT_DIR,
                parallel=args.parallel,
                validate=args.validate,
                plots=not args.no_plots,
            )
        else:
            if args.strategy == "all":
                raise ValueError("--strategy all requires --benchmark")
            if n_values and len(n_values) > 1:
                raise ValueError("A single search takes exactly one --n value; use --benchmark for several")
            strategy = args.strategy or settings.DEFAULT_STRATEGY
            n = n_values[0] if n_values else settings.DEFAULT_N
            time_limit = args.time_limit if args.time_limit is not None else settings.time_limit_for(strategy)
            run_single(n, strategy, secondary, time_limit, settings.REPORT_EVERY, show_board=not args.no_board)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except (BoardConfigurationError, ValueError) as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc
