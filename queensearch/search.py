"""Frontier search engines for the N-Queens problem.

This module provides two entry points that traverse the implicit tree of
partial placements rooted at a :class:`~queensearch.board.Board`:

- run_dfs(board, target_depth=None, ...): depth-first backtracking with an
    explicit LIFO stack. The last generated child is explored next.
- run_best_first(board, target_depth=None, ...): best-first search with a
    max-heap ordered by :class:`~queensearch.ordering.OrderingKey`
    ``(depth, secondary_score)``.

Both share one iterative loop; they differ only in the frontier they build.
Neither needs undo logic because boards are immutable: a popped board's
children are fresh copies and siblings already on the frontier are untouched.

Contract (public API)
---------------------
- Input: a board (usually ``new_board(n)``) and ``target_depth`` in
    ``board.depth()..board.n()`` (defaults to ``board.n()``).
- Output: a :data:`SearchOutcome`, either
    - ``Solved(board, steps_taken)``: the first board of target depth popped
      from the frontier, or
    - ``Exhausted(steps_taken, timed_out)``: the frontier ran empty (no
      solution exists) or the optional ``time_limit`` was exceeded.
- Steps semantics: ``steps_taken`` counts expanded states, i.e. popped states
    whose depth is below the target and whose children were generated. The
    popped solution itself is not counted, so ``N = 1`` takes exactly one step.
- Determinism: no randomness; equal inputs give equal outcomes.
- Errors: invalid configuration raises
    :class:`~queensearch.board.BoardConfigurationError` before any search work.
    Exhaustion is an outcome, never an exception.

Progress reporting
------------------
Every ``report_every`` steps the engine calls ``reporter(steps, rate)`` where
``rate = steps / clock.elapsed()`` (0 when no time has elapsed). The clock and
reporter are injected so tests can replace them with deterministic fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .board import Board, BoardConfigurationError, new_board
from .frontier import HeapFrontier, StackFrontier
from .ordering import SecondaryScore, get_secondary_score, no_secondary_score, ordering_key
from .successors import children
from .timing import Clock, Stopwatch, ThroughputPrinter, ThroughputReporter

DEFAULT_REPORT_EVERY = 500_000
DEFAULT_CAPACITY_HINT = 1000

STRATEGIES = ("dfs", "best_first")


@dataclass(frozen=True)
class Solved:
    board: Board
    steps_taken: int

    @property
    def solved(self) -> bool:
        return True


@dataclass(frozen=True)
class Exhausted:
    """No target-depth board was reached.

    ``timed_out`` is True when the search was cut short by ``time_limit``
    rather than by running out of states.
    """

    steps_taken: int
    timed_out: bool = False

    @property
    def solved(self) -> bool:
        return False


SearchOutcome = Union[Solved, Exhausted]


def _resolve_target(board: Board, target_depth: Optional[int]) -> int:
    if target_depth is None:
        return board.n()
    if isinstance(target_depth, bool) or not isinstance(target_depth, int):
        raise BoardConfigurationError(f"target_depth must be an integer, got {target_depth!r}")
    if target_depth > board.n():
        raise BoardConfigurationError(
            f"target_depth={target_depth} exceeds the board size N={board.n()}"
        )
    if target_depth < board.depth():
        raise BoardConfigurationError(
            f"target_depth={target_depth} is below the starting depth {board.depth()}"
        )
    return target_depth


def _check_options(report_every: int, time_limit: Optional[float]) -> None:
    if report_every < 1:
        raise BoardConfigurationError(f"report_every must be >= 1, got {report_every}")
    if time_limit is not None and time_limit < 0:
        raise BoardConfigurationError(f"time_limit must be >= 0 seconds, got {time_limit}")


def _explore(
    frontier,
    board: Board,
    target_depth: int,
    clock: Clock,
    reporter: ThroughputReporter,
    report_every: int,
    time_limit: Optional[float],
) -> SearchOutcome:
    """Shared iterative loop: pop, test for target depth, expand, push."""
    frontier.push(board)
    steps = 0

    while len(frontier) > 0:
        if time_limit is not None and clock.elapsed() > time_limit:
            return Exhausted(steps, timed_out=True)

        current = frontier.pop()
        if current.depth() == target_depth:
            return Solved(current, steps)

        steps += 1
        if steps % report_every == 0:
            elapsed = clock.elapsed()
            reporter(steps, steps / elapsed if elapsed > 0 else 0.0)

        for child in children(current):
            frontier.push(child)

    return Exhausted(steps)


def run_dfs(
    board: Board,
    target_depth: Optional[int] = None,
    *,
    clock: Optional[Clock] = None,
    reporter: Optional[ThroughputReporter] = None,
    report_every: int = DEFAULT_REPORT_EVERY,
    time_limit: Optional[float] = None,
) -> SearchOutcome:
    """Depth-first search with an explicit stack.

    Parameters
    ----------
    board : Board
        Starting state, usually ``new_board(n)``.
    target_depth : int | None
        Number of queens to reach; defaults to ``board.n()``.
    clock : Clock | None
        Elapsed-time source for throughput reports and ``time_limit``.
        A fresh :class:`Stopwatch` when omitted.
    reporter : callable | None
        ``reporter(steps, rate)`` called every ``report_every`` steps.
        Prints to stdout when omitted.
    report_every : int, default 500_000
        Reporting interval in steps.
    time_limit : float | None
        Optional limit in seconds on ``clock``; exceeding it yields
        ``Exhausted(steps, timed_out=True)``.

    Returns
    -------
    SearchOutcome
        ``Solved`` or ``Exhausted``; see the module contract.

    Ordering
    --------
    Children are pushed in generation order (column-major), so the child
    with the largest ``(column, row)`` is explored first.
    """
    target = _resolve_target(board, target_depth)
    _check_options(report_every, time_limit)
    return _explore(
        StackFrontier(),
        board,
        target,
        clock if clock is not None else Stopwatch(),
        reporter if reporter is not None else ThroughputPrinter("DFS"),
        report_every,
        time_limit,
    )


def run_best_first(
    board: Board,
    target_depth: Optional[int] = None,
    *,
    secondary: SecondaryScore = no_secondary_score,
    capacity_hint: int = DEFAULT_CAPACITY_HINT,
    clock: Optional[Clock] = None,
    reporter: Optional[ThroughputReporter] = None,
    report_every: int = DEFAULT_REPORT_EVERY,
    time_limit: Optional[float] = None,
) -> SearchOutcome:
    """Best-first search over a max-heap of ordering keys.

    The key is ``(depth, secondary(board))``. Because depth dominates and
    never decreases along a path, this is a greedy deepest-first expansion
    across the whole frontier; ``secondary`` only breaks ties between boards
    of equal depth, and remaining ties go to the most recently pushed board.

    Parameters
    ----------
    secondary : callable, default no_secondary_score
        Tie-breaking heuristic, see :mod:`queensearch.ordering`.
    capacity_hint : int, default 1000
        Expected heap size; a hint only, the heap is unbounded.

    The remaining parameters and the return value are as in :func:`run_dfs`.
    """
    target = _resolve_target(board, target_depth)
    _check_options(report_every, time_limit)
    frontier = HeapFrontier(lambda b: ordering_key(b, secondary), capacity_hint=capacity_hint)
    return _explore(
        frontier,
        board,
        target,
        clock if clock is not None else Stopwatch(),
        reporter if reporter is not None else ThroughputPrinter("Best-first"),
        report_every,
        time_limit,
    )


def solve(
    n: int,
    strategy: str = "dfs",
    *,
    secondary: str = "none",
    capacity_hint: int = DEFAULT_CAPACITY_HINT,
    clock: Optional[Clock] = None,
    reporter: Optional[ThroughputReporter] = None,
    report_every: int = DEFAULT_REPORT_EVERY,
    time_limit: Optional[float] = None,
) -> SearchOutcome:
    """Solve the N-Queens problem from the empty board with a named strategy.

    ``strategy`` is ``"dfs"`` or ``"best_first"``; ``secondary`` names a
    heuristic from :data:`queensearch.ordering.SECONDARY_SCORES` and only
    affects best-first search.
    """
    if strategy not in STRATEGIES:
        raise BoardConfigurationError(
            f"Unknown strategy '{strategy}'. Allowed: {', '.join(STRATEGIES)}"
        )
    secondary_fn = get_secondary_score(secondary)
    board = new_board(n)

    if strategy == "dfs":
        return run_dfs(
            board,
            n,
            clock=clock,
            reporter=reporter,
            report_every=report_every,
            time_limit=time_limit,
        )
    return run_best_first(
        board,
        n,
        secondary=secondary_fn,
        capacity_hint=capacity_hint,
        clock=clock,
        reporter=reporter,
        report_every=report_every,
        time_limit=time_limit,
    )
