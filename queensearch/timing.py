"""Clock capability and throughput reporting for long searches.

Engines never read the wall clock directly: they receive an object with an
``elapsed()`` method returning seconds since it was started. Production code
uses :class:`Stopwatch` (``perf_counter`` based); tests inject
:class:`NullClock` or a deterministic fake.
"""

from __future__ import annotations

from time import perf_counter
from typing import Callable, Protocol

ThroughputReporter = Callable[[int, float], None]


class Clock(Protocol):
    def elapsed(self) -> float:
        ...


class Stopwatch:
    """Wall-clock timer started at construction."""

    def __init__(self) -> None:
        self._start = perf_counter()

    def elapsed(self) -> float:
        return perf_counter() - self._start

    def elapsed_ms(self) -> float:
        return self.elapsed() * 1000.0


class NullClock:
    """Clock that never advances; throughput is then reported as 0."""

    def elapsed(self) -> float:
        return 0.0


class ThroughputPrinter:
    """Stdout reporter printing ``[label] <checks> checks; Rate: <r>/s`` lines.

    Parameters
    ----------
    label : str
        Short prefix identifying the engine (e.g. ``"DFS"``).
    """

    def __init__(self, label: str = "search"):
        self.label = label

    def __call__(self, checks: int, rate: float) -> None:
        print(f"[{self.label}] {checks} checks; Rate: {rate:.1f}/s")


def silent_reporter(checks: int, rate: float) -> None:
    """Reporter that discards every observation."""
    return None
