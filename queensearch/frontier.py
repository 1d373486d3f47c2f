"""Frontier collections shared by the search engines.

Both collections expose the same small interface (``push``, ``pop``,
``__len__``) so an engine differs from another only by the frontier it
builds:

- :class:`StackFrontier` is a plain list used last-in-first-out.
- :class:`HeapFrontier` is a ``heapq`` binary heap popping the entry with the
  largest key first. Equal keys pop the most recently pushed entry first,
  which keeps the traversal deterministic.

``pop`` on an empty frontier raises ``IndexError``; engines check ``len``
first and report exhaustion instead.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Any, Callable, List

from .board import Board, BoardConfigurationError


class StackFrontier:
    """LIFO frontier backed by a list."""

    def __init__(self) -> None:
        self._items: List[Board] = []

    def push(self, board: Board) -> None:
        self._items.append(board)

    def pop(self) -> Board:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _HeapEntry:
    """Heap slot; ``__lt__`` is inverted so ``heapq`` behaves as a max-heap."""

    key: Any
    sequence: int
    board: Board

    def __lt__(self, other: "_HeapEntry") -> bool:
        if self.key != other.key:
            return self.key > other.key
        return self.sequence > other.sequence


class HeapFrontier:
    """Max-first priority frontier.

    Parameters
    ----------
    key : callable
        Maps a board to a comparable key; larger keys are popped first.
    capacity_hint : int, default 1000
        Expected peak size. Python lists grow on demand, so this is only
        recorded for reporting; the heap is never bounded by it.
    """

    def __init__(self, key: Callable[[Board], Any], capacity_hint: int = 1000) -> None:
        if capacity_hint <= 0:
            raise BoardConfigurationError(f"capacity_hint must be >= 1, got {capacity_hint}")
        self._key = key
        self.capacity_hint = capacity_hint
        self._heap: List[_HeapEntry] = []
        self._counter = 0

    def push(self, board: Board) -> None:
        self._counter += 1
        heapq.heappush(self._heap, _HeapEntry(self._key(board), self._counter, board))

    def pop(self) -> Board:
        return heapq.heappop(self._heap).board

    def __len__(self) -> int:
        return len(self._heap)
