"""Ordering keys used by the best-first engine.

The key is the pair ``(queens_placed, secondary_score)`` compared
lexicographically, larger first. ``queens_placed`` is the board depth, so it
dominates and the heap expands the deepest frontier states first. The
secondary score only breaks ties between boards of equal depth and is a
pluggable heuristic:

- :func:`no_secondary_score` (default) returns 0 for every board, giving a
  purely depth-based ordering.
- :func:`open_cells` counts the empty cells that can still take a queen,
  preferring boards that leave the most room.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .board import Board, BoardConfigurationError, can_place

SecondaryScore = Callable[[Board], int]


@dataclass(frozen=True, order=True)
class OrderingKey:
    queens_placed: int
    secondary_score: int = 0


def no_secondary_score(board: Board) -> int:
    return 0


def open_cells(board: Board) -> int:
    """Number of cells on which a queen could still be placed. O(N^2)."""
    size = board.size
    total = 0
    for column in range(size):
        if board.column_used[column]:
            continue
        for row in range(size):
            if can_place(board, column, row):
                total += 1
    return total


SECONDARY_SCORES: Dict[str, SecondaryScore] = {
    "none": no_secondary_score,
    "open_cells": open_cells,
}


def get_secondary_score(name: str) -> SecondaryScore:
    """Look up a secondary heuristic by its configuration name."""
    try:
        return SECONDARY_SCORES[name]
    except KeyError:
        allowed = ", ".join(sorted(SECONDARY_SCORES))
        raise BoardConfigurationError(f"Unknown secondary score '{name}'. Allowed: {allowed}") from None


def ordering_key(board: Board, secondary: SecondaryScore = no_secondary_score) -> OrderingKey:
    return OrderingKey(board.depth(), secondary(board))
