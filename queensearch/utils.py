"""Utility helpers for checking queen placements.

Placements are ``(column, row)`` pairs as returned by
:meth:`queensearch.board.Board.placements`. These checks recompute conflicts
from scratch and are meant for validation and tests, not for the search loop
(which relies on the board's incremental masks).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence, Tuple


def _pairs(counter: Counter) -> int:
    total = 0
    for count in counter.values():
        if count > 1:
            total += count * (count - 1) // 2
    return total


def conflicts(placements: Iterable[Tuple[int, int]]) -> int:
    """Count attacking queen pairs in O(N).

    Two distinct cells share at most one line, so every attacking pair is
    counted exactly once.
    """
    columns: Counter = Counter()
    rows: Counter = Counter()
    diag: Counter = Counter()
    anti_diag: Counter = Counter()

    for column, row in placements:
        columns[column] += 1
        rows[row] += 1
        diag[column - row] += 1
        anti_diag[column + row] += 1

    return _pairs(columns) + _pairs(rows) + _pairs(diag) + _pairs(anti_diag)


def conflicts_on2(placements: Sequence[Tuple[int, int]]) -> int:
    """Count attacking queen pairs in O(N^2); reference for ``conflicts``."""
    count = 0
    for i in range(len(placements)):
        c1, r1 = placements[i]
        for j in range(i + 1, len(placements)):
            c2, r2 = placements[j]
            if c1 == c2 or r1 == r2 or abs(c1 - c2) == abs(r1 - r2):
                count += 1
    return count


def is_valid_solution(placements: Sequence[Tuple[int, int]], size: int) -> bool:
    """Return True if ``placements`` is a complete N-Queens solution.

    Contract
    - ``size`` queens, all cells inside the ``size`` x ``size`` grid
    - no two queens share a column, row, diagonal or anti-diagonal
    """
    if size <= 0 or len(placements) != size:
        return False
    for column, row in placements:
        if not (0 <= column < size and 0 <= row < size):
            return False
    return conflicts(placements) == 0


def to_row_vector(placements: Iterable[Tuple[int, int]], size: int) -> List[int]:
    """Convert placements to the ``vector[column] = row`` form (-1 if empty)."""
    vector = [-1] * size
    for column, row in placements:
        vector[column] = row
    return vector
