"""Successor generation: every valid one-queen extension of a board."""

from __future__ import annotations

from typing import List

from .board import Board, can_place


def children(board: Board) -> List[Board]:
    """Return all boards obtained by adding one non-attacked queen.

    Cells are enumerated column-major (outer loop over columns, inner loop
    over rows, both ascending) and the children keep that order. A stack
    based search pops the last child first, so this order decides which
    solution is discovered.

    Occupied columns and rows are skipped up front; they would fail
    :func:`can_place` anyway, so the output order is unchanged. A complete
    board has every column occupied and yields an empty list.
    """
    size = board.size
    free_rows = [row for row in range(size) if not board.row_used[row]]
    result: List[Board] = []

    for column in range(size):
        if board.column_used[column]:
            continue
        for row in free_rows:
            if can_place(board, column, row):
                result.append(board.place(column, row))

    return result
