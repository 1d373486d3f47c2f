"""ASCII rendering of boards.

Layout::

    +---+---+
    | Q |   |
    +---+---+
    |   |   |
    +---+---+

Line ``r`` shows row ``r``; cells run left to right over columns ``0..N-1``.
"""

from __future__ import annotations

from typing import List

from .board import Board


def render_board(board: Board) -> str:
    size = board.n()
    occupied = set(board.placements())
    separator = "+---" * size + "+"

    lines: List[str] = [separator]
    for row in range(size):
        cells = ["| Q " if (column, row) in occupied else "|   " for column in range(size)]
        lines.append("".join(cells) + "|")
        lines.append(separator)
    return "\n".join(lines) + "\n"
