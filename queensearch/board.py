"""Immutable board states for the N-Queens frontier search.

A :class:`Board` is a snapshot of a partial placement. Besides the ordered
list of queens it carries four occupancy masks so that a candidate cell can
be validated in O(1):

- ``column_used[c]`` and ``row_used[r]`` (length N),
- ``diag_used[c - r + offset]`` and ``anti_diag_used[c + r]`` (length 2N-1),
  where ``offset = N - 1`` maps negative differences to ``[0..]``.

Boards are never mutated. :meth:`Board.place` copies the parent's masks and
placements, marks one more queen and returns the child, so search engines can
keep many boards in flight without any undo step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Placement = Tuple[int, int]


class BoardConfigurationError(ValueError):
    """Raised when a board or a search is configured with invalid values."""


@dataclass(frozen=True)
class Board:
    """Partial placement of queens on an ``size`` x ``size`` grid.

    Use :func:`new_board` to build the empty root; the masks must always agree
    with ``queens``.
    """

    size: int
    queens: Tuple[Placement, ...]
    column_used: Tuple[bool, ...]
    row_used: Tuple[bool, ...]
    diag_used: Tuple[bool, ...]
    anti_diag_used: Tuple[bool, ...]

    def n(self) -> int:
        return self.size

    def depth(self) -> int:
        return len(self.queens)

    def placements(self) -> Tuple[Placement, ...]:
        return self.queens

    def is_complete(self) -> bool:
        return len(self.queens) == self.size

    def place(self, column: int, row: int) -> "Board":
        """Return a new board with a queen added at ``(column, row)``.

        Raises
        ------
        ValueError
            If the cell is outside the grid or attacked by a placed queen.
        """
        if not can_place(self, column, row):
            raise ValueError(
                f"Cannot place a queen at column={column}, row={row} on this {self.size}x{self.size} board"
            )

        columns = list(self.column_used)
        rows = list(self.row_used)
        diags = list(self.diag_used)
        anti_diags = list(self.anti_diag_used)

        columns[column] = True
        rows[row] = True
        diags[column - row + (self.size - 1)] = True
        anti_diags[column + row] = True

        return Board(
            size=self.size,
            queens=self.queens + ((column, row),),
            column_used=tuple(columns),
            row_used=tuple(rows),
            diag_used=tuple(diags),
            anti_diag_used=tuple(anti_diags),
        )


def new_board(n: int) -> Board:
    """Build the empty board for an ``n`` x ``n`` grid (the search root).

    Raises
    ------
    BoardConfigurationError
        If ``n`` is not a positive integer.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise BoardConfigurationError(f"Board size must be an integer, got {n!r}")
    if n <= 0:
        raise BoardConfigurationError(f"Board size must be >= 1, got {n}")

    return Board(
        size=n,
        queens=(),
        column_used=(False,) * n,
        row_used=(False,) * n,
        diag_used=(False,) * (2 * n - 1),
        anti_diag_used=(False,) * (2 * n - 1),
    )


def can_place(board: Board, column: int, row: int) -> bool:
    """Return True if a queen at ``(column, row)`` attacks no placed queen.

    Pure O(1) lookup on the occupancy masks. Cells outside the grid are
    never placeable.
    """
    size = board.size
    if not (0 <= column < size and 0 <= row < size):
        return False
    if board.column_used[column]:
        return False
    if board.row_used[row]:
        return False
    if board.diag_used[column - row + (size - 1)]:
        return False
    if board.anti_diag_used[column + row]:
        return False
    return True
