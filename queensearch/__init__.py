"""N-Queens frontier search: immutable boards, DFS and best-first engines."""

from .board import Board, BoardConfigurationError, can_place, new_board
from .ordering import OrderingKey, no_secondary_score, open_cells, ordering_key
from .render import render_board
from .search import Exhausted, SearchOutcome, Solved, run_best_first, run_dfs, solve
from .successors import children
from .utils import conflicts, conflicts_on2, is_valid_solution

__all__ = [
    "Board",
    "BoardConfigurationError",
    "new_board",
    "can_place",
    "children",
    "OrderingKey",
    "ordering_key",
    "no_secondary_score",
    "open_cells",
    "run_dfs",
    "run_best_first",
    "solve",
    "Solved",
    "Exhausted",
    "SearchOutcome",
    "render_board",
    "conflicts",
    "conflicts_on2",
    "is_valid_solution",
]
