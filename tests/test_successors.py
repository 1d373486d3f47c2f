"""Unit tests for successor generation order and terminal closure."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch.board import new_board
from queensearch.search import Solved, run_dfs
from queensearch.successors import children
from queensearch.timing import silent_reporter


class ChildrenTests(unittest.TestCase):

    def test_root_children_are_column_major(self):
        kids = children(new_board(3))
        self.assertEqual(
            [k.placements()[-1] for k in kids],
            [(c, r) for c in range(3) for r in range(3)],
        )
        self.assertTrue(all(k.depth() == 1 for k in kids))

    def test_only_valid_cells_are_generated(self):
        kids = children(new_board(4).place(0, 0))
        self.assertEqual(
            [k.placements()[-1] for k in kids],
            [(1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2)],
        )
        for kid in kids:
            self.assertEqual(kid.placements()[0], (0, 0))
            self.assertEqual(kid.depth(), 2)

    def test_dead_end_has_no_children(self):
        self.assertEqual(children(new_board(2).place(0, 0)), [])

    def test_complete_board_is_terminal(self):
        for n in (1, 4, 6):
            with self.subTest(n=n):
                outcome = run_dfs(new_board(n), n, reporter=silent_reporter)
                self.assertIsInstance(outcome, Solved)
                self.assertEqual(outcome.board.depth(), outcome.board.n())
                self.assertEqual(children(outcome.board), [])

    def test_parent_untouched_by_generation(self):
        parent = new_board(4).place(1, 0)
        snapshot = (parent.placements(), parent.column_used, parent.row_used)
        children(parent)
        self.assertEqual((parent.placements(), parent.column_used, parent.row_used), snapshot)


if __name__ == "__main__":
    unittest.main()
