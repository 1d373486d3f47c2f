"""Unit tests for immutable boards and the O(1) placement check."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch.board import BoardConfigurationError, can_place, new_board


class NewBoardTests(unittest.TestCase):
    """The empty root board and its size validation."""

    def test_empty_board_shape(self):
        board = new_board(5)
        self.assertEqual(board.n(), 5)
        self.assertEqual(board.depth(), 0)
        self.assertEqual(board.placements(), ())
        self.assertEqual(len(board.column_used), 5)
        self.assertEqual(len(board.row_used), 5)
        self.assertEqual(len(board.diag_used), 9)
        self.assertEqual(len(board.anti_diag_used), 9)
        self.assertFalse(any(board.column_used + board.row_used + board.diag_used + board.anti_diag_used))

    def test_invalid_sizes_fail_fast(self):
        for bad in (0, -3, "4", 2.0, True, None):
            with self.subTest(bad=bad):
                with self.assertRaises(BoardConfigurationError):
                    new_board(bad)

    def test_configuration_error_is_a_value_error(self):
        self.assertTrue(issubclass(BoardConfigurationError, ValueError))


class PlaceTests(unittest.TestCase):
    """Copy-on-extend placement."""

    def test_place_marks_every_line(self):
        board = new_board(4).place(2, 1)
        self.assertEqual(board.placements(), ((2, 1),))
        self.assertTrue(board.column_used[2])
        self.assertTrue(board.row_used[1])
        self.assertTrue(board.diag_used[2 - 1 + 3])
        self.assertTrue(board.anti_diag_used[3])
        self.assertEqual(sum(board.column_used), 1)
        self.assertEqual(sum(board.diag_used), 1)

    def test_parent_is_not_mutated(self):
        root = new_board(4)
        child = root.place(0, 1)
        grandchild = child.place(2, 0)
        self.assertEqual(root.depth(), 0)
        self.assertFalse(any(root.column_used))
        self.assertEqual(child.placements(), ((0, 1),))
        self.assertEqual(grandchild.placements(), ((0, 1), (2, 0)))
        self.assertFalse(child.column_used[2])

    def test_placement_order_is_preserved(self):
        board = new_board(4).place(3, 2).place(0, 1)
        self.assertEqual(board.placements(), ((3, 2), (0, 1)))
        self.assertEqual(board.depth(), 2)

    def test_place_rejects_attacked_cells(self):
        board = new_board(4).place(1, 1)
        for cell in [(1, 3), (3, 1), (2, 2), (0, 2), (1, 1)]:
            with self.subTest(cell=cell):
                with self.assertRaises(ValueError):
                    board.place(*cell)

    def test_place_rejects_out_of_range(self):
        with self.assertRaises(ValueError):
            new_board(3).place(3, 0)

    def test_full_board_is_complete(self):
        board = new_board(4).place(0, 1).place(1, 3).place(2, 0).place(3, 2)
        self.assertTrue(board.is_complete())
        self.assertEqual(board.depth(), board.n())


class CanPlaceTests(unittest.TestCase):
    """Each of the four constraints blocks a cell on its own."""

    def setUp(self):
        self.board = new_board(5).place(2, 2)

    def test_column_row_and_diagonals(self):
        self.assertFalse(can_place(self.board, 2, 0))  # column
        self.assertFalse(can_place(self.board, 0, 2))  # row
        self.assertFalse(can_place(self.board, 4, 4))  # diagonal
        self.assertFalse(can_place(self.board, 0, 4))  # anti-diagonal
        self.assertTrue(can_place(self.board, 0, 1))
        self.assertTrue(can_place(self.board, 3, 0))

    def test_outside_grid_is_never_placeable(self):
        for cell in [(-1, 0), (0, -1), (5, 0), (0, 5)]:
            with self.subTest(cell=cell):
                self.assertFalse(can_place(self.board, *cell))

    def test_is_pure(self):
        before = self.board
        can_place(self.board, 0, 1)
        self.assertEqual(self.board, before)
        self.assertEqual(self.board.depth(), 1)


if __name__ == "__main__":
    unittest.main()
