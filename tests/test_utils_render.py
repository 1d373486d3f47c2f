"""Tests for conflict counting, solution validation and ASCII rendering."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch.board import new_board
from queensearch.render import render_board
from queensearch.utils import conflicts, conflicts_on2, is_valid_solution, to_row_vector

FOUR_QUEENS = [(0, 1), (1, 3), (2, 0), (3, 2)]


class ConflictTests(unittest.TestCase):

    def test_known_solution_has_no_conflicts(self):
        self.assertEqual(conflicts(FOUR_QUEENS), 0)
        self.assertEqual(conflicts_on2(FOUR_QUEENS), 0)

    def test_counts_each_attacking_pair(self):
        samples = [
            [(0, 0), (1, 1)],
            [(0, 0), (0, 3), (3, 0)],
            [(0, 0), (1, 1), (2, 2), (3, 3)],
            [(0, 3), (1, 2), (2, 0), (3, 0)],
        ]
        expected = [1, 3, 6, 4]
        for placements, count in zip(samples, expected):
            with self.subTest(placements=placements):
                self.assertEqual(conflicts(placements), count)
                self.assertEqual(conflicts_on2(placements), count)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution(FOUR_QUEENS, 4))
        self.assertFalse(is_valid_solution(FOUR_QUEENS[:3], 4))
        self.assertFalse(is_valid_solution([(0, 0), (1, 1), (2, 3), (3, 2)], 4))
        self.assertFalse(is_valid_solution([(0, 1), (1, 3), (2, 0), (3, 4)], 4))
        self.assertFalse(is_valid_solution([], 0))

    def test_row_vector(self):
        self.assertEqual(to_row_vector(FOUR_QUEENS, 4), [1, 3, 0, 2])
        self.assertEqual(to_row_vector([(2, 1)], 3), [-1, -1, 1])


class RenderTests(unittest.TestCase):

    def test_single_queen(self):
        self.assertEqual(render_board(new_board(1).place(0, 0)), "+---+\n| Q |\n+---+\n")

    def test_empty_board(self):
        self.assertEqual(
            render_board(new_board(2)),
            "+---+---+\n|   |   |\n+---+---+\n|   |   |\n+---+---+\n",
        )

    def test_columns_run_left_to_right(self):
        board = new_board(4)
        for column, row in FOUR_QUEENS:
            board = board.place(column, row)
        lines = render_board(board).splitlines()
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[1], "|   |   | Q |   |")
        self.assertEqual(lines[3], "| Q |   |   |   |")
        self.assertEqual(lines[5], "|   |   |   | Q |")
        self.assertEqual(lines[7], "|   | Q |   |   |")
        self.assertEqual(lines[0], "+---+---+---+---+")


if __name__ == "__main__":
    unittest.main()
