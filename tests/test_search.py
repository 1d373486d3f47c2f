"""Tests for the DFS and best-first engines: outcomes, invariants, reporting."""

from itertools import combinations
from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from queensearch.board import BoardConfigurationError, new_board
from queensearch.ordering import open_cells
from queensearch.search import Exhausted, Solved, run_best_first, run_dfs, solve
from queensearch.timing import NullClock, silent_reporter


class TickingClock:
    """Deterministic clock advancing by ``tick`` seconds on every read."""

    def __init__(self, tick: float):
        self.tick = tick
        self.now = 0.0

    def elapsed(self) -> float:
        self.now += self.tick
        return self.now


class FixedClock:
    def __init__(self, value: float):
        self.value = value

    def elapsed(self) -> float:
        return self.value


def assert_non_attacking(test: unittest.TestCase, placements):
    for (c1, r1), (c2, r2) in combinations(placements, 2):
        test.assertNotEqual(c1, c2)
        test.assertNotEqual(r1, r2)
        test.assertNotEqual(c1 - r1, c2 - r2)
        test.assertNotEqual(c1 + r1, c2 + r2)


class DfsTests(unittest.TestCase):

    def test_base_case_single_queen(self):
        outcome = run_dfs(new_board(1), 1, reporter=silent_reporter)
        self.assertIsInstance(outcome, Solved)
        self.assertEqual(outcome.board.placements(), ((0, 0),))
        self.assertEqual(outcome.steps_taken, 1)
        self.assertTrue(outcome.solved)

    def test_unsolvable_sizes_are_exhausted(self):
        for n in (2, 3):
            with self.subTest(n=n):
                outcome = run_dfs(new_board(n), n, reporter=silent_reporter)
                self.assertIsInstance(outcome, Exhausted)
                self.assertFalse(outcome.timed_out)
                self.assertFalse(outcome.solved)

    def test_exhaustion_step_count_for_two(self):
        # Root plus its four single-queen children, none of which extends.
        outcome = run_dfs(new_board(2), 2, reporter=silent_reporter)
        self.assertEqual(outcome, Exhausted(5))

    def test_solutions_do_not_attack(self):
        for n in (4, 5, 6, 8):
            with self.subTest(n=n):
                outcome = run_dfs(new_board(n), n, reporter=silent_reporter)
                self.assertIsInstance(outcome, Solved)
                self.assertEqual(outcome.board.depth(), n)
                assert_non_attacking(self, outcome.board.placements())

    def test_deterministic(self):
        first = run_dfs(new_board(6), 6, reporter=silent_reporter)
        second = run_dfs(new_board(6), 6, reporter=silent_reporter)
        self.assertEqual(first.board.placements(), second.board.placements())
        self.assertEqual(first.steps_taken, second.steps_taken)

    def test_last_generated_child_is_explored_first(self):
        outcome = run_dfs(new_board(4), 1, reporter=silent_reporter)
        self.assertEqual(outcome.board.placements(), ((3, 3),))
        self.assertEqual(outcome.steps_taken, 1)

    def test_target_defaults_to_board_size(self):
        outcome = run_dfs(new_board(4), reporter=silent_reporter)
        self.assertEqual(outcome.board.depth(), 4)

    def test_target_equal_to_start_depth_returns_start(self):
        start = new_board(5).place(0, 0)
        outcome = run_dfs(start, 1, reporter=silent_reporter)
        self.assertEqual(outcome, Solved(start, 0))

    def test_search_from_partial_board_keeps_prefix(self):
        start = new_board(6).place(1, 3)
        outcome = run_dfs(start, 6, reporter=silent_reporter)
        self.assertIsInstance(outcome, Solved)
        self.assertEqual(outcome.board.placements()[0], (1, 3))
        assert_non_attacking(self, outcome.board.placements())


class BestFirstTests(unittest.TestCase):

    def test_base_case_single_queen(self):
        outcome = run_best_first(new_board(1), 1, reporter=silent_reporter)
        self.assertEqual(outcome, Solved(outcome.board, 1))
        self.assertEqual(outcome.board.placements(), ((0, 0),))

    def test_unsolvable_sizes_are_exhausted(self):
        for n in (2, 3):
            with self.subTest(n=n):
                outcome = run_best_first(new_board(n), n, reporter=silent_reporter)
                self.assertIsInstance(outcome, Exhausted)
                self.assertFalse(outcome.timed_out)

    def test_solutions_do_not_attack(self):
        for n in (4, 5, 6, 8):
            with self.subTest(n=n):
                outcome = run_best_first(new_board(n), n, reporter=silent_reporter)
                self.assertIsInstance(outcome, Solved)
                self.assertEqual(outcome.board.depth(), n)
                assert_non_attacking(self, outcome.board.placements())

    def test_open_cells_heuristic_finds_valid_solutions(self):
        for n in (4, 6):
            with self.subTest(n=n):
                outcome = run_best_first(new_board(n), n, secondary=open_cells, reporter=silent_reporter)
                self.assertIsInstance(outcome, Solved)
                assert_non_attacking(self, outcome.board.placements())

    def test_partial_target(self):
        outcome = run_best_first(new_board(8), 3, reporter=silent_reporter)
        self.assertIsInstance(outcome, Solved)
        self.assertEqual(outcome.board.depth(), 3)
        self.assertEqual(outcome.steps_taken, 3)

    def test_deterministic(self):
        first = run_best_first(new_board(6), 6, reporter=silent_reporter)
        second = run_best_first(new_board(6), 6, reporter=silent_reporter)
        self.assertEqual(first, second)


class ConfigurationErrorTests(unittest.TestCase):

    def test_target_beyond_board(self):
        for engine in (run_dfs, run_best_first):
            with self.subTest(engine=engine.__name__):
                with self.assertRaises(BoardConfigurationError):
                    engine(new_board(4), 5)

    def test_target_below_start_depth(self):
        with self.assertRaises(BoardConfigurationError):
            run_dfs(new_board(4).place(0, 1), 0)
        with self.assertRaises(BoardConfigurationError):
            run_dfs(new_board(4), -1)

    def test_non_integer_target(self):
        with self.assertRaises(BoardConfigurationError):
            run_dfs(new_board(4), 2.5)

    def test_invalid_options(self):
        with self.assertRaises(BoardConfigurationError):
            run_dfs(new_board(4), 4, report_every=0)
        with self.assertRaises(BoardConfigurationError):
            run_best_first(new_board(4), 4, time_limit=-1.0)
        with self.assertRaises(BoardConfigurationError):
            run_best_first(new_board(4), 4, capacity_hint=0)

    def test_solve_validates_names_and_size(self):
        with self.assertRaises(BoardConfigurationError):
            solve(4, "bfs")
        with self.assertRaises(BoardConfigurationError):
            solve(4, "best_first", secondary="openness")
        with self.assertRaises(BoardConfigurationError):
            solve(0)


class ReportingAndTimeLimitTests(unittest.TestCase):

    def test_reporter_receives_steps_and_rate(self):
        calls = []
        outcome = run_dfs(
            new_board(4),
            4,
            clock=FixedClock(2.0),
            reporter=lambda steps, rate: calls.append((steps, rate)),
            report_every=1,
        )
        self.assertEqual(len(calls), outcome.steps_taken)
        self.assertEqual(calls[0], (1, 0.5))
        self.assertEqual(calls[-1], (outcome.steps_taken, outcome.steps_taken / 2.0))

    def test_report_interval(self):
        calls = []
        outcome = run_dfs(
            new_board(6),
            6,
            clock=NullClock(),
            reporter=lambda steps, rate: calls.append((steps, rate)),
            report_every=10,
        )
        self.assertEqual([s for s, _ in calls], list(range(10, outcome.steps_taken + 1, 10)))
        self.assertTrue(all(rate == 0.0 for _, rate in calls))

    def test_time_limit_yields_timed_out_exhaustion(self):
        outcome = run_dfs(
            new_board(8),
            8,
            clock=TickingClock(1.0),
            reporter=silent_reporter,
            time_limit=2.5,
        )
        self.assertEqual(outcome, Exhausted(2, timed_out=True))
        self.assertFalse(outcome.solved)

    def test_best_first_time_limit(self):
        outcome = run_best_first(
            new_board(8),
            8,
            clock=TickingClock(1.0),
            reporter=silent_reporter,
            time_limit=0.5,
        )
        self.assertEqual(outcome, Exhausted(0, timed_out=True))


if __name__ == "__main__":
    unittest.main()
