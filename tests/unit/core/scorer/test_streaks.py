"""
Tests for contestant streak tracking.
"""

import unittest

from core.scorer.models import PointsBreakdown
from core.scorer.streaks import (
    EXACT,
    NONE,
    TENDENCY,
    WRONG,
    StreakState,
    advance_streak,
    classify,
)


def _run(results, state=None):
    state = state or StreakState()
    for result in results:
        state = advance_streak(state, result)
    return state


class TestClassify(unittest.TestCase):

    def test_exact(self):
        self.assertEqual(classify(PointsBreakdown(3, 1, 3, 7)), EXACT)

    def test_tendency(self):
        self.assertEqual(classify(PointsBreakdown(4, 0, 0, 4)), TENDENCY)

    def test_wrong(self):
        self.assertEqual(classify(PointsBreakdown()), WRONG)


class TestAdvanceStreak(unittest.TestCase):

    def test_first_correct_starts_at_one(self):
        state = advance_streak(StreakState(), TENDENCY)

        self.assertEqual(state.current_streak, 1)
        self.assertEqual(state.current_streak_type, TENDENCY)
        self.assertEqual(state.best_streak, 1)
        self.assertEqual(state.best_tendency_streak, 1)

    def test_correct_results_extend_positive_streak(self):
        state = _run([TENDENCY, TENDENCY, TENDENCY])
        self.assertEqual(state.current_streak, 3)
        self.assertEqual(state.best_streak, 3)

    def test_wrong_results_extend_negative_streak(self):
        state = _run([WRONG, WRONG])

        self.assertEqual(state.current_streak, -2)
        self.assertEqual(state.current_streak_type, NONE)
        self.assertEqual(state.worst_streak, -2)
        self.assertEqual(state.best_streak, 0)

    def test_wrong_breaks_positive_streak(self):
        state = _run([TENDENCY, EXACT, WRONG])

        self.assertEqual(state.current_streak, -1)
        self.assertEqual(state.current_exact_streak, 0)
        self.assertEqual(state.best_streak, 2)
        self.assertEqual(state.worst_streak, -1)

    def test_correct_breaks_negative_streak(self):
        state = _run([WRONG, WRONG, WRONG, TENDENCY])

        self.assertEqual(state.current_streak, 1)
        self.assertEqual(state.worst_streak, -3)

    def test_exact_run_tracked_separately(self):
        state = _run([EXACT, EXACT, TENDENCY, EXACT])

        self.assertEqual(state.current_streak, 4)
        self.assertEqual(state.current_exact_streak, 1)
        self.assertEqual(state.best_exact_streak, 2)

    def test_streak_type_stays_exact_once_exact(self):
        state = _run([EXACT, TENDENCY])
        self.assertEqual(state.current_streak_type, EXACT)

    def test_records_are_monotone(self):
        state = _run([TENDENCY] * 5 + [WRONG] * 2 + [TENDENCY])

        self.assertEqual(state.best_streak, 5)
        self.assertEqual(state.best_tendency_streak, 5)
        self.assertEqual(state.worst_streak, -2)

    def test_unknown_result_rejected(self):
        with self.assertRaises(ValueError):
            advance_streak(StreakState(), 'draw')

    def test_from_row_treats_null_as_zero(self):
        class Row:
            current_streak = None
            current_streak_type = None
            current_exact_streak = None
            best_streak = 4
            worst_streak = None
            best_exact_streak = None
            best_tendency_streak = 4

        state = StreakState.from_row(Row())
        self.assertEqual(state.current_streak, 0)
        self.assertEqual(state.current_streak_type, NONE)
        self.assertEqual(state.best_streak, 4)


if __name__ == '__main__':
    unittest.main()
