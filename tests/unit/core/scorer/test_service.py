"""
Tests for ScoringService against an in-memory SQLite database.

SQLite ignores FOR UPDATE, so these tests cover the transactional
behaviour (commit, rollback, idempotence) rather than lock contention.
"""

import unittest
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import OperationalError

from core.config_loader import ScoringConfig
from core.scorer import (
    MatchNotFound,
    PreconditionFailed,
    Quotas,
    ScoringService,
    StorageUnavailable,
)
from database.models import Contestant, Match, Prediction
from database.repositories import ContestantRepository
from database.uow import scoring_uow
from tests import make_sqlite_session_factory, add_contestant, add_match, add_prediction


@pytest.mark.db
class TestScoringService(unittest.TestCase):

    def setUp(self):
        self.Session = make_sqlite_session_factory()
        self.service = ScoringService(
            uow_factory=lambda: scoring_uow(self.Session),
            config=ScoringConfig()
        )

    def _seed_ten_predictions(self, home_score=4, away_score=2):
        """7 home / 2 draw / 1 away."""
        scores = [(3, 1), (2, 0), (2, 0), (2, 0), (1, 0), (2, 1), (4, 2), (1, 1), (0, 0), (0, 1)]
        with self.Session() as session:
            add_match(session, "m1", home_score, away_score)
            for i, (h, a) in enumerate(scores):
                contestant_id = f"c{i}"
                add_contestant(session, contestant_id)
                add_prediction(session, "m1", contestant_id, h, a)
            session.commit()

    def _prediction(self, session, contestant_id, match_id="m1"):
        return session.get(Prediction, f"{match_id}-{contestant_id}")

    def test_scores_all_pending_predictions(self):
        self._seed_ten_predictions()

        report = self.service.score_match("m1")

        self.assertEqual(report.quotas, Quotas(home=3, draw=5, away=6))
        self.assertEqual(report.final_score, "4-2")
        self.assertEqual(report.scored_count, 10)
        self.assertEqual(report.failed_count, 0)
        # 3-1, 2-0 x3 and 4-2 on +2; 1-0 and 2-1 tendency only
        self.assertEqual(report.total_points_awarded, 4 + 4 * 3 + 3 + 3 + 7)

        with self.Session() as session:
            match = session.get(Match, "m1")
            self.assertEqual((match.quota_home, match.quota_draw, match.quota_away), (3, 5, 6))

            p = self._prediction(session, "c0")
            self.assertEqual(p.status, "scored")
            self.assertEqual((p.tendency_points, p.goal_diff_bonus, p.exact_score_bonus, p.total_points), (3, 1, 0, 4))
            self.assertIsNotNone(p.scored_at)

            exact = self._prediction(session, "c6")
            self.assertEqual(exact.total_points, 7)

            away = self._prediction(session, "c9")
            self.assertEqual(away.status, "scored")
            self.assertEqual((away.tendency_points, away.goal_diff_bonus, away.exact_score_bonus, away.total_points), (0, 0, 0, 0))

    def test_second_run_is_a_no_op(self):
        self._seed_ten_predictions()
        first = self.service.score_match("m1")

        second = self.service.score_match("m1")

        self.assertEqual(second.scored_count, 0)
        self.assertEqual(second.already_scored_count, 10)
        self.assertEqual(second.total_points_awarded, 0)
        self.assertEqual(second.quotas, first.quotas)

        with self.Session() as session:
            self.assertEqual(self._prediction(session, "c0").total_points, 4)
            self.assertEqual(session.get(Contestant, "c0").current_streak, 1)

    def test_late_prediction_uses_persisted_quotas(self):
        self._seed_ten_predictions()
        self.service.score_match("m1")

        with self.Session() as session:
            add_contestant(session, "late")
            add_prediction(session, "m1", "late", 0, 3)
            session.commit()

        report = self.service.score_match("m1")

        self.assertEqual(report.quotas, Quotas(home=3, draw=5, away=6))
        self.assertEqual(report.scored_count, 1)
        self.assertEqual(report.already_scored_count, 10)

    def test_rescore_recomputes_quotas(self):
        self._seed_ten_predictions()
        self.service.score_match("m1")

        with self.Session() as session:
            add_contestant(session, "late")
            add_prediction(session, "m1", "late", 0, 3)
            session.commit()

        report = self.service.rescore_match("m1")

        # 7/11 home, 2/11 draw, 2/11 away
        self.assertEqual(report.quotas, Quotas(home=3, draw=5, away=5))
        self.assertEqual(report.scored_count, 11)
        self.assertEqual(report.already_scored_count, 0)

        with self.Session() as session:
            self.assertEqual(session.get(Match, "m1").quota_away, 5)
            self.assertEqual(self._prediction(session, "c0").total_points, 4)

    def test_void_predictions_are_ignored(self):
        with self.Session() as session:
            add_match(session, "m1", 1, 0)
            add_contestant(session, "a")
            add_contestant(session, "b")
            add_prediction(session, "m1", "a", 1, 0)
            add_prediction(session, "m1", "b", 0, 2, status="void")
            session.commit()

        report = self.service.score_match("m1")

        self.assertEqual(report.quotas, Quotas(home=2, draw=6, away=6))
        self.assertEqual(report.scored_count, 1)
        with self.Session() as session:
            void = self._prediction(session, "b")
            self.assertEqual(void.status, "void")
            self.assertIsNone(void.total_points)

    def test_missing_contestant_is_skipped_and_reported(self):
        with self.Session() as session:
            add_match(session, "m1", 2, 1)
            add_contestant(session, "a")
            add_prediction(session, "m1", "a", 2, 1)
            add_prediction(session, "m1", "ghost", 1, 0)
            session.commit()

        report = self.service.score_match("m1")

        self.assertEqual(report.scored_count, 1)
        self.assertEqual(report.failed_count, 1)
        self.assertEqual(report.failures[0].contestant_id, "ghost")
        self.assertFalse(report.all_failed)
        # The orphan still counts towards the quota snapshot
        self.assertEqual(report.quotas.home, 2)

        with self.Session() as session:
            self.assertEqual(self._prediction(session, "a").status, "scored")
            self.assertEqual(self._prediction(session, "ghost").status, "pending")

    def test_failure_list_is_bounded(self):
        service = ScoringService(
            uow_factory=lambda: scoring_uow(self.Session),
            config=ScoringConfig(max_recorded_failures=2)
        )
        with self.Session() as session:
            add_match(session, "m1", 0, 0)
            for i in range(3):
                add_prediction(session, "m1", f"ghost{i}", 0, 0)
            session.commit()

        report = service.score_match("m1")

        self.assertEqual(report.failed_count, 3)
        self.assertEqual(len(report.failures), 2)
        self.assertTrue(report.all_failed)

    def test_match_not_finished(self):
        with self.Session() as session:
            add_match(session, "m1", 1, 0, status="live")
            add_contestant(session, "a")
            add_prediction(session, "m1", "a", 1, 0)
            session.commit()

        with self.assertRaises(PreconditionFailed):
            self.service.score_match("m1")

        with self.Session() as session:
            self.assertIsNone(session.get(Match, "m1").quota_home)
            self.assertEqual(self._prediction(session, "a").status, "pending")

    def test_match_without_final_score(self):
        with self.Session() as session:
            add_match(session, "m1", None, None)
            session.commit()

        with self.assertRaises(PreconditionFailed):
            self.service.score_match("m1")

    def test_missing_match(self):
        with self.assertRaises(MatchNotFound):
            self.service.score_match("nope")

    def test_match_not_found_is_a_precondition_failure(self):
        self.assertTrue(issubclass(MatchNotFound, PreconditionFailed))

    def test_no_predictions_persists_no_quotas(self):
        with self.Session() as session:
            add_match(session, "m1", 1, 1)
            session.commit()

        report = self.service.score_match("m1")

        self.assertIsNone(report.quotas)
        self.assertEqual(report.scored_count, 0)
        with self.Session() as session:
            self.assertIsNone(session.get(Match, "m1").quota_draw)

    def test_streaks_advanced(self):
        with self.Session() as session:
            add_match(session, "m1", 2, 0, kickoff_offset_days=0)
            add_match(session, "m2", 0, 1, kickoff_offset_days=1)
            add_contestant(session, "a")
            add_prediction(session, "m1", "a", 2, 0)
            add_prediction(session, "m2", "a", 1, 0)
            session.commit()

        self.service.score_match("m1")
        with self.Session() as session:
            a = session.get(Contestant, "a")
            self.assertEqual(a.current_streak, 1)
            self.assertEqual(a.current_streak_type, "exact")
            self.assertEqual(a.best_exact_streak, 1)

        self.service.score_match("m2")
        with self.Session() as session:
            a = session.get(Contestant, "a")
            self.assertEqual(a.current_streak, -1)
            self.assertEqual(a.best_streak, 1)
            self.assertEqual(a.worst_streak, -1)

    def test_streaks_can_be_disabled(self):
        service = ScoringService(
            uow_factory=lambda: scoring_uow(self.Session),
            config=ScoringConfig(update_streaks=False)
        )
        with self.Session() as session:
            add_match(session, "m1", 2, 0)
            add_contestant(session, "a")
            add_prediction(session, "m1", "a", 2, 0)
            session.commit()

        service.score_match("m1")

        with self.Session() as session:
            self.assertEqual(session.get(Contestant, "a").current_streak, 0)
            self.assertEqual(self._prediction(session, "a").status, "scored")

    def test_storage_error_rolls_back_everything(self):
        self._seed_ten_predictions()
        error = OperationalError("SELECT", {}, Exception("connection reset"))

        with patch.object(ContestantRepository, "get_many", side_effect=error):
            with self.assertRaises(StorageUnavailable):
                self.service.score_match("m1")

        with self.Session() as session:
            self.assertIsNone(session.get(Match, "m1").quota_home)
            pending = session.query(Prediction).filter(Prediction.status == "pending").count()
            self.assertEqual(pending, 10)

        # Safe to retry
        report = self.service.score_match("m1")
        self.assertEqual(report.scored_count, 10)


class TestScoringServiceWithMocks(unittest.TestCase):

    def test_storage_error_on_lock(self):
        uow = Mock()
        uow.matches.lock_for_scoring.side_effect = OperationalError("SELECT", {}, Exception("timeout"))
        cm = Mock()
        cm.__enter__ = Mock(return_value=uow)
        cm.__exit__ = Mock(return_value=False)

        service = ScoringService(uow_factory=lambda: cm)

        with self.assertRaises(StorageUnavailable):
            service.score_match("m1")
        uow.apply_timeouts.assert_called_once_with(30000, 10000)

    def test_precondition_errors_are_not_wrapped(self):
        uow = Mock()
        uow.matches.lock_for_scoring.return_value = None
        cm = Mock()
        cm.__enter__ = Mock(return_value=uow)
        cm.__exit__ = Mock(return_value=False)

        service = ScoringService(uow_factory=lambda: cm)

        with self.assertRaises(MatchNotFound):
            service.score_match("m1")
        uow.predictions.snapshot_for_match.assert_not_called()


if __name__ == '__main__':
    unittest.main()
