#!/usr/bin/env python3
"""
Scoring Service - Kicktipp quota scoring for finished matches.

Scores all pending predictions of a match in two phases, inside one
transaction that holds an exclusive lock on the match row:

1. Quotas: computed once from the fixed snapshot of the match's
   predictions (or reused if already persisted) and saved on the match.
2. Points: every pending prediction is scored against the final result
   using those quotas, and the contestant's streak is advanced.

Rows whose contestant no longer exists are skipped and reported; the rest
of the batch is still committed. Database failures abort the whole
attempt, which can then be retried from scratch.
"""

from datetime import datetime, timezone
from typing import Callable, ContextManager, Dict, List, Optional
import logging

from sqlalchemy.exc import OperationalError, InterfaceError, TimeoutError as PoolTimeoutError

from database.models import Match, Prediction, Contestant
from database.uow import ScoringUnitOfWork, scoring_uow
from core.config_loader import ScoringConfig

from core.scorer.models import MatchScoringReport, PredictionFailure, Quotas
from core.scorer.errors import (
    AlreadyScored,
    MatchNotFound,
    PreconditionFailed,
    ReferenceMissing,
    StorageUnavailable,
)
from core.scorer.quotas import compute_quotas
from core.scorer.points import score_prediction
from core.scorer.streaks import classify
from core.scorer import persistence

logger = logging.getLogger(__name__)

TRANSIENT_DB_ERRORS = (OperationalError, InterfaceError, PoolTimeoutError)


class ScoringService:
    """
    Service for scoring the predictions of finished matches.

    Each call opens its own unit of work, so the service itself holds no
    database state and can be shared between queue jobs.
    """

    def __init__(
        self,
        uow_factory: Callable[[], ContextManager[ScoringUnitOfWork]] = scoring_uow,
        config: Optional[ScoringConfig] = None
    ):
        self.uow_factory = uow_factory
        self.config = config or ScoringConfig()

    def score_match(self, match_id: str) -> MatchScoringReport:
        """Score every pending prediction of a finished match.

        Already-scored predictions are left untouched, so calling this
        twice for the same match persists nothing new the second time.

        Raises:
            MatchNotFound: If the match does not exist
            PreconditionFailed: If the match is not finished or has no final score
            StorageUnavailable: If the database fails; nothing was written
        """
        return self._run(match_id, rescore=False)

    def rescore_match(self, match_id: str) -> MatchScoringReport:
        """Reset the match's predictions to pending, drop its quotas and score again.

        Contestant streaks are not rewound.
        """
        return self._run(match_id, rescore=True)

    def _run(self, match_id: str, rescore: bool) -> MatchScoringReport:
        action = "Rescoring" if rescore else "Scoring"
        logger.info(f"{action} predictions for match {match_id}")

        try:
            with self.uow_factory() as uow:
                uow.apply_timeouts(self.config.statement_timeout_ms, self.config.lock_timeout_ms)
                match = self._lock_finished_match(uow, match_id)

                if rescore:
                    uow.predictions.reset_for_rescore(match_id)
                    uow.matches.clear_quotas(match)

                report = self._score_locked_match(uow, match)
        except TRANSIENT_DB_ERRORS as e:
            logger.error(f"Storage error while scoring match {match_id}: {e}")
            raise StorageUnavailable(f"Scoring of match {match_id} aborted: {e}") from e

        self._log_report(report)
        return report

    def _lock_finished_match(self, uow: ScoringUnitOfWork, match_id: str) -> Match:
        match = uow.matches.lock_for_scoring(match_id)
        if match is None:
            raise MatchNotFound(f"Match not found: {match_id}")
        if match.status != 'finished':
            raise PreconditionFailed(f"Match {match_id} is not finished (status: {match.status})")
        if not match.has_final_score:
            raise PreconditionFailed(f"Match {match_id} has no final score")
        return match

    def _score_locked_match(self, uow: ScoringUnitOfWork, match: Match) -> MatchScoringReport:
        report = MatchScoringReport(
            match_id=match.id,
            final_score=f"{match.home_score}-{match.away_score}",
            max_recorded_failures=self.config.max_recorded_failures
        )

        snapshot = uow.predictions.snapshot_for_match(match.id, lock=True)
        if not snapshot:
            logger.info(f"No predictions found for match {match.id}")
            return report

        report.quotas = self._resolve_quotas(match, snapshot)

        pending = [p for p in snapshot if p.status == 'pending']
        report.already_scored_count = len(snapshot) - len(pending)
        if not pending:
            logger.debug(f"All predictions already scored for match {match.id}")
            return report

        contestants = uow.contestants.get_many(
            (p.contestant_id for p in pending),
            lock=self.config.update_streaks
        )
        scored_at = datetime.now(timezone.utc)

        for prediction in pending:
            self._score_one(prediction, match, report, contestants, scored_at)

        uow.flush()
        return report

    def _resolve_quotas(self, match: Match, snapshot: List[Prediction]) -> Quotas:
        quotas = persistence.quotas_from_match(match)
        if quotas is not None:
            logger.info(f"Reusing quotas for match {match.id}: H={quotas.home} D={quotas.draw} A={quotas.away}")
            return quotas

        quotas = compute_quotas(snapshot)
        persistence.apply_quotas(match, quotas)
        logger.info(f"Quotas for match {match.id}: H={quotas.home} D={quotas.draw} A={quotas.away}")
        return quotas

    def _score_one(
        self,
        prediction: Prediction,
        match: Match,
        report: MatchScoringReport,
        contestants: Dict[str, Contestant],
        scored_at: datetime
    ) -> None:
        contestant = contestants.get(prediction.contestant_id)
        if contestant is None:
            error = ReferenceMissing(f"Contestant {prediction.contestant_id} not found")
            logger.warning(f"Skipping prediction {prediction.id}: {error}")
            report.record_failure(PredictionFailure(prediction.id, prediction.contestant_id, str(error)))
            return

        try:
            breakdown = score_prediction(
                prediction.predicted_home,
                prediction.predicted_away,
                match.home_score,
                match.away_score,
                report.quotas
            )
        except ValueError as e:
            logger.warning(f"Skipping prediction {prediction.id}: {e}")
            report.record_failure(PredictionFailure(prediction.id, prediction.contestant_id, str(e)))
            return

        try:
            persistence.apply_breakdown(prediction, breakdown, scored_at)
        except AlreadyScored:
            report.already_scored_count += 1
            return

        if self.config.update_streaks:
            persistence.apply_streak(contestant, classify(breakdown))

        report.scored_count += 1
        report.total_points_awarded += breakdown.total_points

        predicted = f"{prediction.predicted_home}-{prediction.predicted_away}"
        if breakdown.is_exact:
            logger.info(f"EXACT SCORE: {prediction.contestant_id} {predicted} = {breakdown.total_points} pts")
        elif breakdown.tendency_points >= 5:
            logger.info(f"HIGH QUOTA: {prediction.contestant_id} {predicted} = {breakdown.total_points} pts")
        else:
            logger.debug(f"Scored {prediction.contestant_id} {predicted} = {breakdown.total_points} pts")

    def _log_report(self, report: MatchScoringReport) -> None:
        if report.failed_count > 0:
            logger.warning(
                f"Match {report.match_id}: scored {report.scored_count} predictions, "
                f"{report.failed_count} failed ({report.total_points_awarded} total points awarded)"
            )
            if report.all_failed:
                logger.error(f"All {report.failed_count} pending predictions failed for match {report.match_id}")
        else:
            logger.info(
                f"Match {report.match_id}: scored {report.scored_count} predictions, "
                f"{report.already_scored_count} already scored ({report.total_points_awarded} total points awarded)"
            )
