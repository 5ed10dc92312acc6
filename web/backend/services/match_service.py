#!/usr/bin/env python3
"""
Match service - prediction breakdowns for a single match.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from database.models import Match, Prediction, Contestant
from database.repositories import MatchRepository, PredictionRepository
from ..models.responses import (
    MatchSummary,
    MatchPredictionsResponse,
    PredictionDetail,
    QuotasModel,
)
from ..utils import safe_datetime_iso, format_score
from ..exceptions import MatchNotFoundException

logger = logging.getLogger(__name__)


class MatchService:
    """Service for match detail views."""

    def __init__(self, db: Session):
        self.matches = MatchRepository(db)
        self.predictions = PredictionRepository(db)

    def get_match_predictions(self, match_id: str) -> MatchPredictionsResponse:
        """
        Get a match with its quotas and every prediction's point breakdown.

        Raises:
            MatchNotFoundException: If match is not found.
        """
        match = self.matches.get_by_id(match_id)
        if match is None:
            raise MatchNotFoundException(f"Match {match_id} not found")

        rows = self.predictions.get_for_match_with_contestants(match_id)

        return MatchPredictionsResponse(
            success=True,
            match=self._to_match_summary(match),
            quotas=self._to_quotas(match),
            predictions=[self._to_prediction_detail(p, c) for p, c in rows]
        )

    def _to_match_summary(self, match: Match) -> MatchSummary:
        return MatchSummary(
            match_id=match.id,
            competition_id=match.competition_id,
            home_team=match.home_team,
            away_team=match.away_team,
            kickoff_time=safe_datetime_iso(match.kickoff_time),
            status=match.status,
            home_score=match.home_score,
            away_score=match.away_score,
            final_score=format_score(match.home_score, match.away_score)
        )

    def _to_quotas(self, match: Match) -> Optional[QuotasModel]:
        if not match.has_quotas:
            return None
        return QuotasModel(home=match.quota_home, draw=match.quota_draw, away=match.quota_away)

    def _to_prediction_detail(self, prediction: Prediction, contestant: Optional[Contestant]) -> PredictionDetail:
        tendency_points = prediction.tendency_points
        exact_bonus = prediction.exact_score_bonus
        return PredictionDetail(
            prediction_id=prediction.id,
            contestant_id=prediction.contestant_id,
            contestant_name=contestant.display_name if contestant else None,
            predicted_home=prediction.predicted_home,
            predicted_away=prediction.predicted_away,
            predicted_result=prediction.predicted_result,
            status=prediction.status,
            tendency_points=tendency_points,
            goal_diff_bonus=prediction.goal_diff_bonus,
            exact_score_bonus=exact_bonus,
            total_points=prediction.total_points,
            # A 0-point wrong tendency is non-null, so compare against 0
            is_correct_tendency=tendency_points is not None and tendency_points > 0,
            is_exact=exact_bonus is not None and exact_bonus > 0,
            scored_at=safe_datetime_iso(prediction.scored_at)
        )
