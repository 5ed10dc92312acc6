#!/usr/bin/env python3
"""
Persistence Operations - Write scoring results onto ORM rows.

The functions only mutate rows attached to the caller's session; the
unit of work owning that session decides when to flush and commit.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from database.models import Prediction, Match, Contestant
from core.scorer.models import PointsBreakdown, Quotas
from core.scorer.errors import AlreadyScored
from core.scorer.streaks import StreakState, advance_streak

logger = logging.getLogger(__name__)


def apply_breakdown(
    prediction: Prediction,
    breakdown: PointsBreakdown,
    scored_at: Optional[datetime] = None
) -> Prediction:
    """
    Set the four point fields and flip the prediction to 'scored'.

    Raises:
        AlreadyScored: If the prediction is not pending
    """
    if prediction.status != 'pending':
        raise AlreadyScored(f"Prediction {prediction.id} has status '{prediction.status}'")

    prediction.tendency_points = breakdown.tendency_points
    prediction.goal_diff_bonus = breakdown.goal_diff_bonus
    prediction.exact_score_bonus = breakdown.exact_score_bonus
    prediction.total_points = breakdown.total_points
    prediction.status = 'scored'
    prediction.scored_at = scored_at or datetime.now(timezone.utc)
    return prediction


def apply_quotas(match: Match, quotas: Quotas) -> Match:
    match.quota_home = quotas.home
    match.quota_draw = quotas.draw
    match.quota_away = quotas.away
    return match


def quotas_from_match(match: Match) -> Optional[Quotas]:
    """Persisted quotas of a match, or None if they were never written."""
    if not match.has_quotas:
        return None
    return Quotas(home=match.quota_home, draw=match.quota_draw, away=match.quota_away)


def apply_streak(contestant: Contestant, result: str) -> StreakState:
    state = advance_streak(StreakState.from_row(contestant), result)
    contestant.current_streak = state.current_streak
    contestant.current_streak_type = state.current_streak_type
    contestant.current_exact_streak = state.current_exact_streak
    contestant.best_streak = state.best_streak
    contestant.worst_streak = state.worst_streak
    contestant.best_exact_streak = state.best_exact_streak
    contestant.best_tendency_streak = state.best_tendency_streak
    return state
