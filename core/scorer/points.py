#!/usr/bin/env python3
"""
Point Calculations - Score one prediction against the final result.

    tendency points  = quota of the tendency if predicted tendency is right, else 0
    goal diff bonus  = +1 if the goal differences are equal (implies right tendency)
    exact score bonus = +3 if both goal counts are right

Maximum: 6 + 1 + 3 = 10.
"""

from core.scorer.models import Quotas, PointsBreakdown
from core.scorer.quotas import tendency_of, MAX_QUOTA

GOAL_DIFF_BONUS = 1
EXACT_SCORE_BONUS = 3
MAX_POINTS = MAX_QUOTA + GOAL_DIFF_BONUS + EXACT_SCORE_BONUS


def _check_goals(**goals) -> None:
    for name, value in goals.items():
        if value is None or value < 0:
            raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


def score_prediction(
    predicted_home: int,
    predicted_away: int,
    actual_home: int,
    actual_away: int,
    quotas: Quotas
) -> PointsBreakdown:
    """
    Calculate the point breakdown for one prediction.

    A wrong tendency scores 0 in every field. Bonuses are only paid on top
    of a correct tendency.

    Raises:
        ValueError: If any goal count is missing or negative
    """
    _check_goals(
        predicted_home=predicted_home,
        predicted_away=predicted_away,
        actual_home=actual_home,
        actual_away=actual_away,
    )

    predicted = tendency_of(predicted_home, predicted_away)
    actual = tendency_of(actual_home, actual_away)

    if predicted is not actual:
        return PointsBreakdown()

    tendency_points = quotas.for_tendency(actual)

    goal_diff_bonus = 0
    if predicted_home - predicted_away == actual_home - actual_away:
        goal_diff_bonus = GOAL_DIFF_BONUS

    exact_score_bonus = 0
    if predicted_home == actual_home and predicted_away == actual_away:
        exact_score_bonus = EXACT_SCORE_BONUS

    return PointsBreakdown(
        tendency_points=tendency_points,
        goal_diff_bonus=goal_diff_bonus,
        exact_score_bonus=exact_score_bonus,
        total_points=tendency_points + goal_diff_bonus + exact_score_bonus,
    )
