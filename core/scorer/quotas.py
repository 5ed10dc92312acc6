#!/usr/bin/env python3
"""
Quota Calculations - Kicktipp-style rarity tiers.

A tendency's quota depends on the share of predictions that chose it:

    share > 75%        -> 2
    50% < share <= 75% -> 3
    25% < share <= 50% -> 4
    10% < share <= 25% -> 5
    share <= 10%       -> 6

A tendency nobody predicted has share 0 and gets the top quota.
"""

from typing import Iterable, Dict
import logging

from core.scorer.models import Tendency, Quotas

logger = logging.getLogger(__name__)

MIN_QUOTA = 2
MAX_QUOTA = 6

# (exclusive lower bound in percent, points), checked in order
RARITY_TIERS = (
    (75, 2),
    (50, 3),
    (25, 4),
    (10, 5),
)


def tendency_of(home_goals: int, away_goals: int) -> Tendency:
    if home_goals > away_goals:
        return Tendency.HOME
    if home_goals < away_goals:
        return Tendency.AWAY
    return Tendency.DRAW


def rarity_points(count: int, total: int) -> int:
    """Map count/total to a quota. Integer arithmetic keeps the bucket edges exact."""
    if total <= 0:
        return MAX_QUOTA
    for lower_pct, points in RARITY_TIERS:
        if count * 100 > lower_pct * total:
            return points
    return MAX_QUOTA


def count_tendencies(predictions: Iterable) -> Dict[Tendency, int]:
    counts = {Tendency.HOME: 0, Tendency.DRAW: 0, Tendency.AWAY: 0}
    for p in predictions:
        counts[tendency_of(p.predicted_home, p.predicted_away)] += 1
    return counts


def compute_quotas(predictions: Iterable) -> Quotas:
    """
    Calculate the home/draw/away quotas for one match.

    Args:
        predictions: Objects exposing predicted_home and predicted_away.
            The actual result is not needed.

    Returns:
        Quotas. With no predictions at all every tendency gets MAX_QUOTA.
    """
    counts = count_tendencies(predictions)
    total = sum(counts.values())

    quotas = Quotas(
        home=rarity_points(counts[Tendency.HOME], total),
        draw=rarity_points(counts[Tendency.DRAW], total),
        away=rarity_points(counts[Tendency.AWAY], total),
    )
    logger.debug(
        f"Quotas from {total} predictions "
        f"(H={counts[Tendency.HOME]} D={counts[Tendency.DRAW]} A={counts[Tendency.AWAY]}): "
        f"H={quotas.home} D={quotas.draw} A={quotas.away}"
    )
    return quotas
