#!/usr/bin/env python3
"""
Streak Tracking - Consecutive correct/wrong results per contestant.

current_streak is positive while the contestant keeps getting the tendency
right and negative while it keeps missing. Exact scores also extend a
separate run used for best_exact_streak.
"""

from dataclasses import dataclass, replace

from core.scorer.models import PointsBreakdown

EXACT = 'exact'
TENDENCY = 'tendency'
WRONG = 'wrong'
NONE = 'none'


@dataclass(frozen=True)
class StreakState:
    current_streak: int = 0
    current_streak_type: str = NONE
    current_exact_streak: int = 0
    best_streak: int = 0
    worst_streak: int = 0
    best_exact_streak: int = 0
    best_tendency_streak: int = 0

    @classmethod
    def from_row(cls, row) -> 'StreakState':
        return cls(
            current_streak=row.current_streak or 0,
            current_streak_type=row.current_streak_type or NONE,
            current_exact_streak=row.current_exact_streak or 0,
            best_streak=row.best_streak or 0,
            worst_streak=row.worst_streak or 0,
            best_exact_streak=row.best_exact_streak or 0,
            best_tendency_streak=row.best_tendency_streak or 0,
        )


def classify(breakdown: PointsBreakdown) -> str:
    if breakdown.is_exact:
        return EXACT
    if breakdown.is_correct_tendency:
        return TENDENCY
    return WRONG


def advance_streak(state: StreakState, result: str) -> StreakState:
    """Return the streak state after one more scored prediction."""
    if result not in (EXACT, TENDENCY, WRONG):
        raise ValueError(f"Unknown streak result: {result!r}")

    if result == WRONG:
        new_streak = state.current_streak - 1 if state.current_streak < 0 else -1
        return replace(
            state,
            current_streak=new_streak,
            current_streak_type=NONE,
            current_exact_streak=0,
            worst_streak=min(state.worst_streak, new_streak),
        )

    if state.current_streak > 0:
        new_streak = state.current_streak + 1
        if result == EXACT or state.current_streak_type == EXACT:
            new_type = EXACT
        else:
            new_type = TENDENCY
    else:
        new_streak = 1
        new_type = result

    exact_run = state.current_exact_streak + 1 if result == EXACT else 0

    return replace(
        state,
        current_streak=new_streak,
        current_streak_type=new_type,
        current_exact_streak=exact_run,
        best_streak=max(state.best_streak, new_streak),
        best_exact_streak=max(state.best_exact_streak, exact_run),
        best_tendency_streak=max(state.best_tendency_streak, new_streak),
    )
