#!/usr/bin/env python3
"""
Scoring Models - Data structures for quotas, point breakdowns and run reports.
"""

from enum import Enum
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field


class Tendency(str, Enum):
    """Coarse outcome of a scoreline. Values match predictions.predicted_result."""
    HOME = 'H'
    DRAW = 'D'
    AWAY = 'A'


@dataclass(frozen=True)
class Quotas:
    """Points paid for a correct tendency, per tendency (2-6)."""
    home: int
    draw: int
    away: int

    def for_tendency(self, tendency: Tendency) -> int:
        if tendency is Tendency.HOME:
            return self.home
        if tendency is Tendency.DRAW:
            return self.draw
        return self.away

    def as_dict(self) -> Dict[str, int]:
        return {'home': self.home, 'draw': self.draw, 'away': self.away}


@dataclass(frozen=True)
class PointsBreakdown:
    """Points awarded to one prediction."""
    tendency_points: int = 0
    goal_diff_bonus: int = 0
    exact_score_bonus: int = 0
    total_points: int = 0

    @property
    def is_correct_tendency(self) -> bool:
        return self.tendency_points > 0

    @property
    def is_exact(self) -> bool:
        return self.exact_score_bonus > 0

    def as_dict(self) -> Dict[str, int]:
        return {
            'tendency_points': self.tendency_points,
            'goal_diff_bonus': self.goal_diff_bonus,
            'exact_score_bonus': self.exact_score_bonus,
            'total_points': self.total_points,
        }


@dataclass
class PredictionFailure:
    """A prediction row skipped during a scoring run."""
    prediction_id: str
    contestant_id: Optional[str]
    reason: str


@dataclass
class MatchScoringReport:
    """Outcome of one scoring run for one match."""
    match_id: str
    quotas: Optional[Quotas] = None
    final_score: Optional[str] = None
    scored_count: int = 0
    already_scored_count: int = 0
    failed_count: int = 0
    total_points_awarded: int = 0
    failures: List[PredictionFailure] = field(default_factory=list)
    max_recorded_failures: int = 50

    def record_failure(self, failure: PredictionFailure) -> None:
        self.failed_count += 1
        if len(self.failures) < self.max_recorded_failures:
            self.failures.append(failure)

    @property
    def all_failed(self) -> bool:
        return self.failed_count > 0 and self.scored_count == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'match_id': self.match_id,
            'quotas': self.quotas.as_dict() if self.quotas else None,
            'final_score': self.final_score,
            'scored_count': self.scored_count,
            'already_scored_count': self.already_scored_count,
            'failed_count': self.failed_count,
            'total_points_awarded': self.total_points_awarded,
            'failures': [
                {'prediction_id': f.prediction_id, 'contestant_id': f.contestant_id, 'reason': f.reason}
                for f in self.failures
            ],
        }
