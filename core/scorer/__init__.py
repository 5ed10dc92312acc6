#!/usr/bin/env python3
"""
Scoring Module - Kicktipp quota scoring of match predictions.

Public API:
- ScoringService: Scores the predictions of a finished match under a row lock
- compute_quotas / score_prediction: Pure calculations, no database needed
- MatchScoringReport: Outcome of one scoring run

Modules:

- models.py: Data structures (Tendency, Quotas, PointsBreakdown, MatchScoringReport)
- quotas.py: Rarity tiers and quota calculation
- points.py: Point breakdown for a single prediction
- streaks.py: Contestant streak tracking
- errors.py: Scoring exceptions
- persistence.py: Writing results onto ORM rows
- service.py: ScoringService orchestrator
"""

from core.scorer.models import Tendency, Quotas, PointsBreakdown, MatchScoringReport, PredictionFailure
from core.scorer.quotas import compute_quotas, rarity_points, tendency_of
from core.scorer.points import score_prediction
from core.scorer.errors import (
    ScoringError,
    PreconditionFailed,
    MatchNotFound,
    AlreadyScored,
    ReferenceMissing,
    StorageUnavailable,
)
from core.scorer.service import ScoringService

__all__ = [
    'ScoringService',
    'MatchScoringReport',
    'PredictionFailure',
    'Tendency',
    'Quotas',
    'PointsBreakdown',
    'compute_quotas',
    'rarity_points',
    'tendency_of',
    'score_prediction',
    'ScoringError',
    'PreconditionFailed',
    'MatchNotFound',
    'AlreadyScored',
    'ReferenceMissing',
    'StorageUnavailable',
]
