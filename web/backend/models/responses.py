#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class LeaderboardEntry(BaseModel):
    """One contestant's row on the leaderboard."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rank": 1,
                "contestant_id": "groq-llama-70b",
                "display_name": "Llama 3.3 70B (Groq)",
                "provider": "groq",
                "scored_predictions": 42,
                "total_points": 131,
                "avg_points": 3.12,
                "correct_tendencies": 25,
                "exact_scores": 6,
                "correct_goal_diffs": 11,
                "accuracy": 59.5
            }
        }
    )

    rank: int = Field(ge=1)
    contestant_id: str
    display_name: str
    provider: str
    scored_predictions: int = Field(ge=0)
    total_points: int = Field(ge=0)
    avg_points: float = Field(ge=0, le=10)
    correct_tendencies: int = Field(ge=0)
    exact_scores: int = Field(ge=0)
    correct_goal_diffs: int = Field(ge=0)
    accuracy: float = Field(ge=0, le=100)


class LeaderboardResponse(BaseModel):
    success: bool
    competition_id: Optional[str] = None
    entries: List[LeaderboardEntry]


class QuotasModel(BaseModel):
    home: int = Field(ge=2, le=6)
    draw: int = Field(ge=2, le=6)
    away: int = Field(ge=2, le=6)


class PredictionDetail(BaseModel):
    """A prediction with its point breakdown (null fields while pending)."""
    prediction_id: str
    contestant_id: str
    contestant_name: Optional[str]
    predicted_home: int
    predicted_away: int
    predicted_result: str
    status: str
    tendency_points: Optional[int]
    goal_diff_bonus: Optional[int]
    exact_score_bonus: Optional[int]
    total_points: Optional[int] = Field(None, ge=0, le=10)
    is_correct_tendency: bool
    is_exact: bool
    scored_at: Optional[str]


class MatchSummary(BaseModel):
    match_id: str
    competition_id: Optional[str]
    home_team: str
    away_team: str
    kickoff_time: Optional[str]
    status: str
    home_score: Optional[int]
    away_score: Optional[int]
    final_score: Optional[str]


class MatchPredictionsResponse(BaseModel):
    success: bool
    match: MatchSummary
    quotas: Optional[QuotasModel]
    predictions: List[PredictionDetail]


class PredictionFailureModel(BaseModel):
    prediction_id: str
    contestant_id: Optional[str]
    reason: str


class ScoringReportModel(BaseModel):
    match_id: str
    quotas: Optional[QuotasModel]
    final_score: Optional[str]
    scored_count: int
    already_scored_count: int
    failed_count: int
    total_points_awarded: int
    failures: List[PredictionFailureModel] = []


class RescoreResponse(BaseModel):
    success: bool
    report: ScoringReportModel


class ContestantStatsResponse(BaseModel):
    success: bool
    contestant_id: str
    display_name: str
    provider: str
    total_predictions: int
    scored_predictions: int
    total_points: int
    avg_points: float
    correct_tendencies: int
    exact_scores: int
    correct_goal_diffs: int
    accuracy: float
    current_streak: int
    current_streak_type: str
    best_streak: int
    worst_streak: int
    best_exact_streak: int
    best_tendency_streak: int
