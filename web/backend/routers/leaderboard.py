#!/usr/bin/env python3
"""
Leaderboard endpoints - contestant rankings and statistics.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.leaderboard_service import LeaderboardService
from ..models.responses import LeaderboardResponse, ContestantStatsResponse

router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
def get_leaderboard(
    competition_id: Optional[str] = Query(default=None, description="Only count matches of this competition"),
    min_predictions: int = Query(default=0, ge=0, description="Minimum scored predictions to be ranked"),
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum entries to return"),
    db: Session = Depends(get_db)
):
    """
    Get contestants ranked by total points, then average points per scored prediction.
    """
    service = LeaderboardService(db)
    return service.get_leaderboard(
        competition_id=competition_id,
        min_predictions=min_predictions,
        limit=limit
    )


@router.get("/contestants/{contestant_id}/stats", response_model=ContestantStatsResponse)
def get_contestant_stats(contestant_id: str, db: Session = Depends(get_db)):
    """Get point totals and streak records for one contestant."""
    service = LeaderboardService(db)
    return service.get_contestant_stats(contestant_id)
