#!/usr/bin/env python3
"""
Leaderboard service - ranking and per-contestant statistics.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from database.repositories import LeaderboardRepository
from ..models.responses import LeaderboardEntry, LeaderboardResponse, ContestantStatsResponse
from ..exceptions import ContestantNotFoundException

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Service for leaderboard queries."""

    def __init__(self, db: Session):
        self.repo = LeaderboardRepository(db)

    def get_leaderboard(
        self,
        competition_id: Optional[str] = None,
        min_predictions: int = 0,
        limit: Optional[int] = None
    ) -> LeaderboardResponse:
        entries = self.repo.get_leaderboard(
            competition_id=competition_id,
            min_scored=min_predictions,
            limit=limit
        )
        return LeaderboardResponse(
            success=True,
            competition_id=competition_id,
            entries=[LeaderboardEntry(**e) for e in entries]
        )

    def get_contestant_stats(self, contestant_id: str) -> ContestantStatsResponse:
        """
        Raises:
            ContestantNotFoundException: If the contestant does not exist.
        """
        stats = self.repo.get_contestant_stats(contestant_id)
        if stats is None:
            raise ContestantNotFoundException(f"Contestant {contestant_id} not found")
        return ContestantStatsResponse(success=True, **stats)
