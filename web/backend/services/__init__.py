"""Business logic for API endpoints."""

from .leaderboard_service import LeaderboardService
from .match_service import MatchService

__all__ = ['LeaderboardService', 'MatchService']
