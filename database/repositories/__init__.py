from database.repositories.base import BaseRepository
from database.repositories.match import MatchRepository
from database.repositories.prediction import PredictionRepository
from database.repositories.contestant import ContestantRepository
from database.repositories.leaderboard import LeaderboardRepository

__all__ = [
    'BaseRepository',
    'MatchRepository',
    'PredictionRepository',
    'ContestantRepository',
    'LeaderboardRepository',
]
