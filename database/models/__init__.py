from .base import Base
from .competition import Competition
from .contestant import Contestant
from .match import Match, MATCH_STATUSES
from .prediction import Prediction, PREDICTION_STATUSES

__all__ = [
    'Base',
    'Competition',
    'Contestant',
    'Match',
    'MATCH_STATUSES',
    'Prediction',
    'PREDICTION_STATUSES',
]
