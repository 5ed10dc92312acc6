"""Job-queue plumbing for scoring finished matches."""

from .tasks import score_match_task, rescore_match_task
from .scoring_queue import ScoringQueue
from .catch_up import enqueue_missed_matches

__all__ = ['score_match_task', 'rescore_match_task', 'ScoringQueue', 'enqueue_missed_matches']
