"""Catch-up sweep for finished matches that were never scored."""

import logging
from typing import Callable, ContextManager, List

from database.uow import ScoringUnitOfWork, scoring_uow
from pipeline.scoring_queue import ScoringQueue

logger = logging.getLogger(__name__)


def find_missed_matches(
    limit: int = 100,
    uow_factory: Callable[[], ContextManager[ScoringUnitOfWork]] = scoring_uow
) -> List[str]:
    with uow_factory() as uow:
        return uow.matches.get_finished_with_pending_predictions(limit=limit)


def enqueue_missed_matches(
    queue: ScoringQueue,
    limit: int = 100,
    uow_factory: Callable[[], ContextManager[ScoringUnitOfWork]] = scoring_uow
) -> List[str]:
    """Enqueue scoring for finished matches that still have pending predictions.

    Returns:
        The match ids that were handed to the queue
    """
    match_ids = find_missed_matches(limit=limit, uow_factory=uow_factory)
    if not match_ids:
        logger.info("Catch-up: no finished matches with pending predictions")
        return []

    logger.info(f"Catch-up: {len(match_ids)} finished matches with pending predictions")
    for match_id in match_ids:
        queue.enqueue_scoring(match_id)
    return match_ids
