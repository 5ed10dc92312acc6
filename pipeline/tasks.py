"""RQ job functions for scoring.

The functions are enqueued by ScoringQueue and executed by pipeline.worker.
A match that is not scoreable yet is reported as skipped; database failures
propagate so rq can retry the job.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from core.config_loader import load_config
from core.scorer import ScoringService, PreconditionFailed
from database.database import make_engine, make_session_factory
from database.uow import bind_scoring_uow

logger = logging.getLogger(__name__)


@lru_cache()
def build_scoring_service(config_path: Optional[str] = None) -> ScoringService:
    """ScoringService bound to the configured database, built once per worker process."""
    config = load_config(config_path) if config_path else load_config()
    session_factory = make_session_factory(make_engine(config.database.url))
    return ScoringService(uow_factory=bind_scoring_uow(session_factory), config=config.scoring)


def _skipped(match_id: str, error: PreconditionFailed) -> Dict[str, Any]:
    logger.info(f"Skipping match {match_id}: {error}")
    return {'match_id': match_id, 'skipped': True, 'reason': str(error)}


def score_match_task(match_id: str, service: Optional[ScoringService] = None) -> Dict[str, Any]:
    """Score all pending predictions of a match."""
    service = service or build_scoring_service()
    try:
        report = service.score_match(match_id)
    except PreconditionFailed as e:
        return _skipped(match_id, e)
    return report.to_dict()


def rescore_match_task(match_id: str, service: Optional[ScoringService] = None) -> Dict[str, Any]:
    """Reset and rescore all predictions of a match."""
    service = service or build_scoring_service()
    try:
        report = service.rescore_match(match_id)
    except PreconditionFailed as e:
        return _skipped(match_id, e)
    return report.to_dict()
