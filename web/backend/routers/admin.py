#!/usr/bin/env python3
"""
Admin endpoints - manual rescoring.
"""

import logging
from fastapi import APIRouter, Depends

from core.scorer import ScoringService
from ..dependencies import get_scoring_service, require_admin_token
from ..models.responses import RescoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin_token)]
)


@router.post("/matches/{match_id}/rescore", response_model=RescoreResponse)
def rescore_match(match_id: str, service: ScoringService = Depends(get_scoring_service)):
    """
    Reset a finished match's predictions and score them again.

    Runs synchronously in the request. Scoring errors are mapped by the
    app's exception handlers (404 missing, 409 not finished, 503 storage).
    """
    logger.info(f"Admin rescore requested for match {match_id}")
    report = service.rescore_match(match_id)
    return RescoreResponse(success=True, report=report.to_dict())
