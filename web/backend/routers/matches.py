#!/usr/bin/env python3
"""
Match endpoints - quotas and prediction breakdowns.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.responses import MatchPredictionsResponse

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("/{match_id}/predictions", response_model=MatchPredictionsResponse)
def get_match_predictions(match_id: str, db: Session = Depends(get_db)):
    """
    Get a match with its quotas and every prediction's point breakdown.

    Quotas are null until the match has been scored. Pending predictions
    carry null point fields; a wrong tendency carries zeros.
    """
    service = MatchService(db)
    return service.get_match_predictions(match_id)
