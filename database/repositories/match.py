import logging
from typing import List, Optional
from sqlalchemy import select

from database.models import Match, Prediction
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MatchRepository(BaseRepository):
    def get_by_id(self, match_id: str) -> Optional[Match]:
        stmt = select(Match).where(Match.id == match_id)
        return self._one_or_none(stmt)

    def lock_for_scoring(self, match_id: str) -> Optional[Match]:
        """SELECT ... FOR UPDATE on the match row. Held until the transaction ends."""
        stmt = select(Match).where(Match.id == match_id).with_for_update()
        return self._one_or_none(stmt)

    def clear_quotas(self, match: Match) -> None:
        match.quota_home = None
        match.quota_draw = None
        match.quota_away = None

    def get_finished_with_pending_predictions(self, limit: int = 100) -> List[str]:
        """IDs of finished matches that still have unscored predictions, oldest first."""
        stmt = (
            select(Match.id)
            .join(Prediction, Prediction.match_id == Match.id)
            .where(
                Match.status == 'finished',
                Match.home_score.is_not(None),
                Match.away_score.is_not(None),
                Prediction.status == 'pending'
            )
            .group_by(Match.id, Match.kickoff_time)
            .order_by(Match.kickoff_time.asc())
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())
