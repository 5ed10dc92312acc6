import logging
from typing import List, Optional, Tuple
from sqlalchemy import select, update

from database.models import Prediction, Contestant
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PredictionRepository(BaseRepository):
    def snapshot_for_match(self, match_id: str, lock: bool = True) -> List[Prediction]:
        """All non-void predictions for a match, in a stable order.

        With lock=True the rows are selected FOR UPDATE so the snapshot
        cannot change while quotas are computed and points applied.
        """
        stmt = (
            select(Prediction)
            .where(
                Prediction.match_id == match_id,
                Prediction.status != 'void'
            )
            .order_by(Prediction.created_at.asc(), Prediction.id.asc())
        )
        if lock:
            stmt = stmt.with_for_update()
        return list(self.db.execute(stmt).scalars().all())

    def get_for_match_with_contestants(self, match_id: str) -> List[Tuple[Prediction, Optional[Contestant]]]:
        """Predictions joined with their contestant for display, best score first."""
        stmt = (
            select(Prediction, Contestant)
            .outerjoin(Contestant, Contestant.id == Prediction.contestant_id)
            .where(Prediction.match_id == match_id)
            .order_by(Prediction.total_points.desc().nulls_last(), Prediction.contestant_id.asc())
        )
        return [(row[0], row[1]) for row in self.db.execute(stmt).all()]

    def reset_for_rescore(self, match_id: str) -> int:
        """Return scored predictions of a match to pending with cleared points."""
        stmt = (
            update(Prediction)
            .where(
                Prediction.match_id == match_id,
                Prediction.status == 'scored'
            )
            .values(
                tendency_points=None,
                goal_diff_bonus=None,
                exact_score_bonus=None,
                total_points=None,
                status='pending',
                scored_at=None
            )
            .execution_options(synchronize_session='fetch')
        )
        result = self.db.execute(stmt)
        count = result.rowcount or 0
        if count > 0:
            logger.info(f"Reset {count} scored predictions for match {match_id}")
        return count
