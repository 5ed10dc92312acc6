import logging
from typing import Dict, Iterable
from sqlalchemy import select

from database.models import Contestant
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ContestantRepository(BaseRepository):
    def get_many(self, contestant_ids: Iterable[str], lock: bool = False) -> Dict[str, Contestant]:
        """Fetch contestants by id. Missing ids are simply absent from the result.

        Rows are locked in id order when lock=True so concurrent scorers
        of different matches cannot deadlock on shared contestants.
        """
        ids = sorted(set(contestant_ids))
        if not ids:
            return {}

        stmt = select(Contestant).where(Contestant.id.in_(ids)).order_by(Contestant.id.asc())
        if lock:
            stmt = stmt.with_for_update()
        rows = self.db.execute(stmt).scalars().all()
        return {row.id: row for row in rows}
