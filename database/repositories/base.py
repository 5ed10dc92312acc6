from typing import Any, Optional
from sqlalchemy.orm import Session


class BaseRepository:
    """Repositories never commit; the owning unit of work does."""

    def __init__(self, db: Session):
        self.db = db

    def _one_or_none(self, stmt) -> Optional[Any]:
        return self.db.execute(stmt).scalar_one_or_none()
