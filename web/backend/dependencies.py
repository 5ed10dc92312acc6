#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import secrets
from typing import Generator, Optional
from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from core.scorer import ScoringService
from database.database import make_engine, make_session_factory
from database.uow import bind_scoring_uow
from .config import get_config


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self):
        config = get_config()
        self.engine = make_engine(config.database.url, pool_size=10, max_overflow=20)
        self.SessionLocal = make_session_factory(self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


_db_manager: Optional[DatabaseManager] = None


def _get_db_manager() -> DatabaseManager:
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    yield from _get_db_manager().get_session()


def get_scoring_service() -> ScoringService:
    """ScoringService whose units of work use the web app's session factory."""
    session_factory = _get_db_manager().SessionLocal
    return ScoringService(
        uow_factory=bind_scoring_uow(session_factory),
        config=get_config().scoring
    )


def require_admin_token(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """Reject admin requests unless X-Admin-Token matches the configured token."""
    expected = get_config().web.admin_token
    if not expected:
        raise HTTPException(status_code=403, detail="Admin endpoints are disabled")
    if x_admin_token is None or not secrets.compare_digest(x_admin_token.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Invalid admin token")
