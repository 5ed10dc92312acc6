import contextlib
import functools
import logging
from typing import Callable, ContextManager, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import (
    MatchRepository,
    PredictionRepository,
    ContestantRepository,
)

logger = logging.getLogger(__name__)


class ScoringUnitOfWork:
    """Repositories sharing one Session, hence one transaction."""

    def __init__(self, session: Session):
        self.session = session
        self.matches = MatchRepository(session)
        self.predictions = PredictionRepository(session)
        self.contestants = ContestantRepository(session)

    def apply_timeouts(self, statement_timeout_ms: Optional[int], lock_timeout_ms: Optional[int]) -> None:
        """Bound lock waits and statements for this transaction (PostgreSQL only)."""
        if self.session.get_bind().dialect.name != 'postgresql':
            return
        if statement_timeout_ms:
            self.session.execute(text(f"SET LOCAL statement_timeout = {int(statement_timeout_ms)}"))
        if lock_timeout_ms:
            self.session.execute(text(f"SET LOCAL lock_timeout = {int(lock_timeout_ms)}"))

    def flush(self) -> None:
        self.session.flush()


@contextlib.contextmanager
def scoring_uow(session_factory: Callable[[], Session] = SessionLocal):
    """Per-unit-of-work transaction scope.

    Yields a ScoringUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with scoring_uow() as uow:
            match = uow.matches.lock_for_scoring(match_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        uow = ScoringUnitOfWork(session)
        yield uow
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def bind_scoring_uow(session_factory: Callable[[], Session]) -> Callable[[], ContextManager[ScoringUnitOfWork]]:
    """scoring_uow factory bound to a specific session factory (and so a specific database)."""
    return functools.partial(scoring_uow, session_factory)
