#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip database-backed tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database-backed tests run against an in-memory SQLite database built from
the declarative models, so no external server is needed. Row locks
(SELECT ... FOR UPDATE) are accepted and ignored by SQLite.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from database.database import make_engine, make_session_factory
from database.models import Base, Competition, Contestant, Match, Prediction

KICKOFF = datetime(2025, 3, 1, 15, 30, tzinfo=timezone.utc)


def make_sqlite_session_factory():
    """
    Create an in-memory SQLite database with all tables.

    Every session handed out by the returned factory shares one
    connection, hence one database.
    """
    engine = make_engine("sqlite://")
    Base.metadata.create_all(engine)
    return make_session_factory(engine)


def add_contestant(session, contestant_id: str, provider: str = "groq", display_name: Optional[str] = None) -> Contestant:
    contestant = Contestant(
        id=contestant_id,
        provider=provider,
        model_name=contestant_id,
        display_name=display_name or contestant_id,
        active=True
    )
    session.add(contestant)
    return contestant


def add_match(
    session,
    match_id: str,
    home_score: Optional[int] = None,
    away_score: Optional[int] = None,
    status: str = "finished",
    competition_id: Optional[str] = None,
    kickoff_offset_days: int = 0
) -> Match:
    if competition_id and session.get(Competition, competition_id) is None:
        session.add(Competition(id=competition_id, name=competition_id, season=2025))
        session.flush()
    match = Match(
        id=match_id,
        competition_id=competition_id,
        home_team=f"{match_id}-home",
        away_team=f"{match_id}-away",
        kickoff_time=KICKOFF + timedelta(days=kickoff_offset_days),
        home_score=home_score,
        away_score=away_score,
        status=status
    )
    session.add(match)
    return match


def add_prediction(
    session,
    match_id: str,
    contestant_id: str,
    predicted_home: int,
    predicted_away: int,
    status: str = "pending"
) -> Prediction:
    if predicted_home > predicted_away:
        result = "H"
    elif predicted_home < predicted_away:
        result = "A"
    else:
        result = "D"
    prediction = Prediction(
        id=f"{match_id}-{contestant_id}",
        match_id=match_id,
        contestant_id=contestant_id,
        predicted_home=predicted_home,
        predicted_away=predicted_away,
        predicted_result=result,
        status=status
    )
    session.add(prediction)
    return prediction
