from sqlalchemy import Column, Text, TIMESTAMP, Boolean, Integer, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Contestant(Base):
    """
    An LLM-backed prediction generator taking part in the tipping game.

    Streak columns are maintained by the scoring service each time one of
    the contestant's predictions is scored:
    - current_streak: positive for consecutive correct tendencies, negative for misses
    - current_streak_type: exact|tendency|none
    - current_exact_streak: consecutive exact scores
    """
    __tablename__ = 'contestants'

    id = Column(Text, primary_key=True)  # e.g. "groq-llama-70b"
    provider = Column(Text, nullable=False)
    model_name = Column(Text, nullable=False)
    display_name = Column(Text, nullable=False)
    active = Column(Boolean, nullable=False, default=True)

    current_streak = Column(Integer, nullable=False, default=0)
    current_streak_type = Column(Text, nullable=False, default='none')
    current_exact_streak = Column(Integer, nullable=False, default=0)
    best_streak = Column(Integer, nullable=False, default=0)
    worst_streak = Column(Integer, nullable=False, default=0)
    best_exact_streak = Column(Integer, nullable=False, default=0)
    best_tendency_streak = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    predictions = relationship("Prediction", back_populates="contestant")

    __table_args__ = (
        Index('idx_contestants_active', 'active'),
    )
