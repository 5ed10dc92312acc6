import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


PREDICTION_STATUSES = ('pending', 'scored', 'void')


class Prediction(Base):
    """
    One contestant's score forecast for one match.

    Point fields stay NULL while the prediction is pending. Once scored,
    total_points = tendency_points + goal_diff_bonus + exact_score_bonus.
    """
    __tablename__ = 'predictions'

    id = Column(Text, primary_key=True, default=lambda: str(uuid.uuid4()))
    match_id = Column(Text, ForeignKey('matches.id'), nullable=False)
    contestant_id = Column(Text, ForeignKey('contestants.id'), nullable=False)

    predicted_home = Column(Integer, nullable=False)
    predicted_away = Column(Integer, nullable=False)
    predicted_result = Column(Text, nullable=False)  # H|D|A

    tendency_points = Column(Integer)  # 0 or quota (2-6)
    goal_diff_bonus = Column(Integer)  # 0 or 1
    exact_score_bonus = Column(Integer)  # 0 or 3
    total_points = Column(Integer)  # max 10

    status = Column(Text, nullable=False, default='pending')  # pending|scored|void

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    scored_at = Column(TIMESTAMP(timezone=True))

    match = relationship("Match", back_populates="predictions")
    contestant = relationship("Contestant", back_populates="predictions")

    __table_args__ = (
        UniqueConstraint('match_id', 'contestant_id', name='uq_predictions_match_contestant'),
        Index('idx_predictions_match_id', 'match_id'),
        Index('idx_predictions_contestant_id', 'contestant_id'),
        Index('idx_predictions_status', 'status'),
        Index('idx_predictions_match_status', 'match_id', 'status'),
    )
