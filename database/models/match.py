from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Index, func
from sqlalchemy.orm import relationship

from .base import Base


MATCH_STATUSES = ('scheduled', 'live', 'finished', 'postponed', 'cancelled')


class Match(Base):
    """
    A fixture between two teams.

    Tracks:
    - Actual result (NULL until the match is finished)
    - Kicktipp quotas (2-6 points per tendency), written once when scored
    """
    __tablename__ = 'matches'

    id = Column(Text, primary_key=True)
    external_id = Column(Text, unique=True)
    competition_id = Column(Text, ForeignKey('competitions.id'), nullable=True)

    home_team = Column(Text, nullable=False)
    away_team = Column(Text, nullable=False)
    kickoff_time = Column(TIMESTAMP(timezone=True))

    home_score = Column(Integer)
    away_score = Column(Integer)
    status = Column(Text, nullable=False, default='scheduled')  # scheduled|live|finished|postponed|cancelled

    quota_home = Column(Integer)
    quota_draw = Column(Integer)
    quota_away = Column(Integer)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    competition = relationship("Competition", back_populates="matches")
    predictions = relationship("Prediction", back_populates="match")

    __table_args__ = (
        Index('idx_matches_competition_id', 'competition_id'),
        Index('idx_matches_status', 'status'),
        Index('idx_matches_status_kickoff', 'status', 'kickoff_time'),
    )

    @property
    def has_final_score(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def has_quotas(self) -> bool:
        return None not in (self.quota_home, self.quota_draw, self.quota_away)
