from sqlalchemy import Column, Integer, Text, TIMESTAMP, func
from sqlalchemy.orm import relationship

from .base import Base


class Competition(Base):
    __tablename__ = 'competitions'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    season = Column(Integer)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    matches = relationship("Match", back_populates="competition")
