"""Fixture ORM model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base


class Fixture(Base):
    __tablename__ = "fixtures"

    id = Column(Integer, primary_key=True, index=True)
    round = Column(Integer, nullable=False, index=True)
    home_code = Column(String(8), ForeignKey("teams.code"), nullable=False, index=True)
    away_code = Column(String(8), ForeignKey("teams.code"), nullable=False, index=True)
    # Both null until the score is entered; the match counts only when both are set
    home_goals = Column(Integer, nullable=True)
    away_goals = Column(Integer, nullable=True)

    home_team = relationship("Team", foreign_keys=[home_code])
    away_team = relationship("Team", foreign_keys=[away_code])
