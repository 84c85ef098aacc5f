"""Team ORM model."""

from sqlalchemy import Column, String

from app.core.database import Base


class Team(Base):
    __tablename__ = "teams"

    code = Column(String(8), primary_key=True)
    name = Column(String(255), nullable=False)
    color1 = Column(String(16), nullable=False)
    color2 = Column(String(16), nullable=False)
