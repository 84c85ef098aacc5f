from app.models.fixture import Fixture
from app.models.team import Team

__all__ = [
    "Team",
    "Fixture",
]
