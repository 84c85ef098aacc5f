from app.schemas.admin import ScoreBatch, ScoreEntry, parse_score_form
from app.schemas.league import (
    FixtureOut,
    LadderResponse,
    LadderRow,
    MetricLeaders,
    RoundFixtures,
    StatsReport,
    StatsResponse,
    TeamValue,
)

__all__ = [
    "FixtureOut",
    "LadderResponse",
    "LadderRow",
    "MetricLeaders",
    "RoundFixtures",
    "ScoreBatch",
    "ScoreEntry",
    "StatsReport",
    "StatsResponse",
    "TeamValue",
    "parse_score_form",
]
