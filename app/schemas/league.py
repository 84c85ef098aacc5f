"""Pydantic schemas per classifica, calendario e statistiche di stagione."""

from typing import Any, Mapping

from pydantic import BaseModel


# --- Ladder ---


class LadderRow(BaseModel):
    """Riga di classifica derivata dai risultati; mai persistita."""
    code: str
    name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_diff: int = 0
    points: int = 0
    position: int = 0


class LadderResponse(BaseModel):
    round: int
    total_rounds: int
    table: list[LadderRow]


# --- Fixtures / draw ---


class FixtureOut(BaseModel):
    id: int
    round: int
    home_code: str
    home_name: str
    away_code: str
    away_name: str
    home_goals: int | None = None
    away_goals: int | None = None
    played: bool
    # Colori sociali per i badge; None quando la fixture è costruita dai soli nomi
    home_color1: str | None = None
    home_color2: str | None = None
    away_color1: str | None = None
    away_color2: str | None = None

    @classmethod
    def from_fixture(cls, fx: Any, names: Mapping[str, str] | None = None) -> "FixtureOut":
        """Da modello Fixture. Senza `names` usa le relazioni home_team/away_team (nomi e colori)."""
        colors: dict[str, str | None] = {}
        if names is None:
            home, away = fx.home_team, fx.away_team
            home_name, away_name = home.name, away.name
            colors = {
                "home_color1": home.color1,
                "home_color2": home.color2,
                "away_color1": away.color1,
                "away_color2": away.color2,
            }
        else:
            home_name, away_name = names.get(fx.home_code, fx.home_code), names.get(fx.away_code, fx.away_code)
        return cls(
            id=fx.id,
            round=fx.round,
            home_code=fx.home_code,
            home_name=home_name,
            away_code=fx.away_code,
            away_name=away_name,
            home_goals=fx.home_goals,
            away_goals=fx.away_goals,
            played=fx.home_goals is not None and fx.away_goals is not None,
            **colors,
        )


class RoundFixtures(BaseModel):
    round: int
    fixtures: list[FixtureOut]


# --- Season stats ---


class TeamValue(BaseModel):
    code: str
    name: str
    value: int


class MetricLeaders(BaseModel):
    """Valore estremo di una metrica e tutte le squadre che lo raggiungono (pari merito inclusi)."""
    value: int | None = None
    teams: list[TeamValue] = []


class StatsReport(BaseModel):
    played_count: int = 0
    max_total_goals: int | None = None
    highest_scorelines: list[FixtureOut] = []
    max_margin: int | None = None
    biggest_wins: list[FixtureOut] = []
    most_wins: MetricLeaders = MetricLeaders()
    most_draws: MetricLeaders = MetricLeaders()
    most_losses: MetricLeaders = MetricLeaders()
    most_goals: MetricLeaders = MetricLeaders()
    least_goals: MetricLeaders = MetricLeaders()


class StatsResponse(BaseModel):
    total_rounds: int
    positions: dict[str, list[int]]
    stats: StatsReport
