"""
Servizio lettura per classifica, calendario e statistiche.
Carica squadre e fixture dallo store e delega il calcolo ad app.analytics.
"""

from sqlalchemy.orm import Session

from app.analytics import compute_ladder, compute_position_history, compute_season_stats
from app.models import Team
from app.schemas.league import FixtureOut, LadderRow, RoundFixtures, StatsReport
from app.services.results_service import list_fixtures, list_teams


def get_ladder(db: Session, round_number: int) -> list[LadderRow]:
    return compute_ladder(round_number, list_teams(db), list_fixtures(db))


def get_draw(db: Session, total_rounds: int) -> list[RoundFixtures]:
    """Fixture raggruppate per giornata, 1..total_rounds (giornate senza partite incluse, vuote)."""
    by_round: dict[int, list[FixtureOut]] = {r: [] for r in range(1, total_rounds + 1)}
    for fx in list_fixtures(db):
        if fx.round in by_round:
            by_round[fx.round].append(FixtureOut.from_fixture(fx))
    return [RoundFixtures(round=r, fixtures=fixtures) for r, fixtures in by_round.items()]


def get_season_overview(
    db: Session, total_rounds: int
) -> tuple[list[Team], dict[str, list[int]], StatsReport]:
    """Squadre, storico posizioni per giornata e record di stagione, da un'unica lettura."""
    teams = list_teams(db)
    fixtures = list_fixtures(db)
    positions = compute_position_history(teams, fixtures, total_rounds)
    stats = compute_season_stats(teams, fixtures)
    return teams, positions, stats
