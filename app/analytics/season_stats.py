"""
Statistiche di stagione: record e classifiche "most/least" sulle sole partite giocate.

Ogni risultato è un insieme con pari merito inclusi, mai un vincitore scelto a caso.
Se nessuna partita è stata giocata tutte le liste sono vuote e i massimi sono None.
"""

import logging
from typing import Any, Callable, Sequence

from app.analytics.ladder import is_played
from app.schemas.league import FixtureOut, MetricLeaders, StatsReport, TeamValue

logger = logging.getLogger(__name__)


def _total_goals(fx: Any) -> int:
    return int(fx.home_goals) + int(fx.away_goals)


def _margin(fx: Any) -> int:
    return abs(int(fx.home_goals) - int(fx.away_goals))


def _aggregate(teams: Sequence[Any], played: Sequence[Any]) -> dict[str, dict[str, int]]:
    """Totali stagionali per squadra (gf, ga, wins, draws, losses) in un solo passaggio."""
    agg = {t.code: {"gf": 0, "ga": 0, "wins": 0, "draws": 0, "losses": 0} for t in teams}
    for fx in played:
        hg, ag = int(fx.home_goals), int(fx.away_goals)
        home, away = agg[fx.home_code], agg[fx.away_code]
        home["gf"] += hg
        home["ga"] += ag
        away["gf"] += ag
        away["ga"] += hg
        if hg > ag:
            home["wins"] += 1
            away["losses"] += 1
        elif hg < ag:
            away["wins"] += 1
            home["losses"] += 1
        else:
            home["draws"] += 1
            away["draws"] += 1
    return agg


def _leaders(teams: Sequence[Any], value_of: Callable[[Any], int], pick: Callable = max) -> MetricLeaders:
    if not teams:
        return MetricLeaders()
    best = pick(value_of(t) for t in teams)
    return MetricLeaders(
        value=best,
        teams=[TeamValue(code=t.code, name=t.name, value=best) for t in teams if value_of(t) == best],
    )


def compute_season_stats(teams: Sequence[Any], fixtures: Sequence[Any]) -> StatsReport:
    played = [fx for fx in fixtures if is_played(fx)]
    if not played:
        return StatsReport()

    names = {t.code: t.name for t in teams}

    max_total = max(_total_goals(fx) for fx in played)
    max_margin = max(_margin(fx) for fx in played)

    agg = _aggregate(teams, played)

    def metric(key: str) -> Callable[[Any], int]:
        return lambda t: agg[t.code][key]

    def involved(t: Any) -> int:
        return agg[t.code]["gf"] + agg[t.code]["ga"]

    report = StatsReport(
        played_count=len(played),
        max_total_goals=max_total,
        highest_scorelines=[FixtureOut.from_fixture(fx, names) for fx in played if _total_goals(fx) == max_total],
        max_margin=max_margin,
        biggest_wins=[FixtureOut.from_fixture(fx, names) for fx in played if _margin(fx) == max_margin],
        most_wins=_leaders(teams, metric("wins")),
        most_draws=_leaders(teams, metric("draws")),
        most_losses=_leaders(teams, metric("losses")),
        most_goals=_leaders(teams, involved),
        least_goals=_leaders(teams, involved, pick=min),
    )
    logger.debug(
        "compute_season_stats: %s partite giocate, max gol %s, max scarto %s",
        len(played), max_total, max_margin,
    )
    return report
