"""
Classifica e storico posizioni — calcolo puro sui risultati.

Flusso:
  1. Una riga a zero per ogni squadra
  2. Ogni fixture giocata (entrambi i gol presenti) con round <= as_of_round
     aggiorna casa e trasferta: 3 punti vittoria, 1 pareggio, 0 sconfitta
  3. Differenza reti = gol fatti - gol subiti
  4. Ordinamento: punti, differenza reti, gol fatti (desc), poi gol subiti (asc)
  5. Posizione = indice 1-based nell'ordinamento; pari merito completi restano
     nell'ordine della lista squadre (sort stabile), nessuna posizione condivisa

Tutto in-memory, niente DB. Ricalcolato ad ogni richiesta.
Squadre e fixture sono oggetti con attributi (modelli ORM o equivalenti).
"""

import logging
from typing import Any, Iterable, Sequence

from app.schemas.league import LadderRow

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Costanti
# ---------------------------------------------------------------------------

POINTS_WIN = 3
POINTS_DRAW = 1


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def is_played(fixture: Any) -> bool:
    return fixture.home_goals is not None and fixture.away_goals is not None


def _record(row: LadderRow, goals_for: int, goals_against: int) -> None:
    row.played += 1
    row.goals_for += goals_for
    row.goals_against += goals_against
    if goals_for > goals_against:
        row.wins += 1
        row.points += POINTS_WIN
    elif goals_for < goals_against:
        row.losses += 1
    else:
        row.draws += 1
        row.points += POINTS_DRAW


def ladder_sort_key(row: LadderRow) -> tuple[int, int, int, int]:
    """Regola ufficiale di spareggio: punti, differenza reti, gol fatti, gol subiti (meno è meglio)."""
    return (-row.points, -row.goal_diff, -row.goals_for, row.goals_against)


# ---------------------------------------------------------------------------
# API pubblica
# ---------------------------------------------------------------------------

def compute_ladder(as_of_round: int, teams: Sequence[Any], fixtures: Iterable[Any]) -> list[LadderRow]:
    """
    Classifica al termine del round as_of_round.
    Una riga per squadra, già ordinata e con position 1..N.
    """
    table: dict[str, LadderRow] = {t.code: LadderRow(code=t.code, name=t.name) for t in teams}

    for fx in fixtures:
        if fx.round > as_of_round or not is_played(fx):
            continue
        home_goals = int(fx.home_goals)
        away_goals = int(fx.away_goals)
        _record(table[fx.home_code], home_goals, away_goals)
        _record(table[fx.away_code], away_goals, home_goals)

    for row in table.values():
        row.goal_diff = row.goals_for - row.goals_against

    ranked = sorted(table.values(), key=ladder_sort_key)
    for i, row in enumerate(ranked, start=1):
        row.position = i
    return ranked


def compute_position_history(
    teams: Sequence[Any], fixtures: Sequence[Any], total_rounds: int
) -> dict[str, list[int]]:
    """
    Posizione di ogni squadra al termine di ciascun round 1..total_rounds.
    Ogni lista ha esattamente total_rounds elementi (indice r-1 = round r).
    """
    positions: dict[str, list[int]] = {t.code: [] for t in teams}
    for r in range(1, total_rounds + 1):
        for row in compute_ladder(r, teams, fixtures):
            positions[row.code].append(row.position)
    logger.debug("compute_position_history: %s squadre x %s round", len(positions), total_rounds)
    return positions
