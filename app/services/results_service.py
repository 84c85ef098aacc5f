"""
Accesso a squadre e fixture e scrittura atomica dei punteggi dal pannello admin.
Le letture non sono isolate da un salvataggio in corso: una pagina può mostrare
un round aggiornato a metà se legge durante il commit (accettato, un solo admin).
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.models import Fixture, Team
from app.schemas.admin import ScoreBatch

logger = logging.getLogger(__name__)


def clamp_round(raw: str | int | None, default: int, total_rounds: int) -> int:
    """
    Numero di giornata da query string: non numerico -> default,
    poi limitato a [1, total_rounds]. Il calcolo della classifica non vede mai round invalidi.
    """
    try:
        value = int(str(raw).strip()) if raw is not None and str(raw).strip() != "" else default
    except ValueError:
        value = default
    return min(max(value, 1), total_rounds)


def list_teams(db: Session) -> list[Team]:
    """Tutte le squadre, ordinate per nome."""
    return list(db.scalars(select(Team).order_by(Team.name)))


def list_fixtures(db: Session, round_number: int | None = None) -> list[Fixture]:
    """
    Tutte le fixture ordinate per (round, id), oppure quelle di una sola giornata ordinate per id.
    Squadre caricate in join per nomi e colori.
    """
    stmt = select(Fixture).options(joinedload(Fixture.home_team), joinedload(Fixture.away_team))
    if round_number is None:
        stmt = stmt.order_by(Fixture.round, Fixture.id)
    else:
        stmt = stmt.where(Fixture.round == round_number).order_by(Fixture.id)
    return list(db.scalars(stmt))


def apply_score_batch(db: Session, batch: ScoreBatch) -> int:
    """
    Aggiorna home_goals/away_goals di tutte le fixture del batch in un'unica transazione.
    Qualsiasi errore DB -> rollback completo e rilancio (i punteggi precedenti restano invariati).
    Fixture inesistenti vengono saltate con warning. Ritorna il numero di fixture aggiornate.
    """
    updates = batch.by_fixture()
    if not updates:
        return 0

    updated = 0
    try:
        for fixture_id, (home_goals, away_goals) in updates.items():
            fx = db.get(Fixture, fixture_id)
            if fx is None:
                logger.warning("apply_score_batch: fixture_id=%s inesistente, ignorata", fixture_id)
                continue
            fx.home_goals = home_goals
            fx.away_goals = away_goals
            updated += 1
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    logger.info("apply_score_batch: %s fixture aggiornate", updated)
    return updated
