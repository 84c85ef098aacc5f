"""
Pannello admin (HTTP Basic): inserimento punteggi per giornata.
Il salvataggio è tutto-o-niente; in caso di errore si logga e si torna comunque alla pagina.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import require_admin
from app.core.templating import templates
from app.schemas.admin import parse_score_form
from app.services.results_service import apply_score_batch, clamp_round, list_fixtures

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("", include_in_schema=False)
def admin_page(request: Request, round: str | None = None, db: Session = Depends(get_db)):
    total_rounds = request.app.state.total_rounds
    round_number = clamp_round(round, 1, total_rounds)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {"fixtures": list_fixtures(db, round_number), "round": round_number, "total_rounds": total_rounds},
    )


@router.post("/save", include_in_schema=False)
async def save_scores(request: Request, db: Session = Depends(get_db)):
    """
    Riceve i campi score_<id>_<home|away> e li applica in un'unica transazione.
    Errori di validazione o DB: rollback, log, redirect alla stessa giornata (nessuna pagina di errore).
    """
    form = await request.form()
    total_rounds = request.app.state.total_rounds
    round_number = clamp_round(form.get("round"), 1, total_rounds)

    try:
        batch = parse_score_form(form)
        apply_score_batch(db, batch)
    except ValueError as e:
        logger.warning("Salvataggio punteggi rifiutato (round=%s): %s", round_number, e)
    except SQLAlchemyError as e:
        logger.exception("Errore DB salvataggio punteggi round=%s: %s", round_number, e)

    return RedirectResponse(url=f"/admin?round={round_number}", status_code=status.HTTP_303_SEE_OTHER)
