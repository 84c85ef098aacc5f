"""API JSON: classifica per giornata, calendario e statistiche di stagione."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.league import FixtureOut, LadderResponse, StatsResponse
from app.services.league_service import get_ladder, get_season_overview
from app.services.results_service import clamp_round, list_fixtures

router = APIRouter(prefix="/api", tags=["league"])


@router.get("/ladder", response_model=LadderResponse)
def ladder(request: Request, round: str | None = None, db: Session = Depends(get_db)):
    """
    Classifica al termine della giornata richiesta (default: ultima).
    Round non numerici o fuori intervallo vengono riportati in [1, total_rounds].
    """
    total_rounds = request.app.state.total_rounds
    round_number = clamp_round(round, total_rounds, total_rounds)
    return LadderResponse(round=round_number, total_rounds=total_rounds, table=get_ladder(db, round_number))


@router.get("/fixtures", response_model=list[FixtureOut])
def fixtures(request: Request, round: str | None = None, db: Session = Depends(get_db)):
    """Tutte le fixture, oppure solo quelle della giornata indicata."""
    round_number = None
    if round is not None and round.strip():
        round_number = clamp_round(round, 1, request.app.state.total_rounds)
    return [FixtureOut.from_fixture(fx) for fx in list_fixtures(db, round_number)]


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request, db: Session = Depends(get_db)):
    """Storico posizioni per squadra (una voce per giornata) e record di stagione."""
    total_rounds = request.app.state.total_rounds
    _, positions, report = get_season_overview(db, total_rounds)
    return StatsResponse(total_rounds=total_rounds, positions=positions, stats=report)
