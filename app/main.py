"""League Results Site — classifica, calendario, statistiche e pannello admin punteggi."""

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.orm import Session

from app.core.config import get_log_level, get_total_rounds
from app.core.database import ResultStore, get_db
from app.core.security import warn_if_default_password
from app.core.templating import templates
from app.routers import admin_router, db_status_router, health_router, league_router
from app.services.league_service import get_draw, get_ladder, get_season_overview
from app.services.results_service import clamp_round

logger = logging.getLogger(__name__)


def create_app(store: ResultStore | None = None, total_rounds: int | None = None, seed: bool = True) -> FastAPI:
    """
    Costruisce l'app con uno store esplicito: aperto allo startup, chiuso allo shutdown.
    Senza store ne crea uno su DATABASE_URL (letto solo all'apertura).
    """
    app = FastAPI(
        title="League Results Site",
        description="Ladder, draw and season statistics for a single amateur football league.",
        version="0.1.0",
    )
    app.state.store = store or ResultStore()
    app.state.total_rounds = total_rounds or get_total_rounds()

    app.include_router(health_router)
    app.include_router(db_status_router)
    app.include_router(league_router)
    app.include_router(admin_router)

    @app.get("/", include_in_schema=False)
    def index():
        return RedirectResponse(url="/ladder")

    @app.get("/ladder", include_in_schema=False)
    def page_ladder(request: Request, round: str | None = None, db: Session = Depends(get_db)):
        """Classifica: default all'ultima giornata."""
        total = request.app.state.total_rounds
        round_number = clamp_round(round, total, total)
        return templates.TemplateResponse(
            request,
            "ladder.html",
            {"round": round_number, "total_rounds": total, "table": get_ladder(db, round_number)},
        )

    @app.get("/draw", include_in_schema=False)
    def page_draw(request: Request, round: str | None = None, db: Session = Depends(get_db)):
        """Calendario completo, con la giornata selezionata evidenziata."""
        total = request.app.state.total_rounds
        return templates.TemplateResponse(
            request,
            "draw.html",
            {
                "rounds": get_draw(db, total),
                "selected_round": clamp_round(round, 1, total),
                "total_rounds": total,
            },
        )

    @app.get("/stats", include_in_schema=False)
    def page_stats(request: Request, db: Session = Depends(get_db)):
        total = request.app.state.total_rounds
        teams, positions, stats = get_season_overview(db, total)
        return templates.TemplateResponse(
            request,
            "stats.html",
            {"teams": teams, "positions": positions, "stats": stats, "total_rounds": total},
        )

    static_dir = Path(__file__).parent / "static"
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    @app.on_event("startup")
    def on_startup():
        """Apre lo store, crea le tabelle e popola squadre/calendario se vuoti."""
        logging.basicConfig(level=get_log_level(), format="%(levelname)s [%(name)s] %(message)s")
        warn_if_default_password()
        app.state.store.open()
        app.state.store.init_db(seed=seed)
        logger.info("Startup completato: %s giornate in stagione", app.state.total_rounds)

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.store.close()

    return app


app = create_app()
