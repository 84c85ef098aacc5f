"""SQLAlchemy engine, session, dependency e ciclo di vita dello store."""

import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import get_database_url

logger = logging.getLogger(__name__)

Base = declarative_base()


class ResultStore:
    """
    Handle esplicito verso il database di squadre e fixture.
    Aperto allo startup dell'app e chiuso allo shutdown; nessun engine globale.
    L'URL viene risolto in open(), così importare l'app non richiede DATABASE_URL.
    """

    def __init__(self, database_url: str | None = None):
        self._database_url = database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("ResultStore non aperto: chiamare open() prima dell'uso")
        return self._engine

    def open(self) -> None:
        if self._engine is not None:
            return
        url = self._database_url or get_database_url()
        if url.startswith("sqlite"):
            # SQLite in-memory: una sola connessione condivisa tra i thread del server di test
            self._engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=False,
            )
        else:
            self._engine = create_engine(url, pool_pre_ping=True, echo=False)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self._engine)
        logger.info("ResultStore aperto (%s)", self._engine.url.get_backend_name())

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("ResultStore chiuso")

    def session(self) -> Session:
        """Nuova sessione ORM. Il chiamante deve chiuderla."""
        if self._session_factory is None:
            raise RuntimeError("ResultStore non aperto: chiamare open() prima dell'uso")
        return self._session_factory()

    def init_db(self, seed: bool = True) -> None:
        """
        Crea le tabelle mancanti e, se richiesto, popola squadre e calendario.
        I modelli devono essere importati prima per registrare i metadata.
        """
        from app.models import fixture, team  # noqa: F401
        from app.services.seed_service import seed_league

        Base.metadata.create_all(bind=self.engine)
        logger.info("create_all completato")

        if seed:
            db = self.session()
            try:
                seed_league(db)
            finally:
                db.close()

    def table_names(self) -> list[str]:
        return sorted(inspect(self.engine).get_table_names())


def get_store(request: Request) -> ResultStore:
    return request.app.state.store


def get_db(request: Request) -> Iterator[Session]:
    """Dependency that yields a DB session from the app's store. Closed after the request."""
    db = get_store(request).session()
    try:
        yield db
    finally:
        db.close()
