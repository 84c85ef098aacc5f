from app.core.config import get_database_url, get_total_rounds
from app.core.database import Base, ResultStore, get_db, get_store

__all__ = [
    "get_database_url",
    "get_total_rounds",
    "Base",
    "ResultStore",
    "get_db",
    "get_store",
]
