"""Endpoint di debug per verificare le tabelle nel database."""

from fastapi import APIRouter, Depends

from app.core.database import ResultStore, get_store

router = APIRouter(tags=["debug"])


@router.get("/db-status")
def db_status(store: ResultStore = Depends(get_store)):
    """
    Restituisce l'elenco delle tabelle presenti.
    Solo per sviluppo/debug; non espone credenziali.
    """
    return {"tables": store.table_names()}
