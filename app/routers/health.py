"""Health check router."""

from fastapi import APIRouter, Depends

from app.core.database import ResultStore, get_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: ResultStore = Depends(get_store)):
    """Health check for load balancers and monitoring. Reports whether the result store is open."""
    return {"status": "healthy" if store.is_open else "starting", "store_open": store.is_open}
