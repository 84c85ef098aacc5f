from app.routers.admin import router as admin_router
from app.routers.db_status import router as db_status_router
from app.routers.health import router as health_router
from app.routers.league import router as league_router

__all__ = ["health_router", "db_status_router", "league_router", "admin_router"]
