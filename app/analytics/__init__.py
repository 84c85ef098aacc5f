from app.analytics.ladder import compute_ladder, compute_position_history
from app.analytics.season_stats import compute_season_stats

__all__ = [
    "compute_ladder",
    "compute_position_history",
    "compute_season_stats",
]
