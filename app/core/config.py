"""Application configuration. Load from environment."""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TOTAL_ROUNDS = 18


def get_database_url() -> str:
    """Return DATABASE_URL from environment. Raises if missing."""
    url = os.environ.get("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    return url


def get_admin_credentials() -> tuple[str, str]:
    """Return (ADMIN_USER, ADMIN_PASS). Defaults are only meant for local use."""
    return (
        os.environ.get("ADMIN_USER", "admin"),
        os.environ.get("ADMIN_PASS", "changeme"),
    )


def get_total_rounds() -> int:
    """Return LEAGUE_TOTAL_ROUNDS (rounds in the season). Raises if not a positive integer."""
    raw = os.environ.get("LEAGUE_TOTAL_ROUNDS")
    if not raw:
        return DEFAULT_TOTAL_ROUNDS
    try:
        rounds = int(raw)
    except ValueError:
        raise RuntimeError(f"LEAGUE_TOTAL_ROUNDS must be an integer, got {raw!r}")
    if rounds < 1:
        raise RuntimeError(f"LEAGUE_TOTAL_ROUNDS must be >= 1, got {rounds}")
    return rounds


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
