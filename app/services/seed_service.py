"""
Popolamento iniziale: le dieci squadre della lega e il calendario da 18 giornate.
Idempotente: inserisce solo se la tabella corrispondente è vuota.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models import Fixture, Team

logger = logging.getLogger(__name__)

# (code, name, color1, color2)
TEAMS: list[tuple[str, str, str, str]] = [
    ("TIG", "Camden Tigers", "#FF8C00", "#000000"),
    ("CAM", "Camden Falcons", "#D40000", "#000000"),
    ("OPR", "Oran Park Rovers", "#FFFFFF", "#000000"),
    ("HAR", "Harrington United", "#32CD32", "#001F3F"),
    ("ESC", "Eschol Park Wolves", "#800000", "#FFD700"),
    ("TAH", "Tahmoor SC", "#006A4E", "#FFFFFF"),
    ("GSC", "Gunners SC", "#D40000", "#FFFFFF"),
    ("NAR", "Narellan Rangers", "#4169E1", "#D40000"),
    ("STM", "St Marys Eaglevale", "#DAA520", "#006400"),
    ("GRH", "Gregory Hills Stallions", "#800080", "#FFD700"),
]

# Una lista per giornata, nell'ordine del calendario ufficiale
DRAW: list[list[str]] = [
    ["TAH v TIG", "STM v ESC", "OPR v GRH", "GSC v CAM", "NAR v HAR"],
    ["NAR v GRH", "CAM v TIG", "HAR v GSC", "TAH v STM", "ESC v OPR"],
    ["GSC v GRH", "NAR v ESC", "OPR v STM", "TAH v CAM", "TIG v HAR"],
    ["STM v NAR", "OPR v TAH", "GRH v TIG", "HAR v CAM", "ESC v GSC"],
    ["STM v GSC", "TIG v ESC", "TAH v HAR", "NAR v OPR", "CAM v GRH"],
    ["NAR v TAH", "OPR v GSC", "STM v TIG", "GRH v HAR", "ESC v CAM"],
    ["HAR v ESC", "GSC v NAR", "CAM v STM", "TAH v GRH", "TIG v OPR"],
    ["NAR v TIG", "OPR v CAM", "GSC v TAH", "ESC v GRH", "STM v HAR"],
    ["TIG v GSC", "GRH v STM", "HAR v OPR", "TAH v ESC", "CAM v NAR"],
    ["TIG v TAH", "GRH v OPR", "HAR v NAR", "ESC v STM", "CAM v GSC"],
    ["TIG v CAM", "STM v TAH", "GRH v NAR", "GSC v HAR", "OPR v ESC"],
    ["STM v OPR", "GRH v GSC", "ESC v NAR", "HAR v TIG", "CAM v TAH"],
    ["TIG v GRH", "TAH v OPR", "NAR v STM", "GSC v ESC", "CAM v HAR"],
    ["GRH v CAM", "OPR v NAR", "ESC v TIG", "HAR v TAH", "GSC v STM"],
    ["TAH v NAR", "TIG v STM", "HAR v GRH", "GSC v OPR", "CAM v ESC"],
    ["STM v CAM", "GRH v TAH", "NAR v GSC", "OPR v TIG", "ESC v HAR"],
    ["TAH v GSC", "TIG v NAR", "GRH v ESC", "HAR v STM", "CAM v OPR"],
    ["GSC v TIG", "STM v GRH", "NAR v CAM", "OPR v HAR", "ESC v TAH"],
]


def parse_pairing(pairing: str) -> tuple[str, str]:
    """'TAH v TIG' -> ('TAH', 'TIG'). Gli spazi interni ai codici vengono rimossi."""
    home, away = pairing.split("v", 1)
    return "".join(home.split()), "".join(away.split())


def seed_league(db: Session) -> tuple[int, int]:
    """Inserisce squadre e calendario se mancanti. Ritorna (squadre_inserite, fixture_inserite)."""
    teams_added = 0
    fixtures_added = 0

    if not db.scalar(select(func.count()).select_from(Team)):
        db.add_all(Team(code=c, name=n, color1=c1, color2=c2) for c, n, c1, c2 in TEAMS)
        teams_added = len(TEAMS)

    if not db.scalar(select(func.count()).select_from(Fixture)):
        for round_number, pairings in enumerate(DRAW, start=1):
            for pairing in pairings:
                home, away = parse_pairing(pairing)
                db.add(Fixture(round=round_number, home_code=home, away_code=away))
                fixtures_added += 1

    if teams_added or fixtures_added:
        db.commit()
        logger.info("Seed completato: %s squadre, %s fixture", teams_added, fixtures_added)
    else:
        logger.info("Seed non necessario: dati già presenti")
    return teams_added, fixtures_added
