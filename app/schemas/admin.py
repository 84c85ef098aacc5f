"""
Richiesta tipizzata di aggiornamento punteggi dal form admin.
Il form invia campi score_<fixture_id>_<home|away>; qui diventano triple esplicite
(fixture_id, side, value) già validate e normalizzate prima di arrivare allo store.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Literal, Mapping

from pydantic import BaseModel, field_validator

Side = Literal["home", "away"]

SCORE_FIELD_RE = re.compile(r"^score_(\d+)_(home|away)$")


class ScoreEntry(BaseModel):
    fixture_id: int
    side: Side
    value: int | None = None  # None = partita non giocata

    @field_validator("value")
    @classmethod
    def clamp_negative(cls, v: int | None) -> int | None:
        if v is None:
            return None
        return max(0, v)


class ScoreBatch(BaseModel):
    entries: list[ScoreEntry] = []

    def by_fixture(self) -> dict[int, tuple[int | None, int | None]]:
        """
        Raggruppa le triple per fixture: {fixture_id: (home_goals, away_goals)}.
        Un lato assente dal form resta None, come nell'aggiornamento di entrambe le colonne.
        """
        grouped: dict[int, dict[str, int | None]] = {}
        for entry in self.entries:
            sides = grouped.setdefault(entry.fixture_id, {"home": None, "away": None})
            sides[entry.side] = entry.value
        return {fid: (s["home"], s["away"]) for fid, s in grouped.items()}


def parse_goals(raw: Any) -> int | None:
    """
    '' (o solo spazi) -> None; numero -> parte intera ("3.0" -> 3, "1.5" -> 1, come parseInt).
    I negativi vengono portati a 0 da ScoreEntry. Valore non numerico -> ValueError.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if text == "":
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Punteggio non valido: {raw!r}")
    if not value.is_finite():
        raise ValueError(f"Punteggio non valido: {raw!r}")
    return int(value)


def parse_score_form(form: Mapping[str, Any]) -> ScoreBatch:
    """Costruisce uno ScoreBatch dai campi del form admin. I campi non riconosciuti sono ignorati."""
    entries = []
    for key, raw in form.items():
        m = SCORE_FIELD_RE.match(key)
        if not m:
            continue
        entries.append(
            ScoreEntry(fixture_id=int(m.group(1)), side=m.group(2), value=parse_goals(raw))
        )
    return ScoreBatch(entries=entries)
