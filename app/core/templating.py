"""Jinja2 templates condivisi da pagine e router."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

templates_dir = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


def team_style(color1: str | None, color2: str | None) -> str:
    """Stile inline del badge squadra: gradiente tra i due colori sociali."""
    return (
        f"background: linear-gradient(90deg, {color1 or '#888'}, {color2 or '#444'}); "
        "color:#fff; border:1px solid rgba(0,0,0,.2);"
    )


templates.env.globals["team_style"] = team_style
