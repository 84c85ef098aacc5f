import pytest
from fastapi.testclient import TestClient

from app.core.database import ResultStore
from app.main import create_app
from app.models import Fixture, Team

ADMIN = ("admin", "s3cret")


def make_team(code, name=None):
    return Team(code=code, name=name or f"Team {code}", color1="#000000", color2="#FFFFFF")


def make_fixture(fid, round_number, home, away, home_goals=None, away_goals=None):
    return Fixture(
        id=fid,
        round=round_number,
        home_code=home,
        away_code=away,
        home_goals=home_goals,
        away_goals=away_goals,
    )


@pytest.fixture
def abcd_teams():
    return [make_team("A"), make_team("B"), make_team("C"), make_team("D")]


@pytest.fixture
def store():
    s = ResultStore("sqlite://")
    s.open()
    s.init_db(seed=True)
    yield s
    s.close()


@pytest.fixture
def db(store):
    session = store.session()
    yield session
    session.close()


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("ADMIN_USER", ADMIN[0])
    monkeypatch.setenv("ADMIN_PASS", ADMIN[1])
    app = create_app(store=ResultStore("sqlite://"), total_rounds=18)
    with TestClient(app) as c:
        yield c
