import os

os.environ.setdefault("TEST_MODE", "true")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session

from ligas_backend import models  # noqa: F401  (registers every table)
from ligas_backend.core import config, database
from ligas_backend.core.security import issue_token
from ligas_backend.models import Coach, League, Player, Team


@pytest.fixture
def engine(tmp_path, monkeypatch):
    """File backed SQLite engine so several threads/sessions can share the data."""
    test_engine = database.build_engine(f"sqlite:///{tmp_path / 'ligas_test.db'}")
    SQLModel.metadata.create_all(test_engine)
    monkeypatch.setattr(database, "engine", test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def client(engine):
    from ligas_backend.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_headers():
    token = issue_token("user@test.com", [config.ROLE_USER])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    token = issue_token(config.ADMIN_EMAIL, [config.ROLE_ADMIN, config.ROLE_USER])
    return {"Authorization": f"Bearer {token}"}


# -------------------------------
# Row builders
# -------------------------------
@pytest.fixture
def make_league(session):
    def _make(name="Liga Norte", description=None):
        league = League(name=name, description=description)
        session.add(league)
        session.commit()
        session.refresh(league)
        return league
    return _make


@pytest.fixture
def make_team(session):
    def _make(name="Team", league=None, coach=None, wins=0):
        team = Team(
            name=name,
            league_id=league.id if league else None,
            coach_id=coach.id if coach else None,
            wins=wins,
        )
        session.add(team)
        session.commit()
        session.refresh(team)
        return team
    return _make


@pytest.fixture
def make_coach(session):
    def _make(name="Coach Carter", email=None):
        coach = Coach(name=name, email=email)
        session.add(coach)
        session.commit()
        session.refresh(coach)
        return coach
    return _make


@pytest.fixture
def make_player(session):
    def _make(name="Player", age=20, team=None):
        player = Player(name=name, age=age, team_id=team.id if team else None)
        session.add(player)
        session.commit()
        session.refresh(player)
        return player
    return _make
