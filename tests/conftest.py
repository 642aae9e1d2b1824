"""Shared fixtures.

The application engine is pointed at an in-memory SQLite database before
any ``app`` module is imported.
"""

import os

os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.db.init_db import init_db
from app.db.session import engine, get_db
from app.main import app
from app.models.team import StaffTeamLink, Team
from app.models.user import User


@pytest.fixture
def session():
    init_db(engine)
    with Session(engine) as s:
        yield s
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(session):
    app.dependency_overrides[get_db] = lambda: session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make(**fields) -> User:
        user = User(**fields)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_team(session):
    def _make(name: str, staff: list[User] = ()) -> Team:
        team = Team(name=name)
        session.add(team)
        session.commit()
        session.refresh(team)
        for s in staff:
            session.add(StaffTeamLink(staff_user_id=s.id, team_id=team.id))
        session.commit()
        return team

    return _make
