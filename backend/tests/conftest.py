"""
Shared fixtures. Tests run on an in-memory SQLite database with foreign keys
switched on, so cascade/restrict rules behave like Postgres.
Run: cd backend && python -m pytest tests/ -v
"""
import os

# Must be set before liftlog.settings is first imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["TIMEZONE"] = "UTC"

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from liftlog import models  # noqa: F401  # registers tables
from liftlog.db import Base, get_db, make_engine
from liftlog.main import app
from liftlog.models import Exercise
from liftlog.security import create_access_token


@pytest.fixture
def engine():
    eng = make_engine(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def owner():
    return f"user_{uuid.uuid4().hex[:12]}"


def auth_headers(owner_id):
    return {"Authorization": f"Bearer {create_access_token(owner_id)}"}


def add_exercises(db, *pairs):
    """pairs of (name, category); returns the created rows in the same order."""
    rows = [Exercise(name=n, category=c) for n, c in pairs]
    db.add_all(rows)
    db.commit()
    return rows
