import os

os.environ.setdefault("DISABLE_SCHEDULER", "1")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from goodbuddi.db import get_db, init_db
from goodbuddi.deps import get_viewers
from goodbuddi.main import app
from goodbuddi.store import CalendarStore
from goodbuddi.viewer import ViewerRegistry


@pytest.fixture
def engine():
    """Fresh in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return CalendarStore(db)


@pytest.fixture
def chimes():
    return []


@pytest.fixture
def registry(chimes):
    return ViewerRegistry(chime=lambda cue, label: chimes.append((cue, label)))


@pytest.fixture
def client(session_factory, registry):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_viewers] = lambda: registry
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
