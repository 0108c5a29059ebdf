# Set test environment before any application or db imports.
import os

os.environ["TESTING"] = "true"
os.environ["TESTING_DATABASE_URL"] = "sqlite:///:memory:"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from api.reports import get_rate_limiter
from db import get_db
from main import app
from models import Base
from models.location import Location  # noqa: F401 - register with Base
from models.report import Report  # noqa: F401
from repositories.location_repository import create_location
from status_core.anti_spam import FixedWindowRateLimiter
from status_core.clock import utcnow


def _sqlite_fk(dbapi_conn, connection_record):
    dbapi_conn.execute("PRAGMA foreign_keys=ON")


@pytest.fixture
def engine():
    """Fresh in-memory database per test, so committed rows never leak between tests."""
    eng = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(eng, "connect", _sqlite_fk)
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture
def db_session(engine):
    """Function-scoped session on the per-test database; repositories may commit freely."""
    session = Session(bind=engine)
    try:
        yield session
    finally:
        session.close()


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def rate_limiter():
    """Fresh limiter per test so submissions in one test never throttle another."""
    return FixedWindowRateLimiter(window_seconds=300, max_hits=3)


@pytest.fixture
def client(db_session, rate_limiter):
    """API test client; overrides get_db and the rate limiter, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def now():
    """Reference time for building backdated reports."""
    return utcnow()


@pytest.fixture
def hours_ago(now):
    """hours_ago(h) -> datetime h hours before now."""
    def _at(h: float):
        return now - timedelta(hours=h)
    return _at


@pytest.fixture
def make_location(db_session):
    """make_location(id, **fields) creates a location with Amsterdam defaults."""
    def _make(location_id: str, **overrides) -> Location:
        fields = {
            "name": f"Machine {location_id}",
            "retailer": "Albert Heijn",
            "lat": 52.37,
            "lng": 4.89,
            "address": "Teststraat 1",
            "city": "Amsterdam",
        }
        fields.update(overrides)
        return create_location(db_session, location_id=location_id, **fields)
    return _make
