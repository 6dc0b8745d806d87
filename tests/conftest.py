"""
Pytest fixtures shared across the unit and integration suites.

The environment is pinned before the application is imported: an in-memory
SQLite database and UTC calendar days for streaks.
"""
from __future__ import annotations

import os
from datetime import datetime, timezone

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STREAK_TIMEZONE"] = "UTC"
os.environ["ENABLE_CORS"] = "true"
os.environ.pop("LOG_DIR", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from tests.lib import MoodGardenApiClient


class FakeClock:
    """Mutable stand-in for the request clock."""

    def __init__(self, now: datetime):
        self.now = now

    def set(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def session():
    """Fresh in-memory database per test for service-level tests."""
    from mood_garden import models  # noqa: F401

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db_session:
        yield db_session
    engine.dispose()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def api_client(clock: FakeClock) -> MoodGardenApiClient:
    """
    API client against the in-process app, with a clean database and the
    request clock pinned to ``clock``.
    """
    from mood_garden.api.dependencies import get_now
    from mood_garden.core.database import engine
    from mood_garden.main import app

    SQLModel.metadata.drop_all(engine)
    app.dependency_overrides[get_now] = clock
    with TestClient(app, raise_server_exceptions=False) as client:
        yield MoodGardenApiClient(client)
    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Session on the application's own engine, for checking what a request stored."""
    from mood_garden.core.database import get_session_context

    with get_session_context() as app_session:
        yield app_session
