"""
Notes API: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped):
    ├── clock:          Controllable UTC clock, advanced explicitly by tests
    ├── note_service:   Fresh NoteService (empty store) driven by `clock`
    └── test_client:    HTTPX AsyncClient against the app, with the
                        get_note_service dependency bound to `note_service`
"""

import os
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

from notes_api.services.note_service import NoteService, get_note_service  # noqa: E402


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def note_service(clock):
    """A NoteService with its own empty store, isolated from other tests."""
    return NoteService(clock=clock)


@pytest_asyncio.fixture
async def test_client(note_service):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from notes_api.main import app

    app.dependency_overrides[get_note_service] = lambda: note_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
