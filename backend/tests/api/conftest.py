"""API test fixtures — FastAPI test client with the events repository overridden.

Invariants:
    - get_event_repository overridden with an in-memory store per test
    - raise_app_exceptions=False so the catch-all 500 handler's response is observable

Design Decisions:
    - Overriding the repository (not get_db) keeps MongoDB entirely out of route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.routes.events import get_event_repository
from app.main import app
from tests.fakes import InMemoryEventRepository


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture
async def client(event_repo):
    app.dependency_overrides[get_event_repository] = lambda: event_repo

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
