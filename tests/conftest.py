"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app, create_scheduler


@pytest.fixture(autouse=True)
def fresh_scheduler():
    """Every test starts from the startup state of the intersection."""
    app.state.scheduler = create_scheduler()
    yield app.state.scheduler


@pytest.fixture
async def client():
    """Async test client fixture."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
