"""API test fixtures — FastAPI app over a per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - Lifespan is not run: schema comes from the test_engine fixture
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.infrastructure.database import get_db
from blog_api.main import app

AUTH_HEADERS = {"Authorization": "Bearer valid-token"}


@pytest.fixture
async def client(test_session_factory):
    """Unauthenticated client: tests pass headers explicitly."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def auth_client(client):
    """Client that sends the valid bearer token on every request."""
    client.headers.update(AUTH_HEADERS)
    return client
