"""Error Normalizer over HTTP — unhandled failures become one opaque 500.

Invariants:
    - GET /api/throw → exactly 500 {"error": "Internal server error."}
    - Storage failures (DatabaseError) are not leaked either
    - Unknown routes still use the {"error": ...} envelope
    - With diagnostics disabled the throwing route does not exist and its path
      is no longer exempt from the authentication gate
"""

from httpx import ASGITransport, AsyncClient

from blog_api.api.dependencies import get_gateway
from blog_api.config import Settings
from blog_api.core.errors import DatabaseError
from blog_api.main import app, create_app


async def test_throw_endpoint_returns_opaque_500(client):
    res = await client.get("/api/throw")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error."}
    assert "Test exception" not in res.text


async def test_throw_endpoint_with_token_is_still_500(auth_client):
    res = await auth_client.get("/api/throw")
    assert res.status_code == 500


async def test_database_error_is_normalized(auth_client):
    class BrokenGateway:
        async def list_all(self, kind):
            raise DatabaseError("Connection or operational error", "execute")

    app.dependency_overrides[get_gateway] = lambda: BrokenGateway()

    res = await auth_client.get("/api/blogs")

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error."}


async def test_unknown_route_uses_error_envelope(auth_client):
    res = await auth_client.get("/api/comments")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


async def test_diagnostics_can_be_disabled():
    quiet_app = create_app(Settings(enable_diagnostics=False))

    async with AsyncClient(
        transport=ASGITransport(app=quiet_app), base_url="http://test",
    ) as c:
        anonymous = await c.get("/api/throw")
        authenticated = await c.get(
            "/api/throw", headers={"Authorization": "Bearer valid-token"},
        )

    assert anonymous.status_code == 401
    assert anonymous.json() == {"error": "Unauthorized"}
    assert authenticated.status_code == 404
