"""Error body contract.

- 404: single top-level key "detail" (string), never a filesystem path.
- 500: {"detail": "Internal server error"} only.
"""

import pytest
from httpx import AsyncClient

from hosting_api.services import hosting_service


@pytest.mark.asyncio
async def test_404_response_has_only_detail_key(client: AsyncClient):
    for path in ("/api/project/acme/ghost/status", "/api/project/acme/ghost/static/index.html"):
        response = await client.get(path)
        assert response.status_code == 404
        body = response.json()
        assert list(body.keys()) == ["detail"]
        assert isinstance(body["detail"], str)


@pytest.mark.asyncio
async def test_unknown_route_is_404(client: AsyncClient):
    response = await client.get("/api/project/acme")
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("attr", "path"),
    [
        ("check_hosting", "/api/project/acme/site/hosting"),
        ("list_hosted_projects", "/api/projects/list"),
        ("get_status", "/api/project/acme/site/status"),
    ],
)
async def test_unexpected_error_returns_generic_500(client: AsyncClient, monkeypatch, attr, path):
    def boom(*args, **kwargs):
        raise OSError("/secret/internal/path is unreadable")

    monkeypatch.setattr(hosting_service, attr, boom)
    response = await client.get(path)
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "secret" not in response.text
