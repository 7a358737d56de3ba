"""Integration tests for the roles endpoint."""

import pytest
from httpx import AsyncClient


pytestmark = pytest.mark.integration


async def test_list_roles(client: AsyncClient, plain_user, headers_for):
    """GET /roles should list all four roles in ascending order."""
    response = await client.get("/api/v1/roles", headers=headers_for(plain_user))

    assert response.status_code == 200
    roles = response.json()
    assert [r["name"] for r in roles] == ["user", "moderator", "admin", "super_admin"]
    assert [r["rank"] for r in roles] == [0, 1, 2, 3]
    assert roles[0]["default_permissions"] == ["view_roles", "view_users"]
    assert [r["is_wildcard"] for r in roles] == [False, False, False, True]


async def test_list_roles_requires_auth(client: AsyncClient):
    response = await client.get("/api/v1/roles")

    assert response.status_code == 401
