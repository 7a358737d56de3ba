"""Unit tests for the require_permission decorator."""

from uuid import uuid4

import pytest

from rolegate.core.errors import ForbiddenError, UnauthorizedError
from rolegate.core.permissions import Actor, Role, require_permission


pytestmark = pytest.mark.unit


@require_permission("delete_users")
async def protected(actor: Actor | None = None) -> str:
    """Handler requiring delete_users."""
    return "ok"


async def test_allows_actor_with_capability():
    assert await protected(actor=Actor(id=uuid4(), role=Role.ADMIN)) == "ok"


async def test_allows_explicit_grant():
    actor = Actor(id=uuid4(), role=Role.USER, grants=frozenset({"delete_users"}))

    assert await protected(actor=actor) == "ok"


async def test_denies_actor_without_capability():
    with pytest.raises(ForbiddenError):
        await protected(actor=Actor(id=uuid4(), role=Role.MODERATOR))


async def test_requires_actor():
    with pytest.raises(UnauthorizedError) as exc_info:
        await protected()

    assert exc_info.value.error_code == "auth_required"


def test_preserves_metadata():
    assert protected.__name__ == "protected"
    assert protected.__doc__ == "Handler requiring delete_users."
