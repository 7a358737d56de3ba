"""Tests for the seed script helpers."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from rolegate.core.permissions import Role
from scripts.seed import DEMO_USERS, bootstrap_super_admin, seed_demo_users


pytestmark = pytest.mark.integration


async def test_bootstrap_creates_super_admin(db: AsyncSession):
    user = await bootstrap_super_admin(db, "root@example.com")

    assert user.role is Role.SUPER_ADMIN
    assert user.id is not None


async def test_bootstrap_promotes_existing(db: AsyncSession, admin):
    user = await bootstrap_super_admin(db, admin.email)

    assert user.id == admin.id
    assert user.role is Role.SUPER_ADMIN


async def test_demo_users_are_idempotent(db: AsyncSession):
    first = await seed_demo_users(db)
    second = await seed_demo_users(db)

    assert len(first) == len(DEMO_USERS)
    assert second == []
