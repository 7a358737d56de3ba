"""Unit tests for the storage-backed permission checker and catalog seeding."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from rolegate.core.permissions import (
    CATALOG_NAMES,
    Permission,
    PermissionChecker,
    Role,
    check_permission,
)
from rolegate.core.permissions.seed import seed_permission_catalog


pytestmark = pytest.mark.unit


class TestSeedPermissionCatalog:
    """Tests for seed_permission_catalog."""

    async def test_seeds_every_permission(self, db: AsyncSession):
        created = await seed_permission_catalog(db)

        assert {p.name for p in created} == CATALOG_NAMES

    async def test_is_idempotent(self, db: AsyncSession):
        await seed_permission_catalog(db)
        created_again = await seed_permission_catalog(db)

        count = (await db.execute(select(func.count()).select_from(Permission))).scalar_one()
        assert created_again == []
        assert count == len(CATALOG_NAMES)


class TestPermissionChecker:
    """Tests for PermissionChecker."""

    async def test_role_defaults(self, db: AsyncSession, catalog, plain_user):
        checker = PermissionChecker(db)

        assert await checker.has_permission(plain_user, "view_users") is True
        assert await checker.has_permission(plain_user, "delete_users") is False

    async def test_explicit_grant(self, db: AsyncSession, catalog, grant, plain_user):
        await grant(plain_user, catalog["delete_users"])

        assert await check_permission(plain_user, "delete_users", db) is True
        assert await check_permission(plain_user, "create_users", db) is False

    async def test_grants_are_per_user(self, db: AsyncSession, catalog, grant, create_user):
        granted = await create_user(Role.USER)
        other = await create_user(Role.USER)
        await grant(granted, catalog["delete_users"])

        assert await check_permission(other, "delete_users", db) is False

    async def test_load_actor_collects_grant_names(
        self, db: AsyncSession, catalog, grant, moderator
    ):
        await grant(moderator, catalog["delete_users"])
        await grant(moderator, catalog["grant_permissions"])

        actor = await PermissionChecker(db).load_actor(moderator)

        assert actor.id == moderator.id
        assert actor.role is Role.MODERATOR
        assert actor.grants == {"delete_users", "grant_permissions"}

    async def test_super_admin_grants_are_inert(
        self, db: AsyncSession, catalog, grant, super_admin
    ):
        """A super admin may hold grants; they are simply never consulted."""
        await grant(super_admin, catalog["system_settings"])

        actor = await PermissionChecker(db).load_actor(super_admin)

        assert actor.grants == frozenset()
        assert await check_permission(super_admin, "anything_at_all", db) is True
