"""Unit tests for the user and permission services.

Repositories are replaced with AsyncMocks so only the service logic runs.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from rolegate.core.errors import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    SelfActionDeniedError,
)
from rolegate.core.permissions import Actor, Permission, PermissionCategory, Role, UserPermission
from rolegate.modules.permissions.services import PermissionService
from rolegate.modules.users.schemas import UserUpdate
from rolegate.modules.users.services import UserService
from tests.factories.user import UserCreateFactory, make_user


pytestmark = pytest.mark.unit


def as_actor(user, *grants: str) -> Actor:
    return Actor(id=user.id, role=user.role, grants=frozenset(grants))


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.update.side_effect = lambda user: user
    repo.create.side_effect = lambda user: user
    return repo


@pytest.fixture
def permission_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def grant_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_service(user_repo: AsyncMock) -> UserService:
    return UserService(user_repo)


@pytest.fixture
def permission_service(permission_repo, grant_repo, user_repo) -> PermissionService:
    return PermissionService(permission_repo, grant_repo, user_repo)


@pytest.fixture
def delete_users_permission() -> Permission:
    return Permission(
        id=uuid4(),
        name="delete_users",
        description="Can delete users",
        category=PermissionCategory.USER_MANAGEMENT,
    )


class TestUserService:
    """Tests for UserService."""

    async def test_get_user_not_found(self, user_service, user_repo):
        user_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_user(uuid4())

        assert exc_info.value.details["resource"] == "user"

    async def test_create_user_starts_as_user(self, user_service, user_repo):
        user_repo.get_by_email.return_value = None
        data = UserCreateFactory.build()

        user = await user_service.create_user(data)

        assert user.role is Role.USER
        assert user.email == data.email

    async def test_create_user_duplicate_email(self, user_service, user_repo):
        user_repo.get_by_email.return_value = make_user()

        with pytest.raises(ConflictError):
            await user_service.create_user(UserCreateFactory.build())

    async def test_list_users_hides_plain_users_from_users(self, user_service, user_repo):
        user_repo.list_users.return_value = ([], 0)
        viewer = make_user(Role.USER)

        await user_service.list_users(as_actor(viewer), page=2, page_size=5)

        roles, page, page_size = user_repo.list_users.call_args.args
        assert Role.USER not in roles
        assert (page, page_size) == (2, 5)

    async def test_change_role_promotes(self, user_service, user_repo):
        admin = make_user(Role.ADMIN)
        target = make_user(Role.USER)
        user_repo.get_by_id.return_value = target

        result = await user_service.change_role(as_actor(admin), target.id, Role.MODERATOR)

        assert result.role is Role.MODERATOR
        user_repo.update.assert_awaited_once()

    async def test_change_role_same_role_skips_write(self, user_service, user_repo):
        admin = make_user(Role.ADMIN)
        user_repo.get_by_id.return_value = admin

        result = await user_service.change_role(as_actor(admin), admin.id, Role.ADMIN)

        assert result.role is Role.ADMIN
        user_repo.update.assert_not_awaited()

    async def test_change_role_admin_self_demotion(self, user_service, user_repo):
        admin = make_user(Role.ADMIN)
        user_repo.get_by_id.return_value = admin

        with pytest.raises(SelfActionDeniedError):
            await user_service.change_role(as_actor(admin), admin.id, Role.USER)

        assert admin.role is Role.ADMIN

    async def test_change_role_missing_target(self, user_service, user_repo):
        user_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await user_service.change_role(as_actor(make_user(Role.ADMIN)), uuid4(), Role.USER)

    async def test_delete_self_denied(self, user_service, user_repo):
        admin = make_user(Role.ADMIN)
        user_repo.get_by_id.return_value = admin

        with pytest.raises(SelfActionDeniedError):
            await user_service.delete_user(as_actor(admin), admin.id)

        user_repo.delete.assert_not_awaited()

    async def test_delete_outranked_target(self, user_service, user_repo):
        target = make_user(Role.MODERATOR)
        user_repo.get_by_id.return_value = target

        await user_service.delete_user(as_actor(make_user(Role.ADMIN)), target.id)

        user_repo.delete.assert_awaited_once_with(target)

    async def test_update_requires_outranking(self, user_service, user_repo):
        target = make_user(Role.MODERATOR)
        user_repo.get_by_id.return_value = target

        with pytest.raises(ForbiddenError):
            await user_service.update_user(
                as_actor(make_user(Role.MODERATOR)), target.id, UserUpdate(name="Renamed")
            )

    async def test_update_self_allowed(self, user_service, user_repo):
        moderator = make_user(Role.MODERATOR)
        user_repo.get_by_id.return_value = moderator

        result = await user_service.update_user(
            as_actor(moderator), moderator.id, UserUpdate(name="Renamed")
        )

        assert result.name == "Renamed"


class TestPermissionService:
    """Tests for PermissionService."""

    async def test_grant_requires_capability(self, permission_service, grant_repo):
        moderator = make_user(Role.MODERATOR)

        with pytest.raises(ForbiddenError):
            await permission_service.grant_permission(as_actor(moderator), uuid4(), uuid4())

        grant_repo.create.assert_not_awaited()

    async def test_grant_unknown_user(self, permission_service, user_repo):
        user_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await permission_service.grant_permission(
                as_actor(make_user(Role.ADMIN)), uuid4(), uuid4()
            )

        assert exc_info.value.details["resource"] == "user"

    async def test_grant_unknown_permission(
        self, permission_service, user_repo, permission_repo
    ):
        user_repo.get_by_id.return_value = make_user()
        permission_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await permission_service.grant_permission(
                as_actor(make_user(Role.ADMIN)), uuid4(), uuid4()
            )

        assert exc_info.value.details["resource"] == "permission"

    async def test_grant_duplicate_conflicts(
        self, permission_service, user_repo, permission_repo, grant_repo, delete_users_permission
    ):
        target = make_user()
        user_repo.get_by_id.return_value = target
        permission_repo.get_by_id.return_value = delete_users_permission
        grant_repo.get.return_value = UserPermission(
            user_id=target.id, permission_id=delete_users_permission.id
        )

        with pytest.raises(ConflictError) as exc_info:
            await permission_service.grant_permission(
                as_actor(make_user(Role.ADMIN)), target.id, delete_users_permission.id
            )

        assert exc_info.value.error_code == "permission_already_granted"
        grant_repo.create.assert_not_awaited()

    async def test_grant_records_granter(
        self, permission_service, user_repo, permission_repo, grant_repo, delete_users_permission
    ):
        admin = make_user(Role.ADMIN)
        target = make_user()
        user_repo.get_by_id.return_value = target
        permission_repo.get_by_id.return_value = delete_users_permission
        grant_repo.get.return_value = None
        grant_repo.create.side_effect = lambda grant: grant

        grant = await permission_service.grant_permission(
            as_actor(admin), target.id, delete_users_permission.id
        )

        assert grant.granted_by == admin.id
        assert grant.user_id == target.id
        assert grant.permission_id == delete_users_permission.id

    async def test_revoke_missing_grant_succeeds(self, permission_service, grant_repo):
        grant_repo.delete.return_value = False

        removed = await permission_service.revoke_permission(
            as_actor(make_user(Role.ADMIN)), uuid4(), uuid4()
        )

        assert removed is False

    async def test_revoke_requires_capability(self, permission_service, grant_repo):
        with pytest.raises(ForbiddenError):
            await permission_service.revoke_permission(
                as_actor(make_user(Role.MODERATOR)), uuid4(), uuid4()
            )

        grant_repo.delete.assert_not_awaited()

    async def test_own_grants_need_no_permission(self, permission_service, grant_repo):
        user = make_user()
        grant_repo.list_for_user.return_value = []

        assert await permission_service.list_user_grants(as_actor(user), user.id) == []

    async def test_others_grants_need_view_permissions(self, permission_service):
        with pytest.raises(ForbiddenError):
            await permission_service.list_user_grants(as_actor(make_user()), uuid4())
