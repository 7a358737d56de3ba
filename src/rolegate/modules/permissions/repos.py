"""Permission and grant repositories."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from rolegate.api.dependencies import DBSession
from rolegate.core.errors import ConflictError
from rolegate.core.permissions.models import Permission, UserPermission


class PermissionRepository:
    """Read access to the permission catalog."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def list_all(self) -> list[Permission]:
        """Get every permission, ordered by category then name."""
        result = await self.session.execute(
            select(Permission).order_by(Permission.category, Permission.name)
        )
        return list(result.scalars().all())

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        """Get a permission by ID."""
        result = await self.session.execute(
            select(Permission).where(Permission.id == permission_id)
        )
        return result.scalar_one_or_none()


class GrantRepository:
    """Repository for explicit permission grants."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get(self, user_id: UUID, permission_id: UUID) -> UserPermission | None:
        """Get the grant of one permission to one user, if any."""
        result = await self.session.execute(
            select(UserPermission).where(
                UserPermission.user_id == user_id,
                UserPermission.permission_id == permission_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> list[UserPermission]:
        """Get all grants of a user, oldest first."""
        result = await self.session.execute(
            select(UserPermission)
            .where(UserPermission.user_id == user_id)
            .order_by(UserPermission.granted_at)
        )
        return list(result.scalars().all())

    async def create(self, grant: UserPermission) -> UserPermission:
        """Store a new grant.

        The unique constraint on (user_id, permission_id) decides
        duplicates, so two concurrent grants cannot both succeed.

        Raises:
            ConflictError: If the user already holds the grant
        """
        details = {
            "user_id": str(grant.user_id),
            "permission_id": str(grant.permission_id),
        }
        try:
            # Only the savepoint is rolled back on conflict, not the caller's work
            async with self.session.begin_nested():
                self.session.add(grant)
                await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Permission already granted",
                error_code="permission_already_granted",
                details=details,
            ) from exc

        await self.session.refresh(grant, attribute_names=["granted_at"])
        return grant

    async def delete(self, user_id: UUID, permission_id: UUID) -> bool:
        """Remove a grant.

        Returns:
            True if a grant was removed, False if there was none
        """
        result = await self.session.execute(
            delete(UserPermission).where(
                UserPermission.user_id == user_id,
                UserPermission.permission_id == permission_id,
            )
        )
        await self.session.flush()
        return result.rowcount > 0


# Type aliases for dependency injection
PermissionRepo = Annotated[PermissionRepository, Depends(PermissionRepository)]
GrantRepo = Annotated[GrantRepository, Depends(GrantRepository)]
