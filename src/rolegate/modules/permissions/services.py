"""Permission grant service.

Granting and revoking are gated by the ``grant_permissions`` and
``revoke_permissions`` capabilities. Revoking is idempotent; granting
twice is a conflict.
"""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from rolegate.core.errors import ConflictError, NotFoundError
from rolegate.core.permissions import Actor, authorize
from rolegate.core.permissions.models import Permission, UserPermission
from rolegate.modules.permissions.repos import GrantRepo, PermissionRepo
from rolegate.modules.users.repos import UserRepo


logger = structlog.get_logger()


class PermissionService:
    """Service for the permission catalog and explicit grants."""

    def __init__(
        self,
        permissions: PermissionRepo,
        grants: GrantRepo,
        users: UserRepo,
    ) -> None:
        self.permissions = permissions
        self.grants = grants
        self.users = users

    async def list_catalog(self) -> list[Permission]:
        """Return the permission catalog."""
        return await self.permissions.list_all()

    async def list_user_grants(self, actor: Actor, user_id: UUID) -> list[UserPermission]:
        """Return the explicit grants of a user.

        Anyone may read their own grants; reading another user's requires
        ``view_permissions``.

        Raises:
            ForbiddenError: If reading someone else's grants without permission
            NotFoundError: If the user does not exist
        """
        if user_id != actor.id:
            authorize(actor, "view_permissions")
            await self._require_user(user_id)

        return await self.grants.list_for_user(user_id)

    async def grant_permission(
        self,
        actor: Actor,
        user_id: UUID,
        permission_id: UUID,
    ) -> UserPermission:
        """Grant a permission to a user.

        Args:
            actor: The acting principal, recorded as ``granted_by``
            user_id: The grantee
            permission_id: The permission to grant

        Returns:
            The new grant

        Raises:
            ForbiddenError: If the actor lacks grant_permissions
            NotFoundError: If the user or the permission does not exist
            ConflictError: If the user already holds the grant
        """
        authorize(actor, "grant_permissions")
        await self._require_user(user_id)

        permission = await self.permissions.get_by_id(permission_id)
        if not permission:
            raise NotFoundError(
                "Permission not found",
                resource="permission",
                resource_id=str(permission_id),
            )

        if await self.grants.get(user_id, permission_id):
            raise ConflictError(
                "Permission already granted",
                error_code="permission_already_granted",
                details={"user_id": str(user_id), "permission_id": str(permission_id)},
            )

        grant = await self.grants.create(
            UserPermission(
                user_id=user_id,
                permission_id=permission.id,
                permission=permission,
                granted_by=actor.id,
            )
        )
        logger.info(
            "permission_granted",
            user_id=str(user_id),
            permission=permission.name,
            granted_by=str(actor.id),
        )
        return grant

    async def revoke_permission(
        self,
        actor: Actor,
        user_id: UUID,
        permission_id: UUID,
    ) -> bool:
        """Revoke a permission from a user.

        Revoking a grant that does not exist, for a user or permission
        that may not exist either, succeeds and changes nothing.

        Returns:
            True if a grant was removed

        Raises:
            ForbiddenError: If the actor lacks revoke_permissions
        """
        authorize(actor, "revoke_permissions")

        removed = await self.grants.delete(user_id, permission_id)
        logger.info(
            "permission_revoked",
            user_id=str(user_id),
            permission_id=str(permission_id),
            revoked_by=str(actor.id),
            removed=removed,
        )
        return removed

    async def _require_user(self, user_id: UUID) -> None:
        if not await self.users.get_by_id(user_id):
            raise NotFoundError(
                "User not found",
                resource="user",
                resource_id=str(user_id),
            )


# Type alias for dependency injection
PermissionSvc = Annotated[PermissionService, Depends(PermissionService)]
