"""Storage-backed permission checking.

Reads a user's explicit grants from the database and hands them, together
with the user's role, to the pure resolver in
``rolegate.core.permissions.resolver``.
"""

from typing import TYPE_CHECKING
from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rolegate.core.permissions.models import Permission, UserPermission
from rolegate.core.permissions.resolver import Actor, has_capability
from rolegate.core.permissions.roles import Role


if TYPE_CHECKING:
    from rolegate.modules.users.models import User


logger = structlog.get_logger()


class PermissionChecker:
    """Service for checking user permissions.

    Evaluates whether a user has a capability from their role defaults
    plus the permissions explicitly granted to them.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_user_grants(self, user_id: UUID) -> set[str]:
        """Get the names of permissions explicitly granted to a user.

        Args:
            user_id: The user's UUID

        Returns:
            Set of permission names
        """
        stmt = (
            select(Permission.name)
            .join(UserPermission, UserPermission.permission_id == Permission.id)
            .where(UserPermission.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def load_actor(self, user: "User") -> Actor:
        """Build the authorization view of a user.

        The grant lookup is skipped for super_admin, whose grants are
        never consulted.
        """
        role = Role(user.role)
        if role is Role.SUPER_ADMIN:
            return Actor(id=user.id, role=role)

        grants = await self.get_user_grants(user.id)
        return Actor(id=user.id, role=role, grants=frozenset(grants))

    async def has_permission(self, user: "User", permission: str) -> bool:
        """Check if a user holds a capability.

        Args:
            user: The user to check
            permission: Permission name, e.g. "grant_permissions"

        Returns:
            True if the user holds the capability
        """
        actor = await self.load_actor(user)
        if actor.role is Role.SUPER_ADMIN:
            logger.debug(
                "super_admin_bypass",
                user_id=str(user.id),
                permission=permission,
            )
        return has_capability(actor, permission)


async def check_permission(
    user: "User",
    permission: str,
    session: AsyncSession,
) -> bool:
    """Convenience function to check a user's permission.

    For scripts and handlers that hold a user rather than an Actor.
    """
    checker = PermissionChecker(session)
    return await checker.has_permission(user, permission)
