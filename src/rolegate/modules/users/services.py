"""User service for business logic.

Every authorization decision is delegated to ``rolegate.core.permissions``;
this service only loads the data those decisions need and applies the
result.
"""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from rolegate.core.errors import ConflictError, ForbiddenError, NotFoundError
from rolegate.core.permissions import (
    Actor,
    Role,
    authorize_role_assignment,
    authorize_user_deletion,
    can_manage_role,
    visible_roles,
)
from rolegate.modules.users.models import User
from rolegate.modules.users.repos import UserRepo
from rolegate.modules.users.schemas import UserCreate, UserUpdate


logger = structlog.get_logger()


class UserService:
    """Service for user management operations."""

    def __init__(self, repo: UserRepo) -> None:
        self.repo = repo

    async def get_user(self, user_id: UUID) -> User:
        """Get a user by ID.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(
                "User not found",
                resource="user",
                resource_id=str(user_id),
            )
        return user

    async def list_users(
        self,
        actor: Actor,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[list[User], int]:
        """List the users visible to ``actor``.

        Args:
            actor: The acting principal
            page: Page number
            page_size: Items per page

        Returns:
            Tuple of (users list, total count)
        """
        return await self.repo.list_users(visible_roles(actor), page, page_size)

    async def create_user(self, data: UserCreate) -> User:
        """Register a principal with role ``user``.

        Raises:
            ConflictError: If the email is already registered
        """
        if await self.repo.get_by_email(data.email):
            raise ConflictError(
                "Email already registered",
                error_code="email_exists",
                details={"email": data.email},
            )

        user = await self.repo.create(
            User(email=data.email, name=data.name, role=Role.USER)
        )
        logger.info("user_created", user_id=str(user.id))
        return user

    async def update_user(self, actor: Actor, user_id: UUID, data: UserUpdate) -> User:
        """Update a user's profile.

        Editing someone else requires outranking them, the same way role
        changes and deletions do.

        Raises:
            NotFoundError: If user not found
            ForbiddenError: If the actor does not outrank the target
            ConflictError: If the new email is already in use
        """
        user = await self.get_user(user_id)

        if user.id != actor.id and not can_manage_role(actor.role, user.role):
            raise ForbiddenError(
                f"You don't have permission to edit {user.role.value}s",
                error_code="role_rank_insufficient",
                details={"role": actor.role.value, "target_role": user.role.value},
            )

        if data.email and data.email != user.email:
            if await self.repo.get_by_email(data.email):
                raise ConflictError(
                    "Email already in use",
                    error_code="email_exists",
                    details={"email": data.email},
                )
            user.email = data.email

        if data.name:
            user.name = data.name

        return await self.repo.update(user)

    async def change_role(self, actor: Actor, user_id: UUID, new_role: Role) -> User:
        """Assign ``new_role`` to a user.

        Raises:
            NotFoundError: If user not found
            SelfActionDeniedError: If an admin targets their own role
            ForbiddenError: If rank or capability is insufficient
        """
        user = await self.get_user(user_id)
        authorize_role_assignment(actor, user.id, new_role, current_role=user.role)

        if user.role is new_role:
            return user

        previous_role = user.role
        user.role = new_role
        user = await self.repo.update(user)

        logger.info(
            "role_assigned",
            user_id=str(user.id),
            previous_role=previous_role.value,
            new_role=new_role.value,
            assigned_by=str(actor.id),
        )
        return user

    async def delete_user(self, actor: Actor, user_id: UUID) -> None:
        """Delete a user and, through the database cascade, their grants.

        Raises:
            NotFoundError: If user not found
            SelfActionDeniedError: If the actor targets themselves
            ForbiddenError: If capability or rank is insufficient
        """
        user = await self.get_user(user_id)
        authorize_user_deletion(actor, user.id, user.role)

        await self.repo.delete(user)
        logger.info(
            "user_deleted",
            user_id=str(user_id),
            role=user.role.value,
            deleted_by=str(actor.id),
        )


# Type alias for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
