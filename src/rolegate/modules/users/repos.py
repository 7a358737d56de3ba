"""User repository for database operations."""

from collections.abc import Collection
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import func, select

from rolegate.api.dependencies import DBSession
from rolegate.core.permissions.roles import Role
from rolegate.modules.users.models import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User instance to create

        Returns:
            The created user with ID and timestamps populated
        """
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by ID."""
        result = await self.session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_users(
        self,
        roles: Collection[Role] | None = None,
        page: int = 1,
        page_size: int = 20,
    ) -> tuple[list[User], int]:
        """List users, newest first, with pagination.

        Args:
            roles: Only include users holding one of these roles; all if None
            page: Page number (1-indexed)
            page_size: Number of items per page

        Returns:
            Tuple of (users list, total count)
        """
        count_stmt = select(func.count()).select_from(User)
        stmt = select(User)
        if roles is not None:
            count_stmt = count_stmt.where(User.role.in_(list(roles)))
            stmt = stmt.where(User.role.in_(list(roles)))

        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            stmt.order_by(User.created_at.desc(), User.email)
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def update(self, user: User) -> User:
        """Flush pending changes on a user and reload it."""
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        """Delete a user. Their explicit grants go with them."""
        await self.session.delete(user)
        await self.session.flush()


# Type alias for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
