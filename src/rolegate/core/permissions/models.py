"""Permission storage models.

- Permission: one entry of the seeded permission catalog
- UserPermission: an explicit grant of a permission to a user, beyond
  the defaults of their role
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Enum, ForeignKey, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolegate.core.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_PERMISSION_CATEGORY_LENGTH,
    MAX_PERMISSION_NAME_LENGTH,
)
from rolegate.core.database.base import Base, CreatedAtMixin, UUIDMixin
from rolegate.core.permissions.catalog import PermissionCategory


class Permission(Base, UUIDMixin, CreatedAtMixin):
    """A named capability from the catalog.

    Permissions are reference data: defined once by seeding and shared by
    every user.

    Attributes:
        name: Unique, case-sensitive permission name (e.g. "delete_users")
        description: Human-readable description
        category: Catalog grouping
    """

    __tablename__ = "permissions"

    name: Mapped[str] = mapped_column(
        String(MAX_PERMISSION_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    description: Mapped[str] = mapped_column(
        String(MAX_DESCRIPTION_LENGTH),
        nullable=False,
    )
    category: Mapped[PermissionCategory] = mapped_column(
        Enum(
            PermissionCategory,
            name="permission_category",
            native_enum=False,
            create_constraint=True,
            length=MAX_PERMISSION_CATEGORY_LENGTH,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Permission({self.name})>"


class UserPermission(Base, UUIDMixin):
    """Explicit grant of a permission to a user.

    Unique per (user_id, permission_id); the database constraint is the
    authority for duplicate detection. Rows disappear with their user or
    permission through ON DELETE CASCADE.

    Attributes:
        user_id: The grantee
        permission_id: The granted permission
        granted_by: The acting user at grant time, kept for audit only
        granted_at: When the grant was created
    """

    __tablename__ = "user_permissions"
    __table_args__ = (
        UniqueConstraint("user_id", "permission_id", name="uq_user_permission"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    permission_id: Mapped[UUID] = mapped_column(
        ForeignKey("permissions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    granted_by: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    granted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    permission: Mapped["Permission"] = relationship(
        "Permission",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserPermission(user_id={self.user_id}, permission_id={self.permission_id})>"
