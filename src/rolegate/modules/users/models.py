"""User database models."""

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from rolegate.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_ROLE_LENGTH
from rolegate.core.database.base import Base, TimestampMixin, UUIDMixin
from rolegate.core.permissions.roles import Role


class User(Base, UUIDMixin, TimestampMixin):
    """A principal subject to role and permission checks.

    Credentials live with the identity provider; this row only records
    who the principal is and which role they hold.

    Attributes:
        email: Unique email address
        name: Optional display name
        role: Exactly one of the four roles, ``user`` for new principals
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=True,
    )
    role: Mapped[Role] = mapped_column(
        Enum(
            Role,
            name="user_role",
            native_enum=False,
            create_constraint=True,
            length=MAX_ROLE_LENGTH,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        default=Role.USER,
        server_default=Role.USER.value,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
