"""Pydantic schemas for user operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from rolegate.core.constants import MAX_NAME_LENGTH
from rolegate.core.permissions.roles import Role


class UserBase(BaseModel):
    """Base schema for user data."""

    email: EmailStr
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)


class UserCreate(UserBase):
    """Schema for creating a user. New users always start with role ``user``."""


class UserUpdate(BaseModel):
    """Schema for updating user profile data."""

    email: EmailStr | None = None
    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)


class RoleUpdate(BaseModel):
    """Schema for changing a user's role."""

    role: Role


class UserResponse(UserBase):
    """Schema for user response data."""

    id: UUID
    role: Role
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    """Schema for listing users."""

    items: list[UserResponse]
    total: int
    page: int
    page_size: int
    current_user_role: Role
