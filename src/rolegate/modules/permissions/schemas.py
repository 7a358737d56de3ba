"""Pydantic schemas for permission operations."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from rolegate.core.permissions import PermissionCategory, Role


class PermissionResponse(BaseModel):
    """A catalog permission."""

    id: UUID
    name: str
    description: str
    category: PermissionCategory

    model_config = ConfigDict(from_attributes=True)


class PermissionListResponse(BaseModel):
    """The full catalog."""

    permissions: list[PermissionResponse]


class GrantCreate(BaseModel):
    """Request body for granting a permission."""

    permission_id: UUID


class GrantResponse(BaseModel):
    """An explicit grant with its permission."""

    user_id: UUID
    permission_id: UUID
    permission: PermissionResponse
    granted_by: UUID | None = None
    granted_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserGrantsResponse(BaseModel):
    """All explicit grants of one user."""

    user_id: UUID
    grants: list[GrantResponse]


class MyPermissionsResponse(BaseModel):
    """What the caller can do, and why.

    ``effective_permissions`` lists catalog names only; super_admin is
    also allowed actions outside the catalog.
    """

    role: Role
    grants: list[str]
    effective_permissions: list[str]
