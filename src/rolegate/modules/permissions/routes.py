"""Permission API routes."""

from uuid import UUID

from fastapi import status

from rolegate.core.auth.dependencies import CurrentActor
from rolegate.core.permissions import effective_permissions, require_permission
from rolegate.modules.permissions import router
from rolegate.modules.permissions.schemas import (
    GrantCreate,
    GrantResponse,
    MyPermissionsResponse,
    PermissionListResponse,
    PermissionResponse,
    UserGrantsResponse,
)
from rolegate.modules.permissions.services import PermissionSvc


@router.get(
    "",
    response_model=PermissionListResponse,
    summary="List permission catalog",
    description="Requires view_permissions.",
)
@require_permission("view_permissions")
async def list_permissions(
    service: PermissionSvc,
    actor: CurrentActor,  # noqa: ARG001 - read by require_permission
) -> PermissionListResponse:
    """List every permission, grouped by category."""
    permissions = await service.list_catalog()
    return PermissionListResponse(
        permissions=[PermissionResponse.model_validate(p) for p in permissions]
    )


@router.get(
    "/me",
    response_model=MyPermissionsResponse,
    summary="Get my permissions",
)
async def get_my_permissions(actor: CurrentActor) -> MyPermissionsResponse:
    """Role, explicit grants and effective permissions of the caller."""
    return MyPermissionsResponse(
        role=actor.role,
        grants=sorted(actor.grants),
        effective_permissions=sorted(effective_permissions(actor)),
    )


@router.get(
    "/users/{user_id}",
    response_model=UserGrantsResponse,
    summary="List a user's grants",
    description="Your own grants are always visible; others require view_permissions.",
)
async def list_user_grants(
    user_id: UUID,
    service: PermissionSvc,
    actor: CurrentActor,
) -> UserGrantsResponse:
    """List explicit grants of a user."""
    grants = await service.list_user_grants(actor, user_id)
    return UserGrantsResponse(
        user_id=user_id,
        grants=[GrantResponse.model_validate(g) for g in grants],
    )


@router.post(
    "/users/{user_id}/grants",
    response_model=GrantResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Grant permission",
    description="Requires grant_permissions. Returns 409 if already granted.",
)
async def grant_permission(
    user_id: UUID,
    data: GrantCreate,
    service: PermissionSvc,
    actor: CurrentActor,
) -> GrantResponse:
    """Grant a permission to a user."""
    grant = await service.grant_permission(actor, user_id, data.permission_id)
    return GrantResponse.model_validate(grant)


@router.delete(
    "/users/{user_id}/grants/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke permission",
    description="Requires revoke_permissions. Succeeds even if nothing was granted.",
)
async def revoke_permission(
    user_id: UUID,
    permission_id: UUID,
    service: PermissionSvc,
    actor: CurrentActor,
) -> None:
    """Revoke a permission from a user."""
    await service.revoke_permission(actor, user_id, permission_id)
