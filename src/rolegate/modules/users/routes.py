"""User API routes."""

from uuid import UUID

from fastapi import Query, status

from rolegate.core.auth.dependencies import CurrentActor, CurrentUser
from rolegate.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from rolegate.core.permissions import require_permission
from rolegate.modules.users import router
from rolegate.modules.users.schemas import (
    RoleUpdate,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from rolegate.modules.users.services import UserSvc


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    """Get current user profile."""
    return UserResponse.model_validate(current_user)


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
    description="Requires view_users. Users with role 'user' only see staff members.",
)
@require_permission("view_users")
async def list_users(
    service: UserSvc,
    actor: CurrentActor,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(
        DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"
    ),
) -> UserListResponse:
    """List users visible to the caller."""
    users, total = await service.list_users(actor, page, page_size)
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in users],
        total=total,
        page=page,
        page_size=page_size,
        current_user_role=actor.role,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Requires create_users. The new user starts with role 'user'.",
)
@require_permission("create_users")
async def create_user(
    data: UserCreate,
    service: UserSvc,
    actor: CurrentActor,  # noqa: ARG001 - read by require_permission
) -> UserResponse:
    """Create a user."""
    user = await service.create_user(data)
    return UserResponse.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by ID",
)
@require_permission("view_users")
async def get_user(
    user_id: UUID,
    service: UserSvc,
    actor: CurrentActor,  # noqa: ARG001 - read by require_permission
) -> UserResponse:
    """Get user by ID."""
    user = await service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Requires edit_users, and outranking the user unless editing yourself.",
)
@require_permission("edit_users")
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    service: UserSvc,
    actor: CurrentActor,
) -> UserResponse:
    """Update user by ID."""
    user = await service.update_user(actor, user_id, data)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}/role",
    response_model=UserResponse,
    summary="Change user role",
    description=(
        "Requires outranking both the current and the requested role, "
        "plus the matching assign_<role>_role permission."
    ),
)
async def change_role(
    user_id: UUID,
    data: RoleUpdate,
    service: UserSvc,
    actor: CurrentActor,
) -> UserResponse:
    """Assign a new role to a user."""
    user = await service.change_role(actor, user_id, data.role)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Requires delete_users and outranking the user. Nobody can delete themselves.",
)
async def delete_user(
    user_id: UUID,
    service: UserSvc,
    actor: CurrentActor,
) -> None:
    """Delete a user."""
    await service.delete_user(actor, user_id)
