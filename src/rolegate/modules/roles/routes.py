"""Role API routes."""

from pydantic import BaseModel

from rolegate.core.auth.dependencies import CurrentActor
from rolegate.core.permissions import Role, default_permissions, require_permission
from rolegate.modules.roles import router


class RoleResponse(BaseModel):
    """A role and what it grants by default.

    ``is_wildcard`` marks super_admin, which holds every permission,
    including ones outside ``default_permissions``.
    """

    name: Role
    rank: int
    is_wildcard: bool
    default_permissions: list[str]


@router.get(
    "",
    response_model=list[RoleResponse],
    summary="List roles",
    description="Roles in ascending privilege order. Requires view_roles.",
)
@require_permission("view_roles")
async def list_roles(
    actor: CurrentActor,  # noqa: ARG001 - read by require_permission
) -> list[RoleResponse]:
    """List the role hierarchy."""
    return [
        RoleResponse(
            name=role,
            rank=role.rank,
            is_wildcard=role is Role.SUPER_ADMIN,
            default_permissions=sorted(default_permissions(role)),
        )
        for role in Role
    ]
