"""Authorization policy for role assignment and principal deletion.

Each decision exists twice: an ``authorize_*`` function that raises the
typed error a request handler should surface, and a ``can_*`` predicate
built on top of it.
"""

from uuid import UUID

from rolegate.core.errors import ForbiddenError, SelfActionDeniedError
from rolegate.core.permissions.catalog import assign_role_permission
from rolegate.core.permissions.resolver import Actor, authorize
from rolegate.core.permissions.roles import Role, can_manage_role


def authorize_role_assignment(
    actor: Actor,
    target_id: UUID,
    new_role: Role | str,
    current_role: Role | str | None = None,
) -> None:
    """Check that ``actor`` may give ``target_id`` the role ``new_role``.

    Checks run in this order:

    1. Re-assigning your own current role is a no-op and always allowed.
    2. An admin may not change their own role.
    3. The actor must outrank ``new_role`` (``can_manage_role``).
    4. For someone else, the actor must also outrank their ``current_role``
       when it is known, so admins cannot demote other admins.
    5. The actor must hold ``assign_<new_role>_role``.

    Args:
        actor: The acting principal
        target_id: UUID of the principal whose role changes
        new_role: Requested role
        current_role: Role the target holds now, if known

    Raises:
        SelfActionDeniedError: If an admin targets their own role
        ForbiddenError: If rank or capability is insufficient
    """
    actor_role = Role(actor.role)
    new_role = Role(new_role)
    is_self = target_id == actor.id

    if is_self and new_role is actor_role:
        return

    if is_self and actor_role is Role.ADMIN:
        raise SelfActionDeniedError(
            "Admins cannot change their own role",
            details={"role": actor_role.value, "requested_role": new_role.value},
        )

    if not can_manage_role(actor_role, new_role):
        raise ForbiddenError(
            f"You don't have permission to assign {new_role.value} role",
            error_code="role_rank_insufficient",
            details={"role": actor_role.value, "requested_role": new_role.value},
        )

    if not is_self and current_role is not None:
        current_role = Role(current_role)
        if not can_manage_role(actor_role, current_role):
            raise ForbiddenError(
                f"You don't have permission to change the role of a {current_role.value}",
                error_code="role_rank_insufficient",
                details={"role": actor_role.value, "target_role": current_role.value},
            )

    authorize(actor, assign_role_permission(new_role))


def can_assign_role(
    actor: Actor,
    target_id: UUID,
    new_role: Role | str,
    current_role: Role | str | None = None,
) -> bool:
    """Predicate form of ``authorize_role_assignment``."""
    try:
        authorize_role_assignment(actor, target_id, new_role, current_role)
    except ForbiddenError:
        return False
    return True


def authorize_user_deletion(actor: Actor, target_id: UUID, target_role: Role | str) -> None:
    """Check that ``actor`` may delete the principal ``target_id``.

    Nobody may delete themselves, whatever their role. Otherwise the
    actor needs ``delete_users`` and must outrank ``target_role``.

    Raises:
        SelfActionDeniedError: If the actor targets their own account
        ForbiddenError: If capability or rank is insufficient
    """
    if target_id == actor.id:
        raise SelfActionDeniedError("Cannot delete your own account")

    authorize(actor, "delete_users")

    target_role = Role(target_role)
    if not can_manage_role(actor.role, target_role):
        raise ForbiddenError(
            f"You don't have permission to delete {target_role.value}s",
            error_code="role_rank_insufficient",
            details={"role": Role(actor.role).value, "target_role": target_role.value},
        )


def can_delete_user(actor: Actor, target_id: UUID, target_role: Role | str) -> bool:
    """Predicate form of ``authorize_user_deletion``."""
    try:
        authorize_user_deletion(actor, target_id, target_role)
    except ForbiddenError:
        return False
    return True


STAFF_ROLES: frozenset[Role] = frozenset({Role.MODERATOR, Role.ADMIN, Role.SUPER_ADMIN})


def visible_roles(actor: Actor) -> frozenset[Role] | None:
    """Roles whose holders appear when ``actor`` lists users.

    Plain users only see staff; everyone else sees all users.

    Returns:
        The visible roles, or None when there is no restriction
    """
    if Role(actor.role) is Role.USER:
        return STAFF_ROLES
    return None
