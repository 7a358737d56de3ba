"""Permission resolver.

Combines role default permissions with explicitly granted permissions
into a single allow/deny decision. Everything here is a pure function of
its arguments.
"""

from dataclasses import dataclass, field
from uuid import UUID

from rolegate.core.errors import ForbiddenError
from rolegate.core.permissions.catalog import CATALOG_NAMES, ROLE_DEFAULT_PERMISSIONS
from rolegate.core.permissions.roles import Role


@dataclass(frozen=True)
class Actor:
    """The acting principal as seen by authorization decisions.

    Attributes:
        id: The principal's UUID
        role: Current role
        grants: Names of permissions explicitly granted beyond the role
    """

    id: UUID
    role: Role
    grants: frozenset[str] = field(default_factory=frozenset)


def default_permissions(role: Role | str) -> frozenset[str]:
    """Return the permissions a role holds without any explicit grant.

    For super_admin this is the whole catalog, but note that
    ``has_capability`` allows super_admin even outside the catalog.
    """
    role = Role(role)
    if role is Role.SUPER_ADMIN:
        return CATALOG_NAMES
    return ROLE_DEFAULT_PERMISSIONS[role]


def has_capability(actor: Actor, action: str) -> bool:
    """Decide whether an actor holds the named capability.

    Evaluation order:

    1. super_admin is allowed unconditionally, grants are not consulted
    2. an explicit grant of ``action`` allows
    3. ``action`` among the role defaults allows
    4. otherwise deny

    Grants only ever add capability. Names are case-sensitive.

    Args:
        actor: The acting principal
        action: Permission name, e.g. "delete_users"

    Returns:
        True if the action is authorized
    """
    role = Role(actor.role)
    if role is Role.SUPER_ADMIN:
        return True
    if action in actor.grants:
        return True
    return action in ROLE_DEFAULT_PERMISSIONS[role]


def effective_permissions(actor: Actor) -> frozenset[str]:
    """Catalog permissions the actor currently holds, from any source."""
    role = Role(actor.role)
    if role is Role.SUPER_ADMIN:
        return CATALOG_NAMES
    return ROLE_DEFAULT_PERMISSIONS[role] | (actor.grants & CATALOG_NAMES)


def authorize(actor: Actor, action: str) -> None:
    """Require a capability.

    Raises:
        ForbiddenError: If ``has_capability`` denies the action
    """
    if not has_capability(actor, action):
        raise ForbiddenError(
            f"Missing required permission: {action}",
            error_code="permission_denied",
            details={"required_permission": action},
        )
