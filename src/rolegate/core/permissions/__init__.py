"""Role hierarchy and permission resolution (RBAC)."""

from rolegate.core.permissions.catalog import (
    CATALOG_NAMES,
    PERMISSION_CATALOG,
    ROLE_DEFAULT_PERMISSIONS,
    PermissionCategory,
    PermissionSpec,
    assign_role_permission,
)
from rolegate.core.permissions.checker import PermissionChecker, check_permission
from rolegate.core.permissions.decorators import require_permission
from rolegate.core.permissions.models import Permission, UserPermission
from rolegate.core.permissions.policy import (
    STAFF_ROLES,
    authorize_role_assignment,
    authorize_user_deletion,
    can_assign_role,
    can_delete_user,
    visible_roles,
)
from rolegate.core.permissions.resolver import (
    Actor,
    authorize,
    default_permissions,
    effective_permissions,
    has_capability,
)
from rolegate.core.permissions.roles import Role, can_manage_role


__all__ = [
    "CATALOG_NAMES",
    "PERMISSION_CATALOG",
    "ROLE_DEFAULT_PERMISSIONS",
    "STAFF_ROLES",
    # Decisions
    "Actor",
    # Models
    "Permission",
    "PermissionCategory",
    # Checker
    "PermissionChecker",
    "PermissionSpec",
    "Role",
    "UserPermission",
    "assign_role_permission",
    "authorize",
    "authorize_role_assignment",
    "authorize_user_deletion",
    "can_assign_role",
    "can_delete_user",
    "can_manage_role",
    "check_permission",
    "default_permissions",
    "effective_permissions",
    "has_capability",
    "visible_roles",
    # Decorators
    "require_permission",
]
