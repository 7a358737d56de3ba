"""Permission catalog and role default permissions.

The catalog is reference data seeded into the ``permissions`` table.
The role table below is a process-wide constant: read-only mappings of
frozensets, built once at import time.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple

from rolegate.core.permissions.roles import Role


class PermissionCategory(StrEnum):
    """Grouping used to organise the catalog."""

    USER_MANAGEMENT = "user_management"
    ROLE_MANAGEMENT = "role_management"
    PERMISSION_MANAGEMENT = "permission_management"
    SYSTEM = "system"


class PermissionSpec(NamedTuple):
    """Definition of one catalog permission."""

    name: str
    description: str
    category: PermissionCategory


PERMISSION_CATALOG: tuple[PermissionSpec, ...] = (
    # User management
    PermissionSpec("view_users", "Can view list of users", PermissionCategory.USER_MANAGEMENT),
    PermissionSpec("create_users", "Can create new users", PermissionCategory.USER_MANAGEMENT),
    PermissionSpec("edit_users", "Can edit user information", PermissionCategory.USER_MANAGEMENT),
    PermissionSpec("delete_users", "Can delete users", PermissionCategory.USER_MANAGEMENT),
    # Role management
    PermissionSpec("view_roles", "Can view user roles", PermissionCategory.ROLE_MANAGEMENT),
    PermissionSpec(
        "assign_user_role",
        "Can assign user role to users",
        PermissionCategory.ROLE_MANAGEMENT,
    ),
    PermissionSpec(
        "assign_moderator_role",
        "Can assign moderator role to users",
        PermissionCategory.ROLE_MANAGEMENT,
    ),
    PermissionSpec(
        "assign_admin_role",
        "Can assign admin role to users",
        PermissionCategory.ROLE_MANAGEMENT,
    ),
    PermissionSpec(
        "assign_super_admin_role",
        "Can assign super admin role (super admin only)",
        PermissionCategory.ROLE_MANAGEMENT,
    ),
    # Permission management
    PermissionSpec(
        "view_permissions",
        "Can view all permissions",
        PermissionCategory.PERMISSION_MANAGEMENT,
    ),
    PermissionSpec(
        "grant_permissions",
        "Can grant permissions to users",
        PermissionCategory.PERMISSION_MANAGEMENT,
    ),
    PermissionSpec(
        "revoke_permissions",
        "Can revoke permissions from users",
        PermissionCategory.PERMISSION_MANAGEMENT,
    ),
    PermissionSpec(
        "manage_admin_permissions",
        "Can manage admin permissions",
        PermissionCategory.PERMISSION_MANAGEMENT,
    ),
    PermissionSpec(
        "manage_moderator_permissions",
        "Can manage moderator permissions",
        PermissionCategory.PERMISSION_MANAGEMENT,
    ),
    # System
    PermissionSpec("access_admin_panel", "Can access admin dashboard", PermissionCategory.SYSTEM),
    PermissionSpec(
        "access_moderator_panel",
        "Can access moderator features",
        PermissionCategory.SYSTEM,
    ),
    PermissionSpec("system_settings", "Can modify system settings", PermissionCategory.SYSTEM),
)

CATALOG_NAMES: frozenset[str] = frozenset(spec.name for spec in PERMISSION_CATALOG)

# super_admin has no entry: it holds every permission through a
# separate branch in the resolver, never through a sentinel entry here.
ROLE_DEFAULT_PERMISSIONS: MappingProxyType[Role, frozenset[str]] = MappingProxyType(
    {
        Role.ADMIN: frozenset(
            {
                "view_users",
                "create_users",
                "edit_users",
                "delete_users",
                "view_roles",
                "assign_user_role",
                "assign_moderator_role",
                "view_permissions",
                "grant_permissions",
                "revoke_permissions",
                "manage_moderator_permissions",
                "access_admin_panel",
            }
        ),
        Role.MODERATOR: frozenset(
            {
                "view_users",
                "edit_users",
                "view_roles",
                "assign_user_role",
                "view_permissions",
                "access_moderator_panel",
            }
        ),
        Role.USER: frozenset({"view_users", "view_roles"}),
    }
)


def assign_role_permission(role: Role | str) -> str:
    """Name of the capability required to assign ``role`` to someone.

    Example:
        >>> assign_role_permission(Role.MODERATOR)
        'assign_moderator_role'
    """
    return f"assign_{Role(role).value}_role"
