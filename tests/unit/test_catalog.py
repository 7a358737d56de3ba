"""Unit tests for the permission catalog and role defaults."""

import pytest

from rolegate.core.permissions import (
    CATALOG_NAMES,
    PERMISSION_CATALOG,
    ROLE_DEFAULT_PERMISSIONS,
    PermissionCategory,
    Role,
    assign_role_permission,
)


pytestmark = pytest.mark.unit


def test_catalog_has_seventeen_unique_permissions():
    assert len(PERMISSION_CATALOG) == 17
    assert len(CATALOG_NAMES) == 17


def test_every_category_is_used():
    assert {spec.category for spec in PERMISSION_CATALOG} == set(PermissionCategory)


@pytest.mark.parametrize("role", [Role.USER, Role.MODERATOR, Role.ADMIN])
def test_role_defaults_come_from_catalog(role: Role):
    assert ROLE_DEFAULT_PERMISSIONS[role] <= CATALOG_NAMES


def test_super_admin_has_no_default_entry():
    """super_admin is resolved by the wildcard branch, not the table."""
    assert Role.SUPER_ADMIN not in ROLE_DEFAULT_PERMISSIONS


def test_defaults_grow_with_rank():
    assert ROLE_DEFAULT_PERMISSIONS[Role.USER] <= ROLE_DEFAULT_PERMISSIONS[Role.MODERATOR]
    # The moderator panel is the one moderator default admins do not hold
    assert ROLE_DEFAULT_PERMISSIONS[Role.MODERATOR] - ROLE_DEFAULT_PERMISSIONS[Role.ADMIN] == {
        "access_moderator_panel"
    }


def test_admin_cannot_assign_admin_by_default():
    assert "assign_admin_role" not in ROLE_DEFAULT_PERMISSIONS[Role.ADMIN]
    assert "assign_moderator_role" in ROLE_DEFAULT_PERMISSIONS[Role.ADMIN]


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        ROLE_DEFAULT_PERMISSIONS[Role.USER] = frozenset({"delete_users"})  # type: ignore[index]


@pytest.mark.parametrize("role", list(Role))
def test_assign_role_permission_is_in_catalog(role: Role):
    assert assign_role_permission(role) == f"assign_{role.value}_role"
    assert assign_role_permission(role) in CATALOG_NAMES
