"""Role hierarchy.

Four roles in a fixed total order: ``user < moderator < admin < super_admin``.
The order never changes at runtime.
"""

from enum import StrEnum


class Role(StrEnum):
    """Coarse privilege tier held by exactly one per principal."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        """Position in the hierarchy, 0 for user up to 3 for super_admin."""
        return list(Role).index(self)


def can_manage_role(actor_role: Role | str, target_role: Role | str) -> bool:
    """Check whether an actor may assign or delete a principal of a role.

    The same rule governs promotion and deletion:

    - super_admin manages every role, including super_admin
    - admin manages everything except admin and super_admin
    - moderator manages only user
    - user manages no one

    Self-targeting is not considered here; the policy layer guards it
    separately because it is about identity, not rank.

    Args:
        actor_role: Role of the acting principal
        target_role: Role the target holds or is being assigned

    Returns:
        True if the actor outranks the target as described above

    Raises:
        ValueError: If either value is not a known role
    """
    actor_role = Role(actor_role)
    target_role = Role(target_role)

    if actor_role is Role.SUPER_ADMIN:
        return True
    if actor_role is Role.ADMIN:
        return target_role not in (Role.ADMIN, Role.SUPER_ADMIN)
    if actor_role is Role.MODERATOR:
        return target_role is Role.USER
    return False
