"""Permission decorators for route protection.

Routes declare the capability they need; the decision itself is always
made by ``rolegate.core.permissions.resolver``.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from rolegate.core.errors import UnauthorizedError
from rolegate.core.permissions.resolver import Actor, authorize


P = ParamSpec("P")
R = TypeVar("R")


def require_permission(
    permission: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator that requires a capability to access a route.

    The route must take the acting principal as an ``actor`` parameter
    (see ``rolegate.core.auth.dependencies.CurrentActor``).

    Usage:
        @router.delete("/users/{user_id}")
        @require_permission("delete_users")
        async def delete_user(user_id: UUID, actor: CurrentActor):
            ...

    Args:
        permission: Permission name, e.g. "view_users"

    Raises:
        UnauthorizedError: If no actor was resolved
        ForbiddenError: If the actor lacks the capability
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            actor = kwargs.get("actor")
            if not isinstance(actor, Actor):
                raise UnauthorizedError(
                    "Authentication required",
                    error_code="auth_required",
                )

            authorize(actor, permission)
            return await func(*args, **kwargs)

        return wrapper

    return decorator
