"""Authentication: bearer token verification and current-user resolution."""

from rolegate.core.auth.backend import create_access_token, decode_token
from rolegate.core.auth.dependencies import (
    CurrentActor,
    CurrentUser,
    get_current_actor,
    get_current_user,
)
from rolegate.core.auth.middleware import ActorContextMiddleware, RequestIdMiddleware
from rolegate.core.auth.schemas import TokenData


__all__ = [
    # Middleware
    "ActorContextMiddleware",
    # Dependencies
    "CurrentActor",
    "CurrentUser",
    "RequestIdMiddleware",
    # Schemas
    "TokenData",
    # Token utilities
    "create_access_token",
    "decode_token",
    "get_current_actor",
    "get_current_user",
]
