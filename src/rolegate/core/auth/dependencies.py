"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and validating bearer tokens
- Resolving the current principal from the database
- Building the current Actor (role plus explicit grants)
"""

from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from rolegate.api.dependencies import DBSession
from rolegate.core.auth.backend import decode_token
from rolegate.core.auth.schemas import TokenData
from rolegate.core.errors import UnauthorizedError
from rolegate.core.permissions.checker import PermissionChecker
from rolegate.core.permissions.resolver import Actor


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate token data from the Authorization header.

    Raises:
        UnauthorizedError: If token is missing or invalid
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="invalid_token",
        )

    if token_data.type != "access":
        raise UnauthorizedError(
            "Invalid token type",
            error_code="invalid_token_type",
        )

    return token_data


async def get_current_user(
    token_data: Annotated[TokenData, Depends(get_token_data)],
    db: DBSession,
) -> Any:  # Returns User, but use Any to avoid circular import
    """Get the currently authenticated user.

    Raises:
        UnauthorizedError: If the token's principal does not exist
    """
    from rolegate.modules.users.repos import UserRepository  # noqa: PLC0415

    repo = UserRepository(db)
    user = await repo.get_by_id(token_data.user_id)

    if not user:
        raise UnauthorizedError(
            "User not found",
            error_code="user_not_found",
        )

    return user


async def get_current_actor(
    user: Annotated[Any, Depends(get_current_user)],
    db: DBSession,
) -> Actor:
    """Resolve the current user into an Actor for authorization decisions."""
    return await PermissionChecker(db).load_actor(user)


# Type aliases for cleaner dependency injection
# Use Any for User type to avoid circular imports at runtime
CurrentUser = Annotated[Any, Depends(get_current_user)]
CurrentActor = Annotated[Actor, Depends(get_current_actor)]
