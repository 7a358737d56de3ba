"""Error handling module with RFC 7807 Problem Details."""

from rolegate.core.errors.exceptions import (
    AppException,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    SelfActionDeniedError,
    UnauthorizedError,
)
from rolegate.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "ConflictError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "ProblemDetail",
    "SelfActionDeniedError",
    "UnauthorizedError",
    "register_exception_handlers",
]
