"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
Authorization outcomes are always raised as one of these types so callers
can tell "not allowed" apart from "already done" and "nothing there".
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("User not found", resource="user", resource_id=str(user_id))
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when there's a conflict with existing data.

    Example:
        raise ConflictError("Permission already granted", error_code="permission_already_granted")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 409


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid."""

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class ForbiddenError(AppException):
    """Raised when an actor lacks the role rank or capability for an action.

    Example:
        raise ForbiddenError(
            "Insufficient permissions",
            details={"required_permission": "delete_users"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class SelfActionDeniedError(ForbiddenError):
    """Raised when an actor targets themselves with a disallowed action.

    Covers deleting your own account and an admin changing their own role.
    """

    message = "You cannot perform this action on yourself"
    error_code = "self_action_denied"
