"""
Exception classes for the Postline API

Every domain error carries a machine-readable ``code``. GraphQL responses
expose it as ``extensions.code``; the HTTP exception handlers render it as
``error_code``.
"""

from typing import Any

from fastapi import status


class PostlineError(Exception):
    """Base exception class for all Postline errors"""

    code = "INTERNAL_SERVER_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_extensions(self) -> dict[str, Any]:
        extensions: dict[str, Any] = {"code": self.code}
        if self.details:
            extensions["details"] = self.details
        return extensions


class AuthenticationError(PostlineError):
    """Raised when the caller is not (or no longer) authenticated"""

    code = "UNAUTHENTICATED"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Access denied! You need to be authorized to perform this action!"):
        super().__init__(message)


class ForbiddenError(PostlineError):
    """Raised when the caller lacks the role required for an action"""

    code = "FORBIDDEN"
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied!", required_role: str | None = None):
        super().__init__(message, {"required_role": required_role} if required_role else None)


class NotFoundError(PostlineError):
    """Raised when an entity cannot be found; HTTP routes render it as a 404 error envelope"""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource_type: str, resource_id: Any | None = None):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(message, {"resource_type": resource_type, "resource_id": resource_id})


class ValidationError(PostlineError):
    """Raised when input validation fails"""

    code = "GRAPHQL_VALIDATION_FAILED"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, {"field": field} if field else None)


class InvalidMessageError(PostlineError):
    """Raised when a pub/sub message payload cannot be decoded"""

    code = "INVALID_MESSAGE"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message_id: str | None, reason: str):
        super().__init__(f"Invalid message {message_id}: {reason}", {"message_id": message_id})
