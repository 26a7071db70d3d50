"""Field-level permission classes."""

from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from postline.exceptions import AuthenticationError, ForbiddenError


class IsAuthenticated(BasePermission):
    message = AuthenticationError().message
    error_extensions = {"code": AuthenticationError.code}

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.is_logged_in


class IsModerator(BasePermission):
    message = ForbiddenError().message
    error_extensions = {"code": ForbiddenError.code}

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        return info.context.is_moderator


# Anonymous callers get UNAUTHENTICATED before the role is checked
MODERATOR_ONLY = [IsAuthenticated, IsModerator]
