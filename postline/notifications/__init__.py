from .context import (
    NotificationBaseContext,
    NotificationDoneByContext,
    NotificationPostContext,
    NotificationType,
    PostContext,
    PostMentionContext,
    build_post_context,
)
from .generate import generate_notification
from .service import NotificationService

__all__ = [
    "NotificationBaseContext",
    "NotificationDoneByContext",
    "NotificationPostContext",
    "NotificationType",
    "PostContext",
    "PostMentionContext",
    "build_post_context",
    "generate_notification",
    "NotificationService",
]
