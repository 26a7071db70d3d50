from .post_mention import worker as post_mention_worker
from .worker import NotificationHandlerReturn, NotificationWorker, handle_notification_message

notification_workers: list[NotificationWorker] = [
    post_mention_worker,
]

__all__ = [
    "NotificationHandlerReturn",
    "NotificationWorker",
    "handle_notification_message",
    "notification_workers",
    "post_mention_worker",
]
