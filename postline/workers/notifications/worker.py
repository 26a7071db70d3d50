"""
Notification worker harness

A notification worker maps one pub/sub event to zero or more notification
contexts. The harness turns those contexts into rows and stores them in a
single transaction.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from postline.models.notification import Notification
from postline.notifications import NotificationBaseContext, NotificationService, NotificationType, generate_notification
from postline.workers.message import Message

logger = logging.getLogger(__name__)


@dataclass
class NotificationHandlerReturn:
    type: NotificationType
    ctx: NotificationBaseContext


NotificationHandler = Callable[[Message, AsyncSession], Awaitable[list[NotificationHandlerReturn] | None]]


@dataclass
class NotificationWorker:
    subscription: str
    handler: NotificationHandler


async def handle_notification_message(
    worker: NotificationWorker, message: Message, db: AsyncSession
) -> list[Notification]:
    """Run a worker on one message and persist what it produced."""
    try:
        results = await worker.handler(message, db)
        if not results:
            logger.debug(
                "Message produced no notifications",
                extra={"subscription": worker.subscription, "message_id": message.message_id},
            )
            return []

        notifications = [generate_notification(result.type, result.ctx) for result in results]
        stored = await NotificationService(db).store_notifications(notifications)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(
        f"Stored {len(stored)} notification(s)",
        extra={"subscription": worker.subscription, "message_id": message.message_id},
    )
    return stored
