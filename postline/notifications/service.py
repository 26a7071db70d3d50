"""
Notification storage

Notifications are keyed by recipient, type, reference and ``unique_key``.
Pub/sub messages can be delivered more than once, and to more than one
worker at a time, so storing the same notification twice is a no-op.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from postline.database import dialect_insert
from postline.models.notification import Notification

logger = logging.getLogger(__name__)

UNIQUE_COLUMNS = [Notification.user_id, Notification.type, Notification.reference_id, Notification.unique_key]


def _values(notification: Notification) -> dict:
    # Unset columns fall back to their column defaults
    return {
        column.key: getattr(notification, column.key)
        for column in Notification.__table__.columns
        if getattr(notification, column.key) is not None
    }


class NotificationService:
    """Persists generated notifications."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def store_notifications(self, notifications: list[Notification]) -> list[Notification]:
        """
        Insert the notifications that are not stored yet.

        Each row is inserted with ON CONFLICT DO NOTHING on the unique key, so
        a concurrent delivery of the same event cannot fail the transaction.
        The caller owns the transaction; rows are not committed.

        Returns:
            list[Notification]: the rows actually inserted
        """
        stored = []
        for notification in notifications:
            stmt = (
                dialect_insert(self.db, Notification)
                .values(**_values(notification))
                .on_conflict_do_nothing(index_elements=UNIQUE_COLUMNS)
                .returning(Notification)
            )
            result = await self.db.scalars(stmt)
            row = result.first()
            if row is None:
                logger.info(f"Skipping duplicate {notification.type} notification for user {notification.user_id}")
                continue
            stored.append(row)

        return stored
