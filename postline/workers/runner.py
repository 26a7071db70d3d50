"""
Pub/sub consumer

Each worker subscription maps to a Redis pub/sub channel of the same name.
Messages are processed one at a time, each in its own database session.
"""

import logging
import uuid
from collections.abc import Callable, Iterable

import redis.asyncio as redis
from sqlalchemy.ext.asyncio import AsyncSession

from postline.middleware.logging import request_id_var
from postline.models.notification import Notification
from postline.workers.message import Message
from postline.workers.notifications import NotificationWorker, handle_notification_message

logger = logging.getLogger(__name__)


def _text(value: bytes | str) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


class WorkerRunner:
    """Routes pub/sub messages to notification workers."""

    def __init__(
        self,
        workers: Iterable[NotificationWorker],
        redis_client: redis.Redis,
        session_factory: Callable[[], AsyncSession],
    ):
        self.workers = {worker.subscription: worker for worker in workers}
        self._redis = redis_client
        self._session_factory = session_factory

    async def dispatch(self, channel: bytes | str, data: bytes | str) -> list[Notification]:
        subscription = _text(channel)
        worker = self.workers.get(subscription)
        if worker is None:
            logger.warning(f"No worker registered for {subscription}", extra={"subscription": subscription})
            return []

        message = Message(
            data=data if isinstance(data, bytes) else data.encode("utf-8"),
            message_id=str(uuid.uuid4()),
        )
        token = request_id_var.set(message.message_id)
        try:
            async with self._session_factory() as db:
                return await handle_notification_message(worker, message, db)
        except Exception:
            # A poisoned message must not stop the subscription
            logger.exception(
                "Failed to process message",
                extra={"subscription": subscription, "message_id": message.message_id},
            )
            return []
        finally:
            request_id_var.reset(token)

    async def run(self) -> None:
        pubsub = self._redis.pubsub(ignore_subscribe_messages=True)
        await pubsub.subscribe(*self.workers)
        logger.info(f"Subscribed to {', '.join(self.workers)}")

        try:
            async for raw in pubsub.listen():
                if raw.get("type") != "message":
                    continue
                await self.dispatch(raw["channel"], raw["data"])
        finally:
            await pubsub.unsubscribe()
            await pubsub.aclose()
            logger.info("Worker runner stopped")
