"""Run every notification worker: ``python -m postline.workers``."""

import asyncio
import logging

import redis.asyncio as redis

from postline.config import settings
from postline.database import AsyncSessionLocal, engine
from postline.middleware.logging import setup_structured_logging
from postline.workers.notifications import notification_workers
from postline.workers.runner import WorkerRunner

logger = logging.getLogger(__name__)


async def main() -> None:
    setup_structured_logging(settings.log_level, settings.log_json)
    client = redis.Redis.from_url(settings.redis_url)
    await client.ping()
    logger.info(f"Connected to Redis, starting {len(notification_workers)} worker(s)")

    runner = WorkerRunner(notification_workers, client, AsyncSessionLocal)
    try:
        await runner.run()
    finally:
        await client.aclose()
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
