"""
Tests for the notification workers and the pub/sub runner.
"""

import asyncio
import json
import logging

import pytest
from sqlalchemy.future import select

from postline.exceptions import InvalidMessageError
from postline.models import Notification, PostMention
from postline.notifications import NotificationType
from postline.workers.message import Message, message_to_json
from postline.workers.notifications import (
    NotificationWorker,
    handle_notification_message,
    notification_workers,
    post_mention_worker,
)
from postline.workers.runner import WorkerRunner
from utils.fixtures import save_content_fixtures, save_fixtures
from utils.mocks import create_mock_redis, post_mention_payload, pubsub_message

SUBSCRIPTION = "api.post-mention-notification"


def make_message(payload) -> Message:
    return Message(data=json.dumps(payload).encode("utf-8"), message_id="m1")


@pytest.fixture
async def content(test_db):
    await save_content_fixtures(test_db)


async def stored_notifications(session_factory) -> list[Notification]:
    async with session_factory() as session:
        result = await session.execute(select(Notification).order_by(Notification.id))
        return list(result.scalars().all())


class TestMessageToJson:
    def test_decodes_utf8_json(self):
        message = Message(data='{"name": "Café"}'.encode())
        assert message_to_json(message) == {"name": "Café"}

    def test_rejects_malformed_json(self):
        with pytest.raises(InvalidMessageError) as exc_info:
            message_to_json(Message(data=b"{not json", message_id="m9"))

        assert exc_info.value.code == "INVALID_MESSAGE"
        assert exc_info.value.details == {"message_id": "m9"}


class TestPostMentionWorker:
    def test_registered(self):
        assert post_mention_worker in notification_workers
        assert post_mention_worker.subscription == SUBSCRIPTION

    async def test_builds_post_mention_context(self, test_db, content):
        results = await post_mention_worker.handler(make_message(post_mention_payload()), test_db)

        assert len(results) == 1
        assert results[0].type == NotificationType.POST_MENTION
        ctx = results[0].ctx
        assert ctx.user_id == "2"
        assert ctx.done_by.id == "1"
        assert ctx.post.id == "p1"
        assert ctx.source.id == "a"

    async def test_ignores_missing_post(self, test_db, content):
        results = await post_mention_worker.handler(make_message(post_mention_payload(post_id="nope")), test_db)
        assert results is None

    async def test_ignores_missing_mentioning_user(self, test_db, content):
        results = await post_mention_worker.handler(make_message(post_mention_payload(mentioned_by="404")), test_db)
        assert results is None

    async def test_rejects_payload_without_post_mention(self, test_db):
        with pytest.raises(InvalidMessageError):
            await post_mention_worker.handler(make_message({"comment": {}}), test_db)

    async def test_rejects_payload_with_missing_fields(self, test_db):
        with pytest.raises(InvalidMessageError):
            await post_mention_worker.handler(make_message({"postMention": {"postId": "p1"}}), test_db)


class TestHandleNotificationMessage:
    async def test_stores_generated_notification(self, test_db, session_factory, content):
        stored = await handle_notification_message(post_mention_worker, make_message(post_mention_payload()), test_db)

        assert len(stored) == 1
        rows = await stored_notifications(session_factory)
        assert [(n.user_id, n.type, n.reference_id) for n in rows] == [("2", "post_mention", "p1")]
        assert rows[0].title == "<b>Ido</b> mentioned you in a post"

    async def test_redelivered_message_is_stored_once(self, test_db, session_factory, content):
        message = make_message(post_mention_payload())

        await handle_notification_message(post_mention_worker, message, test_db)
        stored = await handle_notification_message(post_mention_worker, message, test_db)

        assert stored == []
        assert len(await stored_notifications(session_factory)) == 1

    async def test_nothing_to_store(self, test_db, session_factory, content):
        stored = await handle_notification_message(
            post_mention_worker, make_message(post_mention_payload(post_id="nope")), test_db
        )

        assert stored == []
        assert await stored_notifications(session_factory) == []

    async def test_handler_errors_propagate(self, test_db):
        async def failing(message, db):
            raise RuntimeError("boom")

        worker = NotificationWorker(subscription="api.failing", handler=failing)

        with pytest.raises(RuntimeError, match="boom"):
            await handle_notification_message(worker, make_message({}), test_db)


class TestWorkerRunner:
    async def test_dispatch_routes_to_worker(self, session_factory, test_db, content):
        runner = WorkerRunner(notification_workers, create_mock_redis([]), session_factory)

        stored = await runner.dispatch(SUBSCRIPTION.encode(), json.dumps(post_mention_payload()).encode())

        assert len(stored) == 1
        assert len(await stored_notifications(session_factory)) == 1

    async def test_dispatch_ignores_unknown_channel(self, session_factory, caplog):
        runner = WorkerRunner(notification_workers, create_mock_redis([]), session_factory)

        with caplog.at_level(logging.WARNING, logger="postline.workers.runner"):
            stored = await runner.dispatch("api.unknown", b"{}")

        assert stored == []
        assert "No worker registered for api.unknown" in caplog.text

    async def test_dispatch_logs_failures_and_continues(self, session_factory, caplog):
        runner = WorkerRunner(notification_workers, create_mock_redis([]), session_factory)

        with caplog.at_level(logging.ERROR, logger="postline.workers.runner"):
            stored = await runner.dispatch(SUBSCRIPTION, "not json")

        assert stored == []
        assert "Failed to process message" in caplog.text

    async def test_run_consumes_subscriptions(self, session_factory, test_db, content):
        redis_client = create_mock_redis(
            [
                {"type": "subscribe", "channel": SUBSCRIPTION.encode(), "data": 1},
                pubsub_message(SUBSCRIPTION, post_mention_payload(mentioned_by="1")),
                pubsub_message(SUBSCRIPTION, {"broken": True}),
                pubsub_message(SUBSCRIPTION, post_mention_payload(mentioned_by="3")),
            ]
        )
        runner = WorkerRunner(notification_workers, redis_client, session_factory)

        await runner.run()

        pubsub = redis_client.pubsub.return_value
        pubsub.subscribe.assert_awaited_once_with(SUBSCRIPTION)
        pubsub.unsubscribe.assert_awaited_once()
        pubsub.aclose.assert_awaited_once()
        rows = await stored_notifications(session_factory)
        assert [n.unique_key for n in rows] == ["1", "3"]

    async def test_concurrent_deliveries_store_one_notification(self, session_factory, test_db, content, caplog):
        await save_fixtures(
            test_db, PostMention, [{"post_id": "p1", "mentioned_by_user_id": "1", "mentioned_user_id": "2"}]
        )
        payload = json.dumps(post_mention_payload(post_id="p1", mentioned_by="1", mentioned="2")).encode()
        # Every subscribed process receives the same pub/sub message
        runners = [WorkerRunner(notification_workers, create_mock_redis([]), session_factory) for _ in range(2)]

        with caplog.at_level(logging.ERROR, logger="postline.workers.runner"):
            results = await asyncio.gather(*(runner.dispatch(SUBSCRIPTION, payload) for runner in runners))

        assert sorted(len(stored) for stored in results) == [0, 1]
        assert "Failed to process message" not in caplog.text
        rows = await stored_notifications(session_factory)
        assert [(n.user_id, n.reference_id, n.unique_key) for n in rows] == [("2", "p1", "1")]
