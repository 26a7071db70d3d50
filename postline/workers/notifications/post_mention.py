from sqlalchemy.ext.asyncio import AsyncSession

from postline.exceptions import InvalidMessageError
from postline.models.user import User
from postline.notifications import NotificationType, PostMentionContext, build_post_context
from postline.workers.message import Message, message_to_json
from postline.workers.notifications.worker import NotificationHandlerReturn, NotificationWorker


async def handle_post_mention(message: Message, db: AsyncSession) -> list[NotificationHandlerReturn] | None:
    data = message_to_json(message)
    try:
        change = data["postMention"]
        post_id = change["postId"]
        mentioned_by_user_id = change["mentionedByUserId"]
        mentioned_user_id = change["mentionedUserId"]
    except (KeyError, TypeError) as e:
        raise InvalidMessageError(message.message_id, f"missing post mention field {e}") from e

    post_ctx = await build_post_context(db, post_id)
    if not post_ctx:
        return None

    done_by = await db.get(User, mentioned_by_user_id)
    if not done_by:
        return None

    ctx = PostMentionContext(
        user_id=mentioned_user_id,
        post=post_ctx.post,
        source=post_ctx.source,
        done_by=done_by,
    )
    return [NotificationHandlerReturn(type=NotificationType.POST_MENTION, ctx=ctx)]


worker = NotificationWorker(
    subscription="api.post-mention-notification",
    handler=handle_post_mention,
)
