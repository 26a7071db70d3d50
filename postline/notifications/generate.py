"""Turning a notification context into a stored notification row."""

from collections.abc import Callable
from html import escape

from postline.models.notification import Notification
from postline.notifications.context import NotificationBaseContext, NotificationType, PostMentionContext


def _post_mention(ctx: PostMentionContext) -> Notification:
    return Notification(
        user_id=ctx.user_id,
        type=NotificationType.POST_MENTION.value,
        icon="Comment",
        title=f"<b>{escape(ctx.done_by.name)}</b> mentioned you in a post",
        description=ctx.post.title,
        target_url=ctx.post.comments_permalink,
        reference_id=ctx.post.id,
        reference_type="post",
        unique_key=ctx.done_by.id,
        public=not ctx.source.private,
    )


GENERATORS: dict[NotificationType, Callable[..., Notification]] = {
    NotificationType.POST_MENTION: _post_mention,
}


def generate_notification(type: NotificationType | str, ctx: NotificationBaseContext) -> Notification:
    try:
        generator = GENERATORS[NotificationType(type)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown notification type: {type}") from e
    return generator(ctx)
