"""Data each notification type is rendered from."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import joinedload

from postline.models.post import Post
from postline.models.source import Source
from postline.models.user import User


class NotificationType(str, enum.Enum):
    POST_MENTION = "post_mention"


@dataclass
class NotificationBaseContext:
    user_id: str


@dataclass
class NotificationPostContext(NotificationBaseContext):
    post: Post
    source: Source


@dataclass
class NotificationDoneByContext(NotificationBaseContext):
    done_by: User


@dataclass
class PostMentionContext(NotificationPostContext, NotificationDoneByContext):
    """Post context plus the user who did the mentioning."""


@dataclass
class PostContext:
    """A post with its source, before the recipient is known."""

    post: Post
    source: Source


async def build_post_context(db: AsyncSession, post_id: str) -> PostContext | None:
    result = await db.execute(select(Post).where(Post.id == post_id).options(joinedload(Post.source)))
    post = result.scalars().first()
    if not post:
        return None
    return PostContext(post=post, source=post.source)
