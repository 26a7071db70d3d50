from .source import Source
from .post import Post
from .keyword import Keyword, KeywordStatus
from .post_keyword import PostKeyword
from .user import User
from .post_mention import PostMention
from .notification import Notification

__all__ = [
    "Source",
    "Post",
    "Keyword",
    "KeywordStatus",
    "PostKeyword",
    "User",
    "PostMention",
    "Notification",
]
