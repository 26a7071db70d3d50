from sqlalchemy import Column, String, ForeignKey, DateTime
from postline.database import Base
from datetime import datetime


class PostMention(Base):
    __tablename__ = "post_mention"

    post_id = Column(String, ForeignKey("post.id", ondelete="CASCADE"), primary_key=True)
    mentioned_user_id = Column(String, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True)
    mentioned_by_user_id = Column(String, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
