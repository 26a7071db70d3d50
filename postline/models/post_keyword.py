from sqlalchemy import Column, String, ForeignKey
from postline.database import Base


class PostKeyword(Base):
    """Occurrence of a keyword value in a post.

    ``keyword`` is a plain value rather than a foreign key: posts are tagged
    before their keywords go through moderation.
    """

    __tablename__ = "post_keyword"

    post_id = Column(String, ForeignKey("post.id", ondelete="CASCADE"), primary_key=True)
    keyword = Column(String, primary_key=True, index=True)
