from sqlalchemy import Column, String, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from postline.config import settings
from postline.database import Base
from datetime import datetime


class Post(Base):
    __tablename__ = "post"

    id = Column(String, primary_key=True)
    short_id = Column(String, unique=True, index=True, nullable=True)
    title = Column(String, nullable=False)
    url = Column(String, nullable=True)
    image = Column(String, nullable=True)
    source_id = Column(String, ForeignKey("source.id", ondelete="CASCADE"), nullable=False, index=True)
    score = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    source = relationship("Source", back_populates="posts", lazy="joined")

    @property
    def comments_permalink(self) -> str:
        return f"{settings.webapp_url}/posts/{self.id}"
