from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from postline.database import Base


class Source(Base):
    __tablename__ = "source"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    image = Column(String, nullable=True)
    handle = Column(String, unique=True, index=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    private = Column(Boolean, default=False, nullable=False)

    posts = relationship("Post", back_populates="source")
