from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from postline.database import Base
from datetime import datetime


class User(Base):
    __tablename__ = "user"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    username = Column(String, unique=True, index=True, nullable=True)
    image = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")
