from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from postline.database import Base


class Notification(Base):
    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    target_url = Column(String, nullable=False)
    reference_id = Column(String, nullable=False)
    reference_type = Column(String, nullable=False)
    # Distinguishes notifications on the same reference, e.g. who mentioned
    unique_key = Column(String, nullable=False, default="0")
    public = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    read_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="notifications")

    __table_args__ = (
        UniqueConstraint("user_id", "type", "reference_id", "unique_key", name="uq_notification_reference"),
    )
