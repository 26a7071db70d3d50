from sqlalchemy import Column, String, Integer, DateTime, Enum, Index
from postline.database import Base
from datetime import datetime
import enum


class KeywordStatus(str, enum.Enum):
    PENDING = "pending"
    ALLOW = "allow"
    DENY = "deny"
    SYNONYM = "synonym"


class Keyword(Base):
    __tablename__ = "keyword"

    value = Column(String, primary_key=True)
    status = Column(
        Enum(KeywordStatus, values_callable=lambda statuses: [s.value for s in statuses], native_enum=False),
        default=KeywordStatus.PENDING,
        nullable=False,
    )
    occurrences = Column(Integer, default=1, nullable=False)
    # Points at the keyword this one was merged into
    synonym = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_keyword_status_occurrences", "status", "occurrences"),
    )
