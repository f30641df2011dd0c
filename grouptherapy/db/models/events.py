import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Index, Text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class Event(Base):
    __tablename__ = 'events'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    venue = Column(String(255), nullable=False)
    city = Column(String(120), nullable=False)
    country = Column(String(120), nullable=True)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=True)
    ticket_url = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    lineup = Column(JSONB, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_events_starts_at', 'starts_at'),
    )
