import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class Artist(Base):
    __tablename__ = 'artists'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    bio = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    genres = Column(JSONB, nullable=False, default=list)
    # e.g. {"instagram": "...", "spotify": "..."}
    social_links = Column(JSONB, nullable=False, default=dict)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
