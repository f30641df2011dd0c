import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Integer, Text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class RadioShow(Base):
    __tablename__ = 'radio_shows'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    episode_number = Column(Integer, nullable=True)
    host = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    air_date = Column(DateTime(timezone=True), nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    audio_url = Column(Text, nullable=True)
    cover_url = Column(Text, nullable=True)
    tracklist = Column(JSONB, nullable=False, default=list)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)


class Playlist(Base):
    __tablename__ = 'playlists'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    cover_url = Column(Text, nullable=True)
    spotify_url = Column(Text, nullable=True)
    apple_music_url = Column(Text, nullable=True)
    track_count = Column(Integer, nullable=False, default=0)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)
