import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Date, ForeignKey, Index, Text, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class Release(Base):
    __tablename__ = 'releases'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False)
    artist_name = Column(String(255), nullable=False)
    artist_id = Column(UUID(as_uuid=True), ForeignKey('artists.id', ondelete='SET NULL'), nullable=True)
    release_type = Column(String(20), nullable=False, default='single')
    release_date = Column(Date, nullable=True)
    catalog_number = Column(String(50), nullable=True)
    cover_url = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    tracklist = Column(JSONB, nullable=False, default=list)
    # platform name -> URL
    streaming_links = Column(JSONB, nullable=False, default=dict)
    is_published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_releases_artist_id', 'artist_id'),
        CheckConstraint("release_type in ('single','ep','album','compilation')", name='ck_releases_release_type'),
    )
