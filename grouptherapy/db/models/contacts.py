import uuid
from sqlalchemy import Column, String, DateTime, Index, Text, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class Contact(Base):
    __tablename__ = 'contacts'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    # general|demo|booking|press
    category = Column(String(20), nullable=False, default='general')
    status = Column(String(20), nullable=False, default='new')
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_contacts_status', 'status'),
        CheckConstraint("status in ('new','read','replied','archived')", name='ck_contacts_status'),
    )
