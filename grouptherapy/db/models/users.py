import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Index, Text
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False, unique=True)
    password = Column(Text, nullable=False)


class AdminUser(Base):
    __tablename__ = 'admin_users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False, unique=True)
    # Argon2id encoded hash, never the raw password
    password_hash = Column(Text, nullable=False)
    email = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default='admin')
    is_active = Column(Boolean, nullable=False, default=True)
    last_login_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)


class LoginAttempt(Base):
    __tablename__ = 'login_attempts'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(Text, nullable=True)
    success = Column(Boolean, nullable=False, default=False)
    attempted_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_login_attempts_username_attempted', 'username', 'attempted_at'),
        Index('idx_login_attempts_attempted_at', 'attempted_at'),
    )
