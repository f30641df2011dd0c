"""
User, admin account, and login-attempt repository functions.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def _now() -> datetime:
    return datetime.now(timezone.utc)


# Users
def get_user(db: Session, user_id: uuid.UUID) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.username == username).first()


def create_user(db: Session, user: schemas.UserCreate) -> models.User:
    db_user = models.User(username=user.username, password=user.password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


# Admin users
def get_admin_user_by_username(db: Session, username: str) -> Optional[models.AdminUser]:
    return db.query(models.AdminUser).filter(models.AdminUser.username == username).first()


def create_admin_user(db: Session, admin: schemas.AdminUserCreate) -> models.AdminUser:
    db_admin = models.AdminUser(**admin.model_dump())
    db.add(db_admin)
    db.commit()
    db.refresh(db_admin)
    return db_admin


def update_admin_last_login(db: Session, username: str) -> int:
    """Stamp last_login_at/updated_at; returns the number of rows touched."""
    now = _now()
    touched = (
        db.query(models.AdminUser)
        .filter(models.AdminUser.username == username)
        .update({"last_login_at": now, "updated_at": now}, synchronize_session=False)
    )
    db.commit()
    return touched


# Login attempts
def record_login_attempt(db: Session, attempt: schemas.LoginAttemptCreate) -> models.LoginAttempt:
    db_attempt = models.LoginAttempt(**attempt.model_dump())
    db.add(db_attempt)
    db.commit()
    db.refresh(db_attempt)
    return db_attempt


def get_recent_login_attempts(db: Session, username: str, minutes: int) -> List[models.LoginAttempt]:
    cutoff = _now() - timedelta(minutes=minutes)
    return (
        db.query(models.LoginAttempt)
        .filter(
            models.LoginAttempt.username == username,
            models.LoginAttempt.attempted_at >= cutoff,
        )
        .order_by(models.LoginAttempt.attempted_at.desc())
        .all()
    )
