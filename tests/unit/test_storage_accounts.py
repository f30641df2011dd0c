import time
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from grouptherapy.db import models, schemas


def test_create_and_fetch_user(storage):
    created = storage.create_user(schemas.UserCreate(username="dj-one", password="pw"))
    assert isinstance(created.id, uuid.UUID)
    assert created.username == "dj-one"

    assert storage.get_user(created.id) == created
    assert storage.get_user_by_username("dj-one") == created


def test_missing_user_lookups_return_none(storage):
    assert storage.get_user(uuid.uuid4()) is None
    assert storage.get_user_by_username("nobody") is None


def test_duplicate_username_raises_and_storage_stays_usable(storage):
    storage.create_user(schemas.UserCreate(username="dup", password="pw"))
    with pytest.raises(IntegrityError):
        storage.create_user(schemas.UserCreate(username="dup", password="other"))
    # The failed session was rolled back; the next call gets a clean one
    assert storage.get_user_by_username("dup").password == "pw"


def test_admin_user_defaults(storage):
    admin = storage.create_admin_user(schemas.AdminUserCreate(username="root", password_hash="$argon2id$x"))
    assert admin.role == "admin"
    assert admin.is_active is True
    assert admin.last_login_at is None
    assert admin.created_at is not None

    fetched = storage.get_admin_user_by_username("root")
    assert fetched.id == admin.id
    assert storage.get_admin_user_by_username("missing") is None


def test_update_admin_last_login_stamps_both_timestamps(storage):
    admin = storage.create_admin_user(schemas.AdminUserCreate(username="root", password_hash="h"))
    time.sleep(0.01)
    assert storage.update_admin_last_login("root") is None

    fetched = storage.get_admin_user_by_username("root")
    assert fetched.last_login_at is not None
    assert fetched.updated_at > admin.updated_at
    assert fetched.last_login_at == fetched.updated_at


def test_update_admin_last_login_for_unknown_username_is_noop(storage):
    storage.update_admin_last_login("ghost")
    assert storage.get_admin_user_by_username("ghost") is None


def test_record_login_attempt(storage):
    attempt = storage.record_login_attempt(
        schemas.LoginAttemptCreate(username="root", ip_address="10.0.0.1", user_agent="pytest", success=False)
    )
    assert attempt.username == "root"
    assert attempt.success is False
    assert attempt.attempted_at is not None


def test_recent_login_attempts_filter_by_username_and_window(storage):
    old = datetime.now(timezone.utc) - timedelta(minutes=45)
    with Session(storage.engine) as db:
        db.add(models.LoginAttempt(username="root", success=False, attempted_at=old))
        db.commit()
    storage.record_login_attempt(schemas.LoginAttemptCreate(username="root", success=False))
    storage.record_login_attempt(schemas.LoginAttemptCreate(username="root", success=True))
    storage.record_login_attempt(schemas.LoginAttemptCreate(username="someone-else", success=False))

    recent = storage.get_recent_login_attempts("root", 15)
    assert len(recent) == 2
    assert all(a.username == "root" for a in recent)
    # Newest first
    assert recent[0].attempted_at >= recent[1].attempted_at

    assert len(storage.get_recent_login_attempts("root", 60)) == 3
    assert storage.get_recent_login_attempts("nobody", 60) == []
