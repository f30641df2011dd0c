"""
Admin authentication service: sign-in with lockout, and account creation.
"""

import logging
from typing import Optional

from grouptherapy.db import schemas
from grouptherapy.db.storage import Storage
from grouptherapy.utils.passwords import hash_password, verify_password
from grouptherapy.utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class AdminAuthError(Exception):
    """Base class for admin sign-in failures."""


class InvalidCredentialsError(AdminAuthError):
    pass


class AccountLockedError(AdminAuthError):
    def __init__(self, username: str, retry_after_minutes: int):
        super().__init__(f"Too many failed sign-in attempts for '{username}'")
        self.username = username
        self.retry_after_minutes = retry_after_minutes


class AdminAuthService:
    """Service class for admin sign-in and account management."""

    def __init__(self, storage: Storage, settings: Optional[Settings] = None):
        self.storage = storage
        self.settings = settings or get_settings()

    def failed_attempts_in_window(self, username: str) -> int:
        attempts = self.storage.get_recent_login_attempts(username, self.settings.login_lockout_minutes)
        return sum(1 for a in attempts if not a.success)

    def is_locked_out(self, username: str) -> bool:
        return self.failed_attempts_in_window(username) >= self.settings.login_max_failed_attempts

    def authenticate(
        self,
        username: str,
        password: str,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
        record_success: bool = True,
    ) -> schemas.AdminUser:
        """Verify credentials and return the signed-in admin.

        The lockout check runs before the password is looked at, so a locked
        account cannot be probed further until the window has passed.

        Failures are always recorded. With ``record_success=False`` (per-request
        Basic checks) a valid sign-in leaves no attempt row and does not touch
        ``last_login_at``.
        """
        # attempts are stored under the column-width prefix of the username
        key = username[: schemas.USERNAME_MAX_LENGTH]
        if self.is_locked_out(key):
            logger.warning("admin_login_locked: username=%s ip=%s", key, ip_address)
            raise AccountLockedError(key, self.settings.login_lockout_minutes)

        admin = None
        if len(username) <= schemas.USERNAME_MAX_LENGTH:
            admin = self.storage.get_admin_user_by_username(username)
        ok = bool(admin and admin.is_active and verify_password(password, admin.password_hash))
        if not ok or record_success:
            self.storage.record_login_attempt(
                schemas.LoginAttemptCreate(
                    username=key,
                    ip_address=ip_address,
                    user_agent=user_agent,
                    success=ok,
                )
            )
        if not ok:
            logger.warning("admin_login_failed: username=%s ip=%s", key, ip_address)
            raise InvalidCredentialsError("Invalid username or password")
        if not record_success:
            return admin

        self.storage.update_admin_last_login(username)
        logger.info("admin_login_succeeded: username=%s", username)
        return self.storage.get_admin_user_by_username(username) or admin

    def register_admin(
        self,
        username: str,
        password: str,
        email: Optional[str] = None,
        role: str = "admin",
    ) -> schemas.AdminUser:
        admin = self.storage.create_admin_user(
            schemas.AdminUserCreate(
                username=username,
                email=email,
                role=role,
                password_hash=hash_password(password),
            )
        )
        logger.info("admin_registered: username=%s role=%s", admin.username, admin.role)
        return admin
