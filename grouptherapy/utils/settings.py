"""Runtime settings sourced from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

_DEFAULT_CORS_ORIGINS: Tuple[str, ...] = (
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:8000",
)


@dataclass(frozen=True)
class Settings:
    log_level: str
    login_max_failed_attempts: int
    login_lockout_minutes: int
    cors_origins: Tuple[str, ...]
    sql_echo: bool


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _csv_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    items = tuple(part.strip() for part in raw.split(",") if part.strip())
    return items or default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings for this process."""
    return Settings(
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        login_max_failed_attempts=max(1, _int_env("LOGIN_MAX_FAILED_ATTEMPTS", 5)),
        login_lockout_minutes=max(1, _int_env("LOGIN_LOCKOUT_MINUTES", 15)),
        cors_origins=_csv_env("CORS_ORIGINS", _DEFAULT_CORS_ORIGINS),
        sql_echo=_normalize_bool(os.getenv("SQL_ECHO"), default=False),
    )


def reset_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
