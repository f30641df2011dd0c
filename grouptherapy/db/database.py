"""
Database engine and session management.

Resolves the connection URL from environment configuration and builds
pooled SQLAlchemy engines. Hosted Postgres providers (Supabase, Neon) are
reached over TLS without certificate verification; in-memory SQLite gets a
single shared connection so the schema survives across sessions.
"""
import logging
import os
from typing import Any, Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from grouptherapy.utils.settings import get_settings

logger = logging.getLogger(__name__)

_SSL_HOST_MARKERS = ("supabase", "neon")


def get_database_url() -> str:
    """Return DATABASE_URL, or build one from the POSTGRES_* components."""
    if os.getenv("DATABASE_URL"):
        return os.getenv("DATABASE_URL")

    db_user = os.getenv("POSTGRES_USER")
    db_password = os.getenv("POSTGRES_PASSWORD")
    db_host = os.getenv("POSTGRES_HOST")
    db_port = os.getenv("POSTGRES_PORT")
    db_name = os.getenv("POSTGRES_DB")

    if not all([db_user, db_password, db_host, db_port, db_name]):
        missing = []
        if not db_user: missing.append("POSTGRES_USER")
        if not db_password: missing.append("POSTGRES_PASSWORD")
        if not db_host: missing.append("POSTGRES_HOST")
        if not db_port: missing.append("POSTGRES_PORT")
        if not db_name: missing.append("POSTGRES_DB")
        raise ValueError(f"Missing required database environment variables: {', '.join(missing)}")

    return f"postgresql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def requires_relaxed_ssl(url: str) -> bool:
    """Hosted providers terminate TLS with certificates we do not pin."""
    return any(marker in url for marker in _SSL_HOST_MARKERS)


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def engine_options(url: str) -> Dict[str, Any]:
    """Return create_engine keyword arguments appropriate for ``url``."""
    if url.startswith("sqlite"):
        opts: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if make_url(url).database in (None, "", ":memory:"):
            opts["poolclass"] = StaticPool
        return opts

    opts = {
        "pool_pre_ping": True,
        "pool_size": _int_env("DB_POOL_SIZE", 5),
        "max_overflow": _int_env("DB_MAX_OVERFLOW", 10),
        "pool_recycle": _int_env("DB_POOL_RECYCLE", 1800),
    }
    if requires_relaxed_ssl(url):
        # libpq "require" encrypts the channel but skips certificate checks
        opts["connect_args"] = {"sslmode": "require"}
    return opts


def create_db_engine(url: Optional[str] = None) -> Engine:
    """Create a pooled engine for ``url`` (defaults to the environment URL)."""
    url = url or get_database_url()
    opts = engine_options(url)
    if get_settings().sql_echo:
        opts["echo"] = True
    engine = create_engine(url, **opts)
    logger.info(
        "database_engine_created: dialect=%s ssl_relaxed=%s",
        engine.dialect.name,
        "connect_args" in opts and "sslmode" in opts["connect_args"],
    )
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    """Sessions hand back rows that stay readable after commit."""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
