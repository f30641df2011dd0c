import os
import pytest
from fastapi.testclient import TestClient

from grouptherapy.db.storage import DatabaseStorage
from grouptherapy.services.admin_auth import AdminAuthService
from grouptherapy.utils.settings import reset_settings_cache

# Unit tests never touch a real server; e2e tests provide their own URL.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

ADMIN_USERNAME = "label-admin"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for var in ("LOGIN_MAX_FAILED_ATTEMPTS", "LOGIN_LOCKOUT_MINUTES", "SQL_ECHO", "CORS_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def storage():
    store = DatabaseStorage("sqlite+pysqlite:///:memory:")
    store.create_schema()
    try:
        yield store
    finally:
        store.dispose()


@pytest.fixture
def admin(storage):
    return AdminAuthService(storage).register_admin(ADMIN_USERNAME, ADMIN_PASSWORD, email="admin@example.com")


@pytest.fixture
def admin_auth():
    return (ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def client(storage):
    from grouptherapy.api.deps import get_storage
    from grouptherapy.api.main import app

    app.dependency_overrides[get_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_storage, None)
