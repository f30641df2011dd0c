import pytest

from grouptherapy.utils.settings import get_settings, reset_settings_cache


def test_defaults():
    s = get_settings()
    assert s.log_level == "INFO"
    assert s.login_max_failed_attempts == 5
    assert s.login_lockout_minutes == 15
    assert "http://localhost:3000" in s.cors_origins
    assert s.sql_echo is False


def test_values_read_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOGIN_MAX_FAILED_ATTEMPTS", "3")
    monkeypatch.setenv("LOGIN_LOCKOUT_MINUTES", "30")
    monkeypatch.setenv("CORS_ORIGINS", "https://grouptherapy.example, https://admin.grouptherapy.example ,")
    monkeypatch.setenv("SQL_ECHO", "yes")
    reset_settings_cache()

    s = get_settings()
    assert s.log_level == "DEBUG"
    assert s.login_max_failed_attempts == 3
    assert s.login_lockout_minutes == 30
    assert s.cors_origins == ("https://grouptherapy.example", "https://admin.grouptherapy.example")
    assert s.sql_echo is True


@pytest.mark.parametrize("raw", ["abc", "", "  "])
def test_unparseable_int_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("LOGIN_MAX_FAILED_ATTEMPTS", raw)
    reset_settings_cache()
    assert get_settings().login_max_failed_attempts == 5


def test_lockout_values_never_drop_below_one(monkeypatch):
    monkeypatch.setenv("LOGIN_MAX_FAILED_ATTEMPTS", "0")
    monkeypatch.setenv("LOGIN_LOCKOUT_MINUTES", "-4")
    reset_settings_cache()
    s = get_settings()
    assert s.login_max_failed_attempts == 1
    assert s.login_lockout_minutes == 1


@pytest.mark.parametrize("raw,expected", [("1", True), ("on", True), ("0", False), ("off", False), ("maybe", False)])
def test_sql_echo_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("SQL_ECHO", raw)
    reset_settings_cache()
    assert get_settings().sql_echo is expected


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("LOGIN_LOCKOUT_MINUTES", "99")
    assert get_settings() is first
    reset_settings_cache()
    assert get_settings().login_lockout_minutes == 99
