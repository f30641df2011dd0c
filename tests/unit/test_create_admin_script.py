from __future__ import annotations

import runpy
from pathlib import Path

from grouptherapy.utils.passwords import verify_password

MODULE_GLOBALS = runpy.run_path(str(Path(__file__).resolve().parents[2] / "scripts" / "create_admin.py"))
MAIN = MODULE_GLOBALS["main"]


def test_create_admin_with_password_flag(storage, capsys):
    exit_code = MAIN(["--username", "ops", "--email", "ops@example.com", "--password", "s3cret"], storage=storage)

    assert exit_code == 0
    assert "Created admin 'ops'" in capsys.readouterr().out
    admin = storage.get_admin_user_by_username("ops")
    assert admin.email == "ops@example.com"
    assert admin.role == "admin"
    assert verify_password("s3cret", admin.password_hash)


def test_create_admin_prompts_for_password(storage, monkeypatch):
    answers = iter(["typed-in", "typed-in"])
    monkeypatch.setitem(MAIN.__globals__, "getpass", type("G", (), {"getpass": staticmethod(lambda _p: next(answers))}))

    assert MAIN(["--username", "editor", "--role", "editor"], storage=storage) == 0
    admin = storage.get_admin_user_by_username("editor")
    assert admin.role == "editor"
    assert verify_password("typed-in", admin.password_hash)


def test_create_admin_rejects_mismatched_prompt(storage, monkeypatch, capsys):
    answers = iter(["one", "two"])
    monkeypatch.setitem(MAIN.__globals__, "getpass", type("G", (), {"getpass": staticmethod(lambda _p: next(answers))}))

    assert MAIN(["--username", "editor"], storage=storage) == 1
    assert "did not match" in capsys.readouterr().err
    assert storage.get_admin_user_by_username("editor") is None


def test_create_admin_existing_username(storage, admin, capsys):
    exit_code = MAIN(["--username", admin.username, "--password", "whatever"], storage=storage)

    assert exit_code == 1
    assert "already exists" in capsys.readouterr().err
