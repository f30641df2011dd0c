def test_admin_login_returns_public_profile(client, admin, admin_auth):
    username, password = admin_auth
    r = client.post("/admin/login", json={"username": username, "password": password})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["username"] == username
    assert body["last_login_at"] is not None
    assert "password_hash" not in body


def test_admin_login_rejects_bad_password(client, admin, admin_auth):
    username, _ = admin_auth
    r = client.post("/admin/login", json={"username": username, "password": "nope"})
    assert r.status_code == 401


def test_admin_me(client, admin, admin_auth):
    r = client.get("/admin/me", auth=admin_auth)
    assert r.status_code == 200
    assert r.json()["email"] == "admin@example.com"
    assert client.get("/admin/me").status_code == 401


def test_login_attempts_record_client_address(client, storage, admin, admin_auth):
    username, password = admin_auth
    client.post(
        "/admin/login",
        json={"username": username, "password": password},
        headers={"X-Forwarded-For": "198.51.100.7, 10.0.0.1", "User-Agent": "cms-panel"},
    )
    attempt = storage.get_recent_login_attempts(username, 5)[0]
    assert attempt.ip_address == "198.51.100.7"
    assert attempt.user_agent == "cms-panel"


def test_lockout_returns_429_with_retry_after(client, admin, admin_auth, monkeypatch):
    from grouptherapy.utils.settings import reset_settings_cache

    monkeypatch.setenv("LOGIN_MAX_FAILED_ATTEMPTS", "2")
    monkeypatch.setenv("LOGIN_LOCKOUT_MINUTES", "5")
    reset_settings_cache()
    username, password = admin_auth

    for _ in range(2):
        assert client.post("/admin/login", json={"username": username, "password": "bad"}).status_code == 401

    r = client.post("/admin/login", json={"username": username, "password": password})
    assert r.status_code == 429
    assert r.headers["retry-after"] == "300"
    # Basic-auth protected writes are locked out too
    assert client.post("/playlists/", json={"title": "x"}, auth=admin_auth).status_code == 429


def test_overlong_login_username_is_rejected(client, admin):
    r = client.post("/admin/login", json={"username": "u" * 200, "password": "pw"})
    assert r.status_code == 422


def test_overlong_basic_username_and_forwarded_address(client, storage, admin):
    r = client.post(
        "/playlists/",
        json={"title": "x"},
        auth=("u" * 200, "pw"),
        headers={"X-Forwarded-For": "f" * 300},
    )
    assert r.status_code == 401
    attempt = storage.get_recent_login_attempts("u" * 100, 5)[0]
    assert attempt.success is False
    assert len(attempt.ip_address) == 64


def test_basic_auth_writes_only_record_failures(client, storage, admin, admin_auth):
    username, _ = admin_auth
    assert client.post("/playlists/", json={"title": "Deep"}, auth=admin_auth).status_code == 201
    assert storage.get_recent_login_attempts(username, 5) == []
    assert storage.get_admin_user_by_username(username).last_login_at is None

    assert client.post("/playlists/", json={"title": "Deep"}, auth=(username, "wrong")).status_code == 401
    assert [a.success for a in storage.get_recent_login_attempts(username, 5)] == [False]
