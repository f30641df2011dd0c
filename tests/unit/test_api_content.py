import uuid

import pytest


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_release_lifecycle(client, admin, admin_auth):
    assert client.get("/releases/").json() == []

    payload = {
        "title": "Common Ground",
        "artist_name": "Above & Beyond",
        "release_type": "album",
        "release_date": "2018-01-26",
        "tracklist": ["Northern Soul", "Sticky Fingers"],
    }
    r = client.post("/releases/", json=payload, auth=admin_auth)
    assert r.status_code == 201, r.text
    release = r.json()
    assert release["release_date"] == "2018-01-26"
    assert release["is_published"] is False

    r = client.get(f"/releases/{release['id']}")
    assert r.status_code == 200
    assert r.json()["tracklist"] == ["Northern Soul", "Sticky Fingers"]

    r = client.patch(f"/releases/{release['id']}", json={"is_published": True}, auth=admin_auth)
    assert r.status_code == 200
    assert r.json()["is_published"] is True
    assert r.json()["title"] == "Common Ground"

    r = client.delete(f"/releases/{release['id']}", auth=admin_auth)
    assert r.status_code == 204
    assert client.get(f"/releases/{release['id']}").status_code == 404


def test_writes_require_admin_credentials(client, admin):
    r = client.post("/events/", json={"title": "x", "venue": "y", "city": "z", "starts_at": "2026-01-01T20:00:00Z"})
    assert r.status_code == 401
    assert r.headers.get("www-authenticate", "").startswith("Basic")

    r = client.post(
        "/events/",
        json={"title": "x", "venue": "y", "city": "z", "starts_at": "2026-01-01T20:00:00Z"},
        auth=("label-admin", "wrong"),
    )
    assert r.status_code == 401


@pytest.mark.parametrize("path", ["/releases", "/events", "/posts", "/artists", "/radio-shows", "/playlists", "/videos"])
def test_unknown_ids_return_404(client, admin, admin_auth, path):
    missing = uuid.uuid4()
    assert client.get(f"{path}/{missing}").status_code == 404
    assert client.patch(f"{path}/{missing}", json={}, auth=admin_auth).status_code == 404
    assert client.delete(f"{path}/{missing}", auth=admin_auth).status_code == 404


def test_malformed_id_is_rejected(client):
    assert client.get("/artists/not-a-uuid").status_code == 422


def test_invalid_payload_is_rejected(client, admin, admin_auth):
    r = client.post(
        "/releases/",
        json={"title": "X", "artist_name": "Y", "release_type": "mixtape"},
        auth=admin_auth,
    )
    assert r.status_code == 422


def test_duplicate_slug_maps_to_conflict(client, admin, admin_auth):
    body = {"name": "Andrew Bayer", "slug": "andrew-bayer"}
    assert client.post("/artists/", json=body, auth=admin_auth).status_code == 201
    r = client.post("/artists/", json={**body, "name": "Someone Else"}, auth=admin_auth)
    assert r.status_code == 409
    assert len(client.get("/artists/").json()) == 1


def test_radio_shows_and_playlists_routes(client, admin, admin_auth):
    r = client.post("/radio-shows/", json={"title": "Group Therapy", "episode_number": 601}, auth=admin_auth)
    assert r.status_code == 201
    show_id = r.json()["id"]
    assert client.get("/radio-shows/").json()[0]["episode_number"] == 601

    r = client.patch(f"/radio-shows/{show_id}", json={"host": "Above & Beyond"}, auth=admin_auth)
    assert r.json()["host"] == "Above & Beyond"

    r = client.post("/playlists/", json={"title": "Anjunadeep Essentials", "track_count": 50}, auth=admin_auth)
    assert r.status_code == 201
    assert client.get(f"/playlists/{r.json()['id']}").json()["track_count"] == 50


def test_posts_and_videos_routes(client, admin, admin_auth):
    r = client.post("/posts/", json={"title": "Tour dates", "slug": "tour-dates", "content": "..."}, auth=admin_auth)
    assert r.status_code == 201
    assert [p["slug"] for p in client.get("/posts/").json()] == ["tour-dates"]

    r = client.post("/videos/", json={"title": "Live", "video_url": "https://youtu.be/x"}, auth=admin_auth)
    assert r.status_code == 201
    video_id = r.json()["id"]
    assert client.delete(f"/videos/{video_id}", auth=admin_auth).status_code == 204
    assert client.get("/videos/").json() == []


def test_patch_null_on_required_column_is_validation_error(client, admin, admin_auth):
    release_id = client.post(
        "/releases/", json={"title": "A", "artist_name": "B"}, auth=admin_auth
    ).json()["id"]

    assert client.patch(f"/releases/{release_id}", json={"title": None}, auth=admin_auth).status_code == 422
    assert client.patch(f"/releases/{release_id}", json={"title": ""}, auth=admin_auth).status_code == 422
    # nullable columns can still be cleared
    r = client.patch(f"/releases/{release_id}", json={"catalog_number": None}, auth=admin_auth)
    assert r.status_code == 200
    assert client.get(f"/releases/{release_id}").json()["title"] == "A"
