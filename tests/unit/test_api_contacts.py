def _submit(client, **overrides):
    body = {"name": "Sam", "email": "sam@example.com", "message": "Loved the show", "category": "general"}
    body.update(overrides)
    return client.post("/contacts/", json=body)


def test_contact_form_is_public(client):
    r = _submit(client)
    assert r.status_code == 201, r.text
    assert r.json()["status"] == "new"


def test_contact_form_validates_email(client):
    assert _submit(client, email="not-an-email").status_code == 422
    assert _submit(client, message="").status_code == 422


def test_reading_contacts_requires_admin(client, admin, admin_auth):
    contact_id = _submit(client).json()["id"]
    assert client.get("/contacts/").status_code == 401
    assert client.get(f"/contacts/{contact_id}").status_code == 401

    r = client.get("/contacts/", auth=admin_auth)
    assert r.status_code == 200
    assert [c["id"] for c in r.json()] == [contact_id]


def test_admin_triages_and_deletes_contact(client, admin, admin_auth):
    contact_id = _submit(client, category="demo").json()["id"]

    r = client.patch(f"/contacts/{contact_id}", json={"status": "read"}, auth=admin_auth)
    assert r.status_code == 200
    assert r.json()["status"] == "read"
    assert r.json()["category"] == "demo"

    assert client.patch(f"/contacts/{contact_id}", json={"status": "lost"}, auth=admin_auth).status_code == 422

    assert client.delete(f"/contacts/{contact_id}", auth=admin_auth).status_code == 204
    assert client.get(f"/contacts/{contact_id}", auth=admin_auth).status_code == 404


def test_admin_corrects_contact_details(client, admin, admin_auth):
    contact_id = _submit(client).json()["id"]

    r = client.patch(
        f"/contacts/{contact_id}",
        json={"name": "Samantha", "email": "sam@label.example", "message": "Loved the show!"},
        auth=admin_auth,
    )
    assert r.status_code == 200
    body = r.json()
    assert (body["name"], body["email"], body["message"]) == ("Samantha", "sam@label.example", "Loved the show!")
    assert body["status"] == "new"

    assert client.patch(f"/contacts/{contact_id}", json={"email": None}, auth=admin_auth).status_code == 422
