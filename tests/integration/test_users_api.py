def test_unique_email(client, make_user):
    make_user("my@email.com")
    user = make_user("xxmy@email.com")

    resp = client.put(f"/api/v1/auth/users/{user.id}", json={"email": "my@email.com"})
    assert resp.status_code == 422, resp.text
    assert resp.json()["errors"] == {"email": ["The email has already been taken."]}


def test_create_user(client):
    resp = client.post(
        "/api/v1/auth/users",
        json={"first_name": "Ann", "last_name": "Lee", "email": "ann@example.com"},
    )
    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["email"] == "ann@example.com"
    assert data["roles"] == [] and data["permissions"] == []


def test_create_user_requires_fields(client):
    resp = client.post("/api/v1/auth/users", json={"first_name": "Ann"})
    assert resp.status_code == 422, resp.text
    errors = resp.json()["errors"]
    assert errors["last_name"] == ["The last name field is required."]
    assert errors["email"] == ["The email field is required."]


def test_update_user_partial(client, make_user):
    user = make_user("ann@example.com")
    resp = client.put(f"/api/v1/auth/users/{user.id}", json={"first_name": "Anna"})
    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["first_name"] == "Anna"
    assert data["email"] == "ann@example.com"


def test_list_users_respects_limit(client, make_user):
    for _ in range(5):
        make_user()
    resp = client.get("/api/v1/auth/users", params={"limit": "2"})
    assert resp.status_code == 200, resp.text
    content = resp.json()
    assert len(content["data"]) == 2
    assert content["meta"]["pagination"]["total"] == 5
    assert content["meta"]["pagination"]["total_pages"] == 3


def test_get_missing_user(client):
    assert client.get("/api/v1/auth/users/9999").status_code == 404


def test_out_of_range_user_id_is_not_found(client):
    assert client.get(f"/api/v1/auth/users/{10**30}").status_code == 404
    assert client.put(f"/api/v1/auth/users/{10**30}", json={"first_name": "x"}).status_code == 404
