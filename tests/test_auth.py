def test_register_logs_in_and_hides_password(client):
    resp = client.post(
        "/api/v1/auth/register",
        json={"name": "Carol", "email": "Carol@Example.com", "password": "long-enough"},
    )
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["email"] == "carol@example.com"
    assert "password" not in body and "passwordHash" not in body

    session = client.get("/api/v1/auth/session")
    assert session.status_code == 200
    assert session.get_json()["id"] == body["id"]


def test_register_validation(client):
    assert client.post(
        "/api/v1/auth/register", json={"name": "C", "email": "nope", "password": "long-enough"}
    ).status_code == 400
    assert client.post(
        "/api/v1/auth/register", json={"name": "C", "email": "c@example.com", "password": "short"}
    ).status_code == 400


def test_duplicate_email_conflicts(client, user_client):
    resp = client.post(
        "/api/v1/auth/register",
        json={"name": "Other", "email": "alice@example.com", "password": "long-enough"},
    )
    assert resp.status_code == 409


def test_login_and_logout(app, user_client):
    assert user_client.post("/api/v1/auth/logout").status_code == 200
    assert user_client.get("/api/v1/auth/session").status_code == 401

    fresh = app.test_client()
    bad = fresh.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": "wrong-pass"})
    assert bad.status_code == 401
    assert bad.get_json() == {"error": "Invalid credentials"}

    good = fresh.post("/api/v1/auth/login", json={"email": "ALICE@example.com", "password": "s3cret-pass"})
    assert good.status_code == 200
    assert fresh.get("/api/v1/categories").status_code == 200
