from app.main import RATE_LIMIT_BODY


def test_register_returns_user_without_password_and_token(client):
    resp = client.post(
        "/auth/register",
        json={
            "name": "  Alice ",
            "email": "Alice@Mail.com",
            "password": "secret123",
            "address": {"city": "Krakow", "country": "PL"},
            "phone_number": "+48123456789",
        },
    )

    assert resp.status_code == 201
    data = resp.json()
    assert data["token"]
    assert "password" not in data["user"]
    assert data["user"]["email"] == "alice@mail.com"
    assert data["user"]["name"] == "Alice"
    assert data["user"]["address"]["city"] == "Krakow"
    assert data["user"]["address"]["street"] is None


def test_register_twice_with_same_email_case_insensitive_fails(client):
    first = client.post("/auth/register", json={"name": "A", "email": "bob@mail.com", "password": "secret123"})
    second = client.post("/auth/register", json={"name": "B", "email": "BOB@mail.com", "password": "other123"})

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.json()["detail"] == "User already exists"


def test_register_validation_errors_are_listed(client):
    resp = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@mail.com", "password": "123", "phone_number": "abc", "avatar": "ftp://x"},
    )

    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert {"password", "phone_number", "avatar"} <= fields


def test_register_accepts_empty_avatar(client):
    resp = client.post("/auth/register", json={"name": "A", "email": "a@mail.com", "password": "secret123", "avatar": ""})
    assert resp.status_code == 201


def test_login_success(client, register):
    register(email="carol@mail.com")

    resp = client.post("/auth/login", json={"email": "CAROL@mail.com", "password": "secret123"})

    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "carol@mail.com"
    assert "password" not in resp.json()["user"]


def test_login_wrong_password_and_unknown_email_look_the_same(client, register):
    register(email="dave@mail.com")

    wrong_password = client.post("/auth/login", json={"email": "dave@mail.com", "password": "nope-nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@mail.com", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"detail": "Invalid email or password"}


def test_login_token_works_on_protected_route(client, register):
    register(email="erin@mail.com")
    token = client.post("/auth/login", json={"email": "erin@mail.com", "password": "secret123"}).json()["token"]

    resp = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 200


def test_auth_routes_are_rate_limited(client):
    statuses = [
        client.post("/auth/login", json={"email": "x@mail.com", "password": "whatever"}).status_code
        for _ in range(6)
    ]

    assert statuses[:5] == [401] * 5
    assert statuses[5] == 429

    resp = client.post("/auth/register", json={"name": "A", "email": "y@mail.com", "password": "secret123"})
    assert resp.status_code == 429
    assert resp.json() == RATE_LIMIT_BODY


def test_rate_limit_does_not_apply_outside_auth(client, register):
    _, headers = register()
    for _ in range(10):
        assert client.get("/health").status_code == 200
    assert client.get("/users", headers=headers).status_code == 200


def test_register_accepts_empty_phone_number(client):
    resp = client.post(
        "/auth/register",
        json={"name": "A", "email": "a@mail.com", "password": "secret123", "phone_number": ""},
    )
    assert resp.status_code == 201
    assert resp.json()["user"]["phone_number"] == ""
