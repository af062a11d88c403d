# /tests/test_auth_router.py

from datetime import timedelta

from app.core import security


def test_signup_returns_user_and_token(client):
    response = client.post(
        "/api/auth/signup",
        json={"email": "Ada@Example.com", "password": "hunter22", "displayName": "Ada"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["displayName"] == "Ada"
    assert "password" not in body["user"]
    assert security.decode_access_token(body["token"]) == body["user"]["id"]


def test_duplicate_email_is_a_conflict(client, signup):
    signup(email="dup@example.com")
    response = client.post(
        "/api/auth/signup",
        json={"email": "dup@example.com", "password": "another1", "displayName": "Dup"},
    )
    assert response.status_code == 409
    assert response.json() == {"error": "Email already exists"}


def test_signup_with_bad_body_is_invalid_input(client):
    response = client.post("/api/auth/signup", json={"email": "not-an-email", "password": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input"}


def test_login_round_trip(client, signup):
    user, _ = signup(email="login@example.com", password="correct-horse")

    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "correct-horse"})

    assert response.status_code == 200
    assert response.json()["user"]["id"] == user["id"]


def test_login_wrong_password(client, signup):
    signup(email="login@example.com", password="correct-horse")
    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "wrong-horse"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_missing_fields(client):
    response = client.post("/api/auth/login", json={"email": "someone@example.com"})
    assert response.status_code == 400
    assert response.json() == {"error": "Email and password required"}


def test_expired_token_is_rejected(client, signup):
    user, _ = signup()
    expired = security.create_access_token(subject=user["id"], expires_delta=timedelta(seconds=-1))

    response = client.get("/api/user/profile", headers={"Authorization": f"Bearer {expired}"})

    assert response.status_code == 403


def test_profile_read_and_update(client, signup):
    user, headers = signup(display_name="Before")

    response = client.patch("/api/user/profile", json={"displayName": "After", "bio": "Writes about tea."}, headers=headers)
    assert response.status_code == 200
    assert response.json()["displayName"] == "After"

    profile = client.get("/api/user/profile", headers=headers).json()
    assert profile == {
        "id": user["id"],
        "email": user["email"],
        "displayName": "After",
        "bio": "Writes about tea.",
        "avatar": None,
    }
