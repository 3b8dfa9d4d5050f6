import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        username="driver@example.com",
        email="driver@example.com",
        password="examplepass",
        first_name="Dana",
        last_name="Driver",
    )


def _login(client, email="driver@example.com", password="examplepass"):
    return client.post(
        "/api/auth/login/",
        {"email": email, "password": password},
        format="json",
    )


def test_register_creates_user_and_returns_tokens(db, client):
    payload = {
        "email": "New@Example.com",
        "password": "password123",
        "first_name": "New",
        "last_name": "User",
    }
    response = client.post("/api/auth/register/", payload, format="json")

    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "new@example.com"
    assert body["user"]["name"] == "New User"
    assert body["user"]["profile_complete"] is False
    assert "access" in body and "refresh" in body
    assert User.objects.filter(email="new@example.com").exists()


def test_register_with_existing_email_is_rejected(db, client, user):
    payload = {
        "email": "driver@example.com",
        "password": "password123",
    }
    response = client.post("/api/auth/register/", payload, format="json")

    assert response.status_code == 400
    assert "email" in response.json()


def test_login_returns_tokens_and_user_payload(db, client, user):
    response = _login(client)

    assert response.status_code == 200
    data = response.json()
    assert set(data.keys()) == {"access", "refresh", "user"}
    assert data["user"]["email"] == "driver@example.com"


def test_refresh_issues_new_access_token(db, client, user):
    refresh_token = _login(client).json()["refresh"]
    refresh_response = client.post(
        "/api/auth/refresh/", {"refresh": refresh_token}, format="json"
    )

    assert refresh_response.status_code == 200
    assert "access" in refresh_response.json()


def test_me_endpoint_accepts_bearer_token(db, client, user):
    access = _login(client).json()["access"]

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
    response = client.get("/api/auth/me/")

    assert response.status_code == 200
    assert response.json()["email"] == "driver@example.com"


def test_me_endpoint_ignores_non_bearer_scheme(db, client, user):
    access = _login(client).json()["access"]

    client.credentials(HTTP_AUTHORIZATION=f"JWT {access}")
    response = client.get("/api/auth/me/")

    assert response.status_code == 401


def test_me_endpoint_rejects_invalid_token(db, client):
    client.credentials(HTTP_AUTHORIZATION="Bearer not-a-jwt")
    response = client.get("/api/auth/me/")

    assert response.status_code == 401


def test_me_endpoint_requires_authentication(db, client):
    response = client.get("/api/auth/me/")
    assert response.status_code == 401


def test_me_patch_completes_booking_profile(db, client, user):
    client.force_authenticate(user=user)
    payload = {
        "name": "Dana Driver",
        "date_of_birth": "1990-04-12",
        "phone_number": "555-0100",
    }

    response = client.patch("/api/auth/me/", payload, format="json")

    assert response.status_code == 200
    data = response.json()
    assert data["profile_complete"] is True
    user.refresh_from_db()
    assert user.phone_number == "555-0100"
    assert str(user.date_of_birth) == "1990-04-12"


def test_me_patch_keeps_username_in_sync_with_email(db, client, user):
    client.force_authenticate(user=user)

    response = client.patch(
        "/api/auth/me/", {"email": "Updated@Example.com"}, format="json"
    )

    assert response.status_code == 200
    user.refresh_from_db()
    assert user.email == "updated@example.com"
    assert user.username == "updated@example.com"


def test_me_patch_rejects_duplicate_email(db, client, user):
    User.objects.create_user(
        username="taken@example.com",
        email="taken@example.com",
        password="password123",
    )
    client.force_authenticate(user=user)

    response = client.patch(
        "/api/auth/me/",
        {"email": "taken@example.com"},
        format="json",
    )

    assert response.status_code == 400
    assert "email" in response.json()

def test_auth_routes_are_limited_to_register_login_refresh_and_me(db, client, user):
    client.force_authenticate(user=user)

    response = client.post(
        "/api/auth/change-password/",
        {"current_password": "examplepass", "new_password": "newsecurepass"},
        format="json",
    )

    assert response.status_code == 404
    user.refresh_from_db()
    assert user.check_password("examplepass")
