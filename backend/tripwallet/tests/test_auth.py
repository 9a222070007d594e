"""
Tests for authentication endpoints.
"""
from types import SimpleNamespace
from tripwallet.core.security import create_owner_token


def test_register(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "testpassword123"}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "testuser"
    assert "access_token" in body


def test_register_creates_zeroed_finances(client):
    """A new account starts with all fixed parameters at zero."""
    response = client.post(
        "/api/auth/register",
        json={"username": "fresh", "password": "testpassword123"}
    )
    headers = {"Authorization": f"Bearer {response.json()['access_token']}"}
    
    finances = client.get("/api/finances", headers=headers).json()
    assert set(finances.values()) == {0}
    assert len(finances) == 8


def test_register_duplicate_username(client):
    """Test registering a taken username."""
    payload = {"username": "dupe", "password": "testpassword123"}
    client.post("/api/auth/register", json=payload)
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 400


def test_login(client):
    """Test user login."""
    client.post(
        "/api/auth/register",
        json={"username": "testuser2", "password": "testpassword123"}
    )
    
    response = client.post(
        "/api/auth/login",
        json={"username": "testuser2", "password": "testpassword123"}
    )
    assert response.status_code == 200
    assert "access_token" in response.json()


def test_login_invalid_credentials(client):
    """Test login with invalid credentials."""
    response = client.post(
        "/api/auth/login",
        json={"username": "nonexistent", "password": "wrongpassword"}
    )
    assert response.status_code == 401


def test_protected_route_requires_token(client):
    response = client.get("/api/data")
    assert response.status_code == 401


def test_protected_route_rejects_bad_token(client):
    response = client.get("/api/data", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_token_for_unknown_owner_rejected(client):
    token = create_owner_token(SimpleNamespace(id=9999, username="ghost"))
    response = client.get("/api/data", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
