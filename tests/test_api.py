"""API surface tests: auth, health and error envelopes."""

from fastapi.testclient import TestClient

from minilinkedin.api.dependencies import get_post_service
from minilinkedin.main import create_app


def test_root_banner(client):
    """Test the service banner."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "active"


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/api/auth/register",
        json={"email": "newuser@example.com", "password": "password123", "name": "New User"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert "token" in data
    assert data["user"]["email"] == "newuser@example.com"
    assert data["user"]["name"] == "New User"
    assert data["user"]["bio"] is None
    assert "password" not in data["user"]
    assert "passwordHash" not in data["user"]


def test_register_duplicate_email(client, auth_headers):
    """Test registration with duplicate email fails."""
    response = client.post(
        "/api/auth/register",
        json={"email": auth_headers.email, "password": "password123", "name": "Duplicate"},
    )
    assert response.status_code == 400
    assert "already registered" in response.json()["message"]


def test_register_short_name(client):
    """Test registration rejects a one-character name."""
    response = client.post(
        "/api/auth/register",
        json={"email": "short@example.com", "password": "password123", "name": " A "},
    )
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "Validation failed"
    assert data["errors"][0]["field"] == "name"


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    assert "token" in response.json()
    assert response.json()["user"]["id"] == auth_headers.user_id


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid email or password"


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["user"]["email"] == auth_headers.email


def test_unauthorized_access(client):
    """Test that private endpoints require authentication."""
    response = client.post("/api/posts", json={"content": "hello"})
    assert response.status_code == 401
    assert response.json()["message"] == "Access token required"


def test_invalid_token(client):
    """Test that a garbage token is rejected."""
    response = client.get("/api/users/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_route_not_found(client):
    """Test that unmatched routes return the not-found envelope."""
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"message": "Route not found"}


class ExplodingPostService:
    def list_posts(self, params):
        raise RuntimeError("database on fire")


def test_unhandled_error_hides_detail(database, make_settings):
    """Test that 500 responses only carry the error detail in development."""
    app = create_app(make_settings(environment="test"), database=database)
    app.dependency_overrides[get_post_service] = ExplodingPostService

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/posts")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong!"}


def test_unhandled_error_detail_in_development(database, make_settings):
    """Test that development mode exposes the error message."""
    app = create_app(make_settings(environment="development"), database=database)
    app.dependency_overrides[get_post_service] = ExplodingPostService

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/posts")

    assert response.status_code == 500
    assert response.json()["error"] == "database on fire"


def test_trailing_slash_redirects(client):
    """Test that a trailing slash still redirects to the matching route."""
    response = client.get("/api/posts/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"].endswith("/api/posts")

    response = client.get("/api/posts/")
    assert response.status_code == 200
