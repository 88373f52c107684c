"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

from minilinkedin.config import Settings
from minilinkedin.database import Base, Database, get_db
from minilinkedin.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/minilinkedin", "/minilinkedin_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

TEST_PASSWORD = "testpass123"


def build_settings(**overrides) -> Settings:
    values = {
        "database_url": SQLALCHEMY_DATABASE_URL,
        "jwt_secret": "test-secret",
        "environment": "test",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(scope="session")
def database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database = Database(SQLALCHEMY_DATABASE_URL)
    test_database.create_all()
    yield test_database
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db(database):
    """Create a fresh database session for each test with cleanup."""
    session = database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def make_settings():
    """Factory for test settings with per-test overrides."""
    return build_settings


@pytest.fixture
def settings():
    return build_settings()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture(scope="function")
def client(app, db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, name: str) -> AuthHeaders:
    """Register a user through the API and return their auth headers."""
    response = client.post(
        "/api/auth/register",
        json={"email": email, "password": TEST_PASSWORD, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com", "Test User")


@pytest.fixture
def other_auth_headers(client):
    """A second user, for ownership checks."""
    return register(client, "other@example.com", "Other User")


@pytest.fixture
def register_user(client):
    """Factory registering extra users: register_user(email, name) -> AuthHeaders."""
    return lambda email, name: register(client, email, name)
