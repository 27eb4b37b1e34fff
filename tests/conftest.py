"""Pytest configuration and fixtures."""

import os
import tempfile

# Uploads and exports go to a throwaway directory; must be set before settings load
os.environ.setdefault("STORAGE_DIR", tempfile.mkdtemp(prefix="portfoliopro-storage-"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from src.database import Base, get_db
from src.main import app


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's details."""

    def __init__(self, *args, user_id: str | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/portfoliopro", "/portfoliopro_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
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


@pytest.fixture
def register_user(client):
    """Return a function that registers a user and returns their auth headers."""

    def _register(username: str, email: str | None = None, password: str = "testpass123"):
        response = client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username.lower()}@example.com",
                "password_hash": password,
                "full_name": username.title(),
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return AuthHeaders(
            {"Authorization": f"Bearer {data['token']}"},
            user_id=data["user"]["id"],
            username=data["user"]["username"],
        )

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Create a user and return auth headers with user info."""
    return register_user("alice")


@pytest.fixture
def other_auth_headers(register_user):
    """A second user who owns nothing of the first user's."""
    return register_user("mallory")


@pytest.fixture
def site(client, auth_headers):
    """A site owned by the auth_headers user."""
    response = client.post(
        "/api/sites",
        headers=auth_headers,
        json={"site_title": "Alice's Portfolio", "tagline": "Designer & developer"},
    )
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def project(client, auth_headers, site):
    """A project on the site fixture."""
    response = client.post(
        f"/api/sites/{site['site_id']}/projects",
        headers=auth_headers,
        json={
            "title": "Weather Dashboard",
            "description": "Forecasts on a map",
            "date": "2024-05-01",
            "tags": ["react", "maps"],
        },
    )
    assert response.status_code == 201
    return response.json()["data"]
