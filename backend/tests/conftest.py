"""
Test Configuration for SkillMatch

Environment setup and shared fixtures. The environment is set before the
application is imported because settings are read once and cached.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-skillmatch")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_TO_FILE"] = "false"
os.environ.pop("JOBS_SEED_FILE", None)

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.main import app
from app.core.database import DatabaseManager


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast)")
    config.addinivalue_line("markers", "api: marks tests as API tests")


@pytest.fixture
def client():
    """Test client with application lifespan and a fresh in-memory database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def database():
    """Initialized in-memory database manager."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.init_database()
    yield manager
    await manager.close_connections()


def signup_and_login(client: TestClient, username: str = "alice", password: str = "s3cret-pass") -> dict:
    """Create an account and return bearer headers for it."""
    response = client.post(
        "/api/v1/user/signup",
        json={"username": username, "password": password, "type": "student"}
    )
    assert response.status_code == 201, response.text

    response = client.post(
        "/api/v1/user/login",
        json={"username": username, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for a freshly created user."""
    return signup_and_login(client)


@pytest.fixture
def sample_catalog():
    """Catalog in the jobs.json shape."""
    return {
        "Frontend Developer": {
            "courseId": "FE101",
            "requiredSkills": ["React", "JavaScript", "CSS"]
        },
        "Mobile Developer": {
            "courseId": "MB201",
            "requiredSkills": ["React", "JavaScript", "React Native", "Swift", "Kotlin"]
        },
        "Data Analyst": {
            "courseId": "DA301",
            "requiredSkills": ["Excel", "SQL", "Python"]
        },
        "Unspecified Role": {
            "courseId": "UN000",
            "requiredSkills": []
        }
    }
