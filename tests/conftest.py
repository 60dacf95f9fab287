"""Pytest configuration and fixtures for testing."""
import os
from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment before importing app modules
os.environ["POSTGRES_HOST"] = "localhost"
os.environ["POSTGRES_PORT"] = "5432"
os.environ["POSTGRES_DB"] = "test_db"
os.environ["POSTGRES_USER"] = "postgres"
os.environ["POSTGRES_PASSWORD"] = "postgres"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["BCRYPT_ROUNDS"] = "4"

from app.adapters.configuration.config import Settings
from app.adapters.outbound.persistence.database import Database
from app.main import create_app
from app.shared.utils.datetime_utils import utc_now


@pytest.fixture
def test_settings() -> Settings:
    return Settings()


@pytest.fixture
async def database(test_settings):
    """Fresh in-memory SQLite database for each test."""
    db = Database(test_settings.DATABASE_URL, test_settings)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.dispose()


@pytest.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
async def api_client(database, test_settings):
    """HTTP client bound to an application that uses the test database."""
    app = create_app(test_settings)
    # ASGITransport does not run the lifespan, so install the database directly
    app.state.database = database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def client_payload():
    return {
        "name": "Ana Ruiz",
        "email": "ana@x.com",
        "password": "123456",
        "phone": "+573000000",
        "age": 25,
    }


def future_iso(**delta) -> str:
    """ISO-8601 UTC timestamp in the future (one hour ahead by default)."""
    return (utc_now() + timedelta(**(delta or {"hours": 1}))).isoformat()


@pytest.fixture
def future_date():
    return future_iso


@pytest.fixture
async def created_client(api_client, client_payload):
    response = await api_client.post("/api/clients", json=client_payload)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def reservation_payload(created_client):
    return {
        "clientId": created_client["id"],
        "vehicle": "Toyota Corolla 2018",
        "service": "Oil change",
        "scheduledDate": future_iso(days=2),
        "notes": "Synthetic oil",
    }
